"""Primary (driving) adapters"""
