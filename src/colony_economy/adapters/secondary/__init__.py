"""Secondary (driven) adapters"""
