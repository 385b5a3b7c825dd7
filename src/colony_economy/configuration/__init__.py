"""Settings and dependency wiring"""
