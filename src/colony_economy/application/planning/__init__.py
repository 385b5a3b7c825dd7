"""Chain planning commands and queries"""
