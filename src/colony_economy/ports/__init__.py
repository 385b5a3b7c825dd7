"""Port interfaces for dependency inversion"""
