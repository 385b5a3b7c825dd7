"""Domain layer - economic model and production-chain planning"""
