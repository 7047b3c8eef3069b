"""Domain layer - pure review workflow rules with no framework dependencies"""
