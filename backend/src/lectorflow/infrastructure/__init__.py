"""Infrastructure adapters for external collaborators"""
