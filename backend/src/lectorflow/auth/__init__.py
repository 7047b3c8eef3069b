"""Authentication module - bearer token validation and caller identity"""
