"""Uploads module - intake of storage upload events"""
