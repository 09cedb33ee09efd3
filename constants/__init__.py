"""
Constants Package

Validation limits and search filter names.
"""
