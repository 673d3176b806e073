"""
jsonspan configuration utilities.
"""
