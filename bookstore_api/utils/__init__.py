"""
Utilities Package

Helper functions used across the application:
- parsing.py: identifier, integer and ISO-8601 date parsing
"""
