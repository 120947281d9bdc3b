"""
Value types (transform options, build requests, loader configuration).
"""
