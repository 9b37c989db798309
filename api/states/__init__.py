"""
Read-only US states directory: search and lookup by id.
"""
