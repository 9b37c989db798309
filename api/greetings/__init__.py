"""
Greeting, greeting-list and health endpoints.
"""
