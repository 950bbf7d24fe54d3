"""
API package - HTTP routes, middleware and exception handlers.
"""
