"""
HTTP API package.
"""
