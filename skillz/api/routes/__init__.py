"""
API routes package.
"""
