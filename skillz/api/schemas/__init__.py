"""
API schemas package.
"""
