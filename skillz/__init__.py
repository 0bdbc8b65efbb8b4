"""
Skillz career service.

Skill tree progression driven by job experience, and resume-skill
association with a two-resume comparison and merge engine.
"""

__version__ = "0.1.0"
