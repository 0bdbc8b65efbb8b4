"""
Reference data seeds.
"""

from .skill_catalog import seed_skill_catalog

__all__ = ["seed_skill_catalog"]
