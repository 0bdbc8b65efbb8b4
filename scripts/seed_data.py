#!/usr/bin/env python3
"""
Seed the skill catalog (categories, skills and tree) for development.

Safe to run repeatedly: rows that already exist are left alone.
"""

import asyncio
import os
import sys

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from skillz.config.logging import configure_logging, get_logger
from skillz.config.settings import settings
from skillz.infrastructure.database.seeds.skill_catalog import seed_skill_catalog

configure_logging()
logger = get_logger(__name__)


def get_seed_database_url() -> str:
    """Get database URL for seeding."""
    # Allow override for Docker environment
    return os.getenv("MIGRATION_DATABASE_URL") or str(settings.DATABASE_URL)


async def seed_database() -> None:
    database_url = get_seed_database_url()
    logger.info("Seeding skill catalog", database=database_url.split("@")[-1])

    engine = create_async_engine(database_url)
    session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    try:
        async with session_factory() as session:
            summary = await seed_skill_catalog(session)
    finally:
        await engine.dispose()

    logger.info(
        "Seeding completed",
        categories_created=summary.categories_created,
        skills_created=summary.skills_created,
        nodes_created=summary.nodes_created,
    )


if __name__ == "__main__":
    try:
        asyncio.run(seed_database())
    except Exception as e:
        logger.error("Seeding failed", error=str(e))
        sys.exit(1)
