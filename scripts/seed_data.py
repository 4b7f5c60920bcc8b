"""
Seed Data Script
Populates the company directory for local development

Run from backend/src:

    python ../../scripts/seed_data.py
"""
import asyncio
import os
import sys

from sqlalchemy import select

# Add backend/src to path
sys.path.append(os.getcwd())

from core.database import get_db_session, close_db
from infrastructure.persistence.models import CompanyModel


COMPANIES = [
    {
        "name": "Google",
        "industry": "Technology",
        "website": "https://google.com",
        "location": "Mountain View, CA",
        "description": "Search engine and technology company",
        "size": "10000+",
    },
    {
        "name": "Microsoft",
        "industry": "Technology",
        "website": "https://microsoft.com",
        "location": "Redmond, WA",
        "description": "Software and cloud services company",
        "size": "10000+",
    },
    {
        "name": "Meta",
        "industry": "Technology",
        "website": "https://meta.com",
        "location": "Menlo Park, CA",
        "description": "Social media and virtual reality company",
        "size": "10000+",
    },
]


async def seed_database():
    """Insert the seed companies; existing names are left untouched"""
    print("🌱 Seeding database...")

    async with get_db_session() as session:
        result = await session.execute(select(CompanyModel.name))
        existing = set(result.scalars().all())

        created = [CompanyModel(**data) for data in COMPANIES if data["name"] not in existing]
        session.add_all(created)

    print(f"✅ Created {len(created)} companies ({len(existing)} already present)")
    await close_db()


if __name__ == "__main__":
    asyncio.run(seed_database())
