#!/usr/bin/env python3
"""
Notion Seed Example
Generates random pages for a Notion database and reads them back.

Requires NOTION_KEY in the environment or in a .env file next to where you run it.
"""

from notion_seed import SyntheticPageGenerator, PropertyValueGenerator, SeedConfig


print("🚀 Seeding Notion database with random pages...")

# Reads NOTION_KEY from the environment, loading .env first
config = SeedConfig.from_env(record_count=10)

generator = SyntheticPageGenerator(
    config=config,
    value_generator=PropertyValueGenerator()
)

summary = generator.run()

print(f"\n✅ Created {len(summary.created_page_ids)} pages in database {summary.database_id}")
