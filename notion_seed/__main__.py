"""
Seed the first Notion database the integration can access with synthetic pages.

Usage:
    NOTION_KEY=secret_... python -m notion_seed
"""

from .generate import SyntheticPageGenerator
from .schemas import SeedConfig


def main():
    config = SeedConfig.from_env()
    SyntheticPageGenerator(config=config).run()


if __name__ == "__main__":
    main()
