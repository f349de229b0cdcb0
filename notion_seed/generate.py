"""
Seeding of Notion databases with synthetic pages.
"""

import logging
from datetime import datetime, timezone
from typing import Dict, List, Optional, Any, Tuple
from pydantic import BaseModel, Field

from .schemas import SeedConfig, parse_properties
from .client import create_notion_client
from .generators import PropertyValueGenerator
from .formatters import extract_value_to_string
from .utils import parse_timestamp

# Configure logging
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)


class NoAccessibleDatabaseError(RuntimeError):
    """Raised when the integration cannot see any database."""

    def __init__(self, message: str = "This bot doesn't have access to any databases!"):
        super().__init__(message)


class RunSummary(BaseModel):
    """Outcome of a seeding run."""
    database_id: str
    created_page_ids: List[str] = Field(default_factory=list)
    new_pages: List[Dict[str, Any]] = Field(default_factory=list)
    num_old_rows: int = 0


def partition_pages(pages: List[Dict[str, Any]], start_time: datetime) -> Tuple[List[Dict[str, Any]], int]:
    """
    Split queried pages into those created after start_time and the rest.

    Args:
        pages: Page objects returned by a database query
        start_time: Timestamp captured before any page was written

    Returns:
        Tuple of (new pages in query order, number of old pages). A page created
        exactly at start_time counts as old.
    """
    start_time = parse_timestamp(start_time)
    new_pages = []
    num_old_rows = 0
    for page in pages:
        if parse_timestamp(page["created_time"]) <= start_time:
            num_old_rows += 1
        else:
            new_pages.append(page)
    return new_pages, num_old_rows


def format_page(page: Dict[str, Any]) -> List[str]:
    """Return the report lines for one page: a header and one line per property."""
    lines = [f"New page: {page['id']}"]
    for name, prop in page["properties"].items():
        lines.append(f" - {name} {prop['id']} - {extract_value_to_string(prop)}")
    return lines


class SyntheticPageGenerator:
    """Fills a Notion database with synthetic pages and reports what was written."""

    def __init__(self, config: Optional[SeedConfig] = None, client=None,
                 value_generator: Optional[PropertyValueGenerator] = None):
        """
        Initialize the page generator.

        Args:
            config: Run configuration. If None, it is read from the environment.
            client: Object providing list_databases, retrieve_schema, create_page and
                    query_pages. If None, a NotionDatabaseClient is created from the config.
            value_generator: Generator for property values. If None, an unseeded one is used.
        """
        if config is None:
            config = SeedConfig.from_env()
        self.config = config
        self.client = client or create_notion_client(notion_key=config.notion_key)
        self.value_generator = value_generator or PropertyValueGenerator()

    def select_database_id(self) -> str:
        """Return the configured database id, or the first database the integration can access."""
        if self.config.database_id:
            return self.config.database_id

        databases = self.client.list_databases()
        if not databases:
            raise NoAccessibleDatabaseError()
        return databases[0]["id"]

    def create_pages(self, database_id: str, schema: Dict[str, Any]) -> List[str]:
        """Create config.record_count pages one after another and return their ids."""
        created = []
        for i in range(self.config.record_count):
            properties = self.value_generator.generate_properties(schema)
            page = self.client.create_page(database_id, properties)
            page_id = page["id"]
            logger.info(f"Created page {i + 1}/{self.config.record_count}: {page_id}")
            created.append(page_id)
        return created

    def run(self) -> RunSummary:
        """
        Seed the database and print the pages created during this run.

        Returns:
            RunSummary describing the run

        Raises:
            NoAccessibleDatabaseError: If no database is configured or accessible
        """
        database_id = self.select_database_id()
        logger.info(f"Using database {database_id}")

        schema = parse_properties(self.client.retrieve_schema(database_id))

        start_time = datetime.now(timezone.utc)
        summary = RunSummary(database_id=database_id)
        summary.created_page_ids = self.create_pages(database_id, schema)

        pages = self.client.query_pages(database_id)
        summary.new_pages, summary.num_old_rows = partition_pages(pages, start_time)

        for page in summary.new_pages:
            for line in format_page(page):
                print(line)

        print(f"did not print {summary.num_old_rows} old rows")
        return summary
