"""
Notion database client used by the page generator.
Wraps the official notion-client SDK behind the four calls the generator needs.
"""

import os
from notion_client import Client
from typing import Optional, Dict, Any, List


class NotionDatabaseClient:
    """
    A minimal client for listing, reading and writing Notion databases.

    Only list_databases, retrieve_schema, create_page and query_pages are used by
    SyntheticPageGenerator, so any object providing them can be substituted.
    """

    def __init__(self, notion_key: Optional[str] = None, client: Optional[Client] = None, **kwargs):
        """
        Initialize the Notion client.

        Args:
            notion_key: Integration token. If not provided, the NOTION_KEY
                        environment variable is used.
            client: Optional pre-built notion_client.Client
            **kwargs: Additional keyword arguments passed to notion_client.Client
        """
        self.notion_key = notion_key or os.environ.get("NOTION_KEY")

        if client is not None:
            self.client = client
        else:
            if not self.notion_key:
                raise ValueError("No Notion key provided and NOTION_KEY environment variable is not set")
            self.client = Client(auth=self.notion_key, **kwargs)

    def list_databases(self) -> List[Dict[str, Any]]:
        """
        List the databases the integration has access to.

        Returns:
            List of database objects, in the order the API returns them
        """
        response = self.client.search(filter={"property": "object", "value": "database"})
        return response["results"]

    def retrieve_schema(self, database_id: str) -> Dict[str, Any]:
        """
        Retrieve the properties map of a database.

        Returns:
            Mapping of property name to raw property definition
        """
        database = self.client.databases.retrieve(database_id=database_id)
        return database["properties"]

    def create_page(self, database_id: str, properties: Dict[str, Any]) -> Dict[str, Any]:
        """Create a page in the database and return the created page object."""
        return self.client.pages.create(
            parent={"database_id": database_id},
            properties=properties,
        )

    def query_pages(self, database_id: str) -> List[Dict[str, Any]]:
        """
        Query the database for its pages.

        Only the first page of results is returned.
        """
        response = self.client.databases.query(database_id=database_id)
        return response["results"]


def create_notion_client(notion_key: Optional[str] = None, **kwargs) -> NotionDatabaseClient:
    """
    Factory function to create a Notion database client.

    Args:
        notion_key: Optional integration token (defaults to NOTION_KEY)
        **kwargs: Additional keyword arguments passed to notion_client.Client

    Returns:
        Initialized NotionDatabaseClient instance
    """
    return NotionDatabaseClient(notion_key=notion_key, **kwargs)
