"""
Schema definitions for the notion_seed package.
Contains Pydantic models for run configuration and Notion property definitions.
"""

import os
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Dict, Optional, Any, List, FrozenSet
from dotenv import load_dotenv


# Property types the generator knows how to fill in
GENERATED_PROPERTY_TYPES: FrozenSet[str] = frozenset({
    'date', 'multi_select', 'select', 'email', 'checkbox', 'url',
    'number', 'title', 'rich_text', 'phone_number',
})

# Property value types that can come back from a database query
READ_PROPERTY_TYPES: FrozenSet[str] = frozenset({
    'checkbox', 'created_by', 'created_time', 'date', 'email', 'url',
    'number', 'phone_number', 'select', 'multi_select', 'people',
    'last_edited_by', 'last_edited_time', 'title', 'rich_text', 'files',
    'formula', 'rollup',
})

FORMULA_RESULT_TYPES: FrozenSet[str] = frozenset({'string', 'number', 'boolean', 'date'})

ROLLUP_RESULT_TYPES: FrozenSet[str] = frozenset({'number', 'date', 'array'})

# Types whose definition carries an option list
OPTION_PROPERTY_TYPES: FrozenSet[str] = frozenset({'select', 'multi_select'})


class SeedConfig(BaseModel):
    """
    Configuration for a seeding run.

    Values are normally read from the environment (optionally populated from a
    local .env file) through ``SeedConfig.from_env``.
    """

    notion_key: str = Field(..., description="Integration token used to authenticate against the Notion API")
    database_id: Optional[str] = Field(None, description="Database to seed. If not set, the first accessible database is used")
    record_count: int = Field(10, ge=1, description="Number of synthetic pages to create")

    @field_validator("notion_key")
    @classmethod
    def validate_notion_key(cls, v):
        if not v or not v.strip():
            raise ValueError("notion_key cannot be empty")
        return v

    @classmethod
    def from_env(cls, dotenv_path: Optional[str] = None, **overrides) -> "SeedConfig":
        """
        Build a configuration from environment variables.

        Args:
            dotenv_path: Optional path to a .env file. If not provided, python-dotenv
                         searches for one starting from the current directory.
            **overrides: Values that take precedence over the environment

        Returns:
            SeedConfig instance

        Raises:
            ValueError: If NOTION_KEY is not set
        """
        load_dotenv(dotenv_path)

        notion_key = os.environ.get("NOTION_KEY")
        if not notion_key and "notion_key" not in overrides:
            raise ValueError("NOTION_KEY environment variable is not set")

        values: Dict[str, Any] = {"notion_key": notion_key}
        if os.environ.get("NOTION_DATABASE_ID"):
            values["database_id"] = os.environ["NOTION_DATABASE_ID"]
        if os.environ.get("NOTION_SEED_RECORD_COUNT"):
            values["record_count"] = os.environ["NOTION_SEED_RECORD_COUNT"]
        values.update(overrides)

        return cls(**values)


class SelectOption(BaseModel):
    """An option declared on a select or multi_select property"""
    model_config = ConfigDict(frozen=True, extra="ignore")

    id: Optional[str] = None
    name: str
    color: Optional[str] = None


class PropertyDefinition(BaseModel):
    """One named, typed property of a database schema"""
    model_config = ConfigDict(frozen=True)

    name: str
    id: str
    type: str
    options: List[SelectOption] = Field(default_factory=list)

    @classmethod
    def from_api(cls, name: str, raw: Dict[str, Any]) -> "PropertyDefinition":
        """
        Parse a property definition as returned by the databases endpoint.

        Args:
            name: Property name (the key in the database's properties map)
            raw: Raw property object, e.g.
                 {"id": "abc", "type": "select", "select": {"options": [...]}}

        Returns:
            PropertyDefinition instance
        """
        prop_type = raw["type"]
        options = []
        if prop_type in OPTION_PROPERTY_TYPES:
            config = raw.get(prop_type) or {}
            options = [SelectOption.model_validate(o) for o in config.get("options") or []]

        return cls(name=name, id=raw["id"], type=prop_type, options=options)

    def option_payload(self, option: SelectOption) -> Dict[str, Any]:
        """Return the option in the shape the pages endpoint accepts."""
        return option.model_dump(exclude_none=True)


def parse_properties(properties: Dict[str, Any]) -> Dict[str, PropertyDefinition]:
    """
    Convert a database's raw properties map into PropertyDefinition objects.

    Entries that are already PropertyDefinition instances are passed through.
    """
    schema = {}
    for name, raw in properties.items():
        if isinstance(raw, PropertyDefinition):
            schema[name] = raw
        else:
            schema[name] = PropertyDefinition.from_api(name, raw)
    return schema
