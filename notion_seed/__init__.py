"""
Notion Seed - Synthetic Page Generation for Notion Databases

Reads a Notion database's schema, fills it with randomly generated pages
and prints back the pages created during the run.
"""

from .generate import SyntheticPageGenerator, NoAccessibleDatabaseError, RunSummary
from .generators import PropertyValueGenerator
from .formatters import extract_value_to_string, UnhandledPropertyTypeError
from .schemas import SeedConfig, PropertyDefinition

__all__ = [
    'SyntheticPageGenerator',
    'PropertyValueGenerator',
    'extract_value_to_string',
    'SeedConfig',
    'PropertyDefinition',
    'RunSummary',
    'NoAccessibleDatabaseError',
    'UnhandledPropertyTypeError'
]

__version__ = '0.1.0'
__license__ = 'LGPL-3.0-or-later'
__description__ = 'Fill Notion databases with synthetic pages generated from their schema'
