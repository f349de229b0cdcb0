"""
Random property value generation for Notion database schemas.
"""

import logging
import random
from datetime import timezone
from faker import Faker
from typing import Dict, Any, Callable, Optional, Union

from .schemas import PropertyDefinition, SelectOption, parse_properties
from .utils import to_iso_string

# Configure logging
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)

# fn(definition) -> type-specific payload, or None to omit the property
TypeGenerator = Callable[[PropertyDefinition], Any]


class PropertyValueGenerator:
    """Generates random, type-correct property values for a database schema."""

    def __init__(self, faker: Optional[Faker] = None, rng: Optional[random.Random] = None,
                 seed: Optional[int] = None):
        """
        Initialize the value generator.

        Args:
            faker: Faker instance used for emails, urls, words, etc. A new one is created if not provided.
            rng: Random source used to sample select options and booleans
            seed: If given, seeds both the Faker instance and the random source
        """
        self.faker = faker or Faker()
        self.rng = rng or random.Random()
        if seed is not None:
            self.faker.seed_instance(seed)
            self.rng.seed(seed)

        # Registry for generators by property type: type_name -> fn(definition) -> payload
        self.type_generators: Dict[str, TypeGenerator] = {
            'date': self._generate_date,
            'multi_select': self._generate_multi_select,
            'select': self._generate_select,
            'email': lambda definition: self.faker.email(),
            'checkbox': lambda definition: self.rng.choice([True, False]),
            'url': lambda definition: self.faker.url(),
            'number': lambda definition: self.faker.pyint(),
            'title': self._generate_title,
            'rich_text': self._generate_rich_text,
            'phone_number': lambda definition: self.faker.phone_number(),
        }

    def register_generator(self, type_name: str, func: TypeGenerator):
        """
        Register a generator for a property type, replacing any existing one.

        Args:
            type_name: The Notion property type this generator handles (e.g. 'status')
            func: Function that takes the PropertyDefinition and returns the type-specific
                  payload, or None to leave the property out of the record
        """
        self.type_generators[type_name] = func

    def get_generator_state(self) -> Dict[str, TypeGenerator]:
        """Get a copy of the current generator registry."""
        return self.type_generators.copy()

    def restore_generator_state(self, state: Dict[str, TypeGenerator]):
        """Restore the generator registry from a previous backup."""
        self.type_generators = state.copy()

    def generate_value(self, definition: PropertyDefinition) -> Optional[Dict[str, Any]]:
        """
        Generate one property value for a definition.

        Returns:
            {"id": ..., "type": ..., <type>: payload}, or None when the type is not
            supported or there is nothing to generate (e.g. a select without options)
        """
        generator = self.type_generators.get(definition.type)
        if generator is None:
            logger.warning(f"unimplemented property type: {definition.type}")
            return None

        payload = generator(definition)
        if payload is None:
            return None

        return {
            'id': definition.id,
            'type': definition.type,
            definition.type: payload,
        }

    def generate_properties(self, schema: Dict[str, Union[PropertyDefinition, Dict[str, Any]]]) -> Dict[str, Dict[str, Any]]:
        """
        Generate a record of random property values for a database schema.

        Args:
            schema: Mapping of property name to PropertyDefinition, or the raw
                    properties map returned by the databases endpoint

        Returns:
            Mapping of property name to property value, suitable for creating a page.
            Properties with unsupported types or empty option lists are left out.
        """
        record = {}
        for name, definition in parse_properties(schema).items():
            value = self.generate_value(definition)
            if value is not None:
                record[name] = value
        return record

    def _sample_option(self, definition: PropertyDefinition) -> Optional[SelectOption]:
        if not definition.options:
            return None
        return self.rng.choice(definition.options)

    def _generate_date(self, definition):
        past = self.faker.past_datetime(tzinfo=timezone.utc)
        return {'start': to_iso_string(past)}

    def _generate_select(self, definition):
        option = self._sample_option(definition)
        if option is None:
            return None
        return definition.option_payload(option)

    def _generate_multi_select(self, definition):
        option = self._sample_option(definition)
        if option is None:
            return None
        return [definition.option_payload(option)]

    def _generate_title(self, definition):
        return [{'type': 'text', 'text': {'content': ' '.join(self.faker.words(3))}}]

    def _generate_rich_text(self, definition):
        return [{'type': 'text', 'text': {'content': self.faker.first_name()}}]
