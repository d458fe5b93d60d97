"""
Schema table loading.
This module reads the static attribute tables shipped as JSON package data
and turns them into lists of property definitions.
"""

import json
import logging
import os
from typing import Any, Dict, Iterable, List, Optional, Tuple

from .definition import FLAG_FIELDS, PropertyDefinition, Space

logger = logging.getLogger(__name__)

# Directory holding the bundled tables
DATA_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'data')

# Table names in the order they are loaded by default
TABLE_NAMES = ('xml', 'xlink', 'xmlns', 'aria', 'html', 'svg')


class SchemaTable:
    """
    Definitions for one attribute space.

    Attributes and properties are unique within a table.
    """

    def __init__(self, name: str, space: Space, definitions: Iterable[PropertyDefinition]):
        """
        Initialize a table.

        Args:
            name: Table name (e.g. "html", "aria")
            space: Space stamped on definitions that do not declare one
            definitions: Definitions in table order
        """
        self.name = name
        self.space = space
        self.definitions: Tuple[PropertyDefinition, ...] = tuple(definitions)

        attributes = set()
        properties = set()
        for definition in self.definitions:
            if definition.property in properties:
                raise ValueError(f"Duplicate property {definition.property!r} in table {name!r}")
            if definition.attribute in attributes:
                raise ValueError(f"Duplicate attribute {definition.attribute!r} in table {name!r}")
            properties.add(definition.property)
            attributes.add(definition.attribute)

    def __len__(self) -> int:
        return len(self.definitions)

    def __iter__(self):
        return iter(self.definitions)

    def __repr__(self) -> str:
        return f"SchemaTable({self.name!r}, {self.space.value}, {len(self)} definitions)"


def _case_sensitive(attributes: Dict[str, str], prop: str) -> str:
    return attributes.get(prop, prop)


def _case_insensitive(attributes: Dict[str, str], prop: str) -> str:
    return attributes.get(prop, prop.lower())


def _prefixed(property_prefix: str, attribute_prefix: str):
    """Build a transform replacing a property prefix with an attribute prefix."""
    def transform(attributes: Dict[str, str], prop: str) -> str:
        if prop in attributes:
            return attributes[prop]
        if not prop.startswith(property_prefix):
            raise ValueError(f"Property {prop!r} does not start with {property_prefix!r}")
        return attribute_prefix + prop[len(property_prefix):].lower()
    return transform


def _get_transform(data: Dict[str, Any]):
    """
    Get the attribute transform declared by a table.

    Args:
        data: Raw table data

    Returns:
        Callable mapping (attributes, property) to an attribute name
    """
    name = data.get('transform')
    if name == 'case-sensitive':
        return _case_sensitive
    if name == 'case-insensitive':
        return _case_insensitive
    if name == 'prefixed':
        return _prefixed(data['propertyPrefix'], data['attributePrefix'])
    raise ValueError(f"Unknown attribute transform: {name!r}")


def _reject_duplicates(pairs: List[Tuple[str, Any]]) -> Dict[str, Any]:
    """JSON object hook failing on repeated keys instead of keeping the last."""
    result = {}
    for key, value in pairs:
        if key in result:
            raise ValueError(f"Duplicate key {key!r} in schema table")
        result[key] = value
    return result


def parse_table(name: str, data: Dict[str, Any]) -> SchemaTable:
    """
    Create a table from raw table data.

    Args:
        name: Table name
        data: Parsed JSON table with "space", "transform", "properties" and
            optional "attributes" and "mustUseProperty"

    Returns:
        SchemaTable: The table
    """
    space = Space(data.get('space', Space.NONE.value))
    transform = _get_transform(data)
    attributes = data.get('attributes', {})
    must_use_property = set(data.get('mustUseProperty', []))

    unknown = (set(attributes) | must_use_property) - set(data['properties'])
    if unknown:
        raise ValueError(f"Table {name!r} references undefined properties: {', '.join(sorted(unknown))}")

    definitions = []
    for prop, flags in data['properties'].items():
        kwargs = {}
        for flag in flags or ():
            if flag not in FLAG_FIELDS:
                raise ValueError(f"Unknown flag {flag!r} on {prop!r} in table {name!r}")
            kwargs[FLAG_FIELDS[flag]] = True

        definitions.append(PropertyDefinition(
            attribute=transform(attributes, prop),
            property=prop,
            space=space,
            must_use_property=prop in must_use_property,
            defined=True,
            **kwargs
        ))

    return SchemaTable(name, space, definitions)


def load_table(name: str, data_dir: Optional[str] = None) -> SchemaTable:
    """
    Load a table from ``<data_dir>/<name>.json``.

    Args:
        name: Table name
        data_dir: Directory holding the tables (None for the bundled data)

    Returns:
        SchemaTable: The loaded table
    """
    path = os.path.join(data_dir or DATA_DIR, f"{name}.json")
    with open(path, 'r', encoding='utf-8') as f:
        data = json.load(f, object_pairs_hook=_reject_duplicates)

    table = parse_table(name, data)
    logger.debug(f"Loaded table {name} from {path} ({len(table)} definitions)")
    return table
