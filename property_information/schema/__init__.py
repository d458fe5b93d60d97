"""
Attribute schema implementation.
This package provides the schema tables, the registries merged from them and
name resolution over those registries.
"""

from .definition import PropertyDefinition, Space
from .normalize import normalize
from .tables import SchemaTable, load_table, parse_table
from .registry import SchemaRegistry, build
from .find import find
from .loader import Schemas, load_schemas
from .react import HAST_TO_REACT, to_react
from .audit import (
    NON_STANDARD_HTML_ATTRIBUTES,
    NON_STANDARD_SVG_ATTRIBUTES,
    undefined_attributes,
    unlisted_definitions,
)

__all__ = [
    'PropertyDefinition', 'Space', 'normalize', 'SchemaTable', 'load_table', 'parse_table',
    'SchemaRegistry', 'build', 'find', 'Schemas', 'load_schemas', 'HAST_TO_REACT', 'to_react',
    'NON_STANDARD_HTML_ATTRIBUTES', 'NON_STANDARD_SVG_ATTRIBUTES',
    'undefined_attributes', 'unlisted_definitions',
]
