"""
Schema registry implementation.
This module merges schema tables into the lookup structure used by ``find``.
"""

import dataclasses
import logging
from types import MappingProxyType
from typing import Dict, Iterable, Mapping

from .definition import PropertyDefinition, Space
from .normalize import normalize
from .tables import SchemaTable

logger = logging.getLogger(__name__)


class SchemaRegistry:
    """
    Read-only lookup structure over one or more schema tables.

    ``property`` maps property names to definitions, ``normal`` maps the
    normalized attribute and property names to the same definitions.
    """

    def __init__(self,
                 property: Mapping[str, PropertyDefinition],
                 normal: Mapping[str, PropertyDefinition],
                 space: Space = Space.NONE,
                 name: str = ''):
        """
        Initialize a registry.

        Args:
            property: Definitions keyed by property name
            normal: Definitions keyed by normalized name
            space: Space of the registry (the last table merged)
            name: Registry name, for logging and display
        """
        self.property: Mapping[str, PropertyDefinition] = MappingProxyType(dict(property))
        self.normal: Mapping[str, PropertyDefinition] = MappingProxyType(dict(normal))
        self.space = space
        self.name = name

    def __contains__(self, name: str) -> bool:
        """Check whether a name is known, ignoring case."""
        return normalize(name) in self.normal

    def __len__(self) -> int:
        return len(self.property)

    def __repr__(self) -> str:
        return f"SchemaRegistry({self.name or self.space.value!r}, {len(self)} properties)"


def build(tables: Iterable[SchemaTable], name: str = '') -> SchemaRegistry:
    """
    Merge schema tables into a registry.

    Tables are merged in order; when two tables share a property name or a
    normalized key the later table wins.

    Args:
        tables: Tables to merge, in precedence order (last wins)
        name: Registry name

    Returns:
        SchemaRegistry: The merged registry
    """
    property: Dict[str, PropertyDefinition] = {}
    normal: Dict[str, PropertyDefinition] = {}
    space = Space.NONE
    count = 0

    for table in tables:
        for definition in table:
            if definition.space is Space.NONE and table.space is not Space.NONE:
                definition = dataclasses.replace(definition, space=table.space)

            property[definition.property] = definition
            normal[normalize(definition.attribute)] = definition
            normal[normalize(definition.property)] = definition

        space = table.space
        count += 1

    registry = SchemaRegistry(property, normal, space, name)
    logger.debug(f"Built registry {name or space.value} from {count} tables "
                 f"({len(property)} properties, {len(normal)} keys)")
    return registry
