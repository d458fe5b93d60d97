"""
Pre-built schema registries.
This module loads the bundled tables and composes them into the registries
exposed by the package.
"""

import logging
from typing import Dict, Optional

from ..utils.config import Config
from ..utils.logging import PerformanceLogger
from .registry import SchemaRegistry, build
from .tables import SchemaTable, load_table

logger = logging.getLogger(__name__)


class Schemas:
    """
    Registries built from one set of tables.

    Every table gets a single-table registry; the merged registries layer
    several tables as configured under "registries".
    """

    def __init__(self, tables: Dict[str, SchemaTable], compositions: Dict[str, list]):
        """
        Initialize the registries.

        Args:
            tables: Loaded tables keyed by name
            compositions: Table names per merged registry, in merge order
        """
        self._tables: Dict[str, SchemaRegistry] = {
            name: build([table], name) for name, table in tables.items()
        }
        self._registries: Dict[str, SchemaRegistry] = {}
        for name, table_names in compositions.items():
            missing = [table_name for table_name in table_names if table_name not in tables]
            if missing:
                raise ValueError(f"Registry {name!r} uses unknown tables: {', '.join(missing)}")
            self._registries[name] = build([tables[table_name] for table_name in table_names], name)

    def table(self, name: str) -> SchemaRegistry:
        """Get the single-table registry for a table name."""
        return self._tables[name]

    def registry(self, name: str) -> SchemaRegistry:
        """Get a merged registry by name."""
        return self._registries[name]

    def names(self):
        """Get the merged registry names, then the table names not shadowed by them."""
        return list(self._registries) + [name for name in self._tables if name not in self._registries]

    def get(self, name: str) -> SchemaRegistry:
        """
        Get a registry by name, preferring merged registries over tables.

        Args:
            name: Registry or table name

        Returns:
            SchemaRegistry: The registry

        Raises:
            KeyError: If no registry or table has that name
        """
        if name in self._registries:
            return self._registries[name]
        return self._tables[name]

    @property
    def html(self) -> SchemaRegistry:
        return self._registries['html']

    @property
    def svg(self) -> SchemaRegistry:
        return self._registries['svg']

    @property
    def aria(self) -> SchemaRegistry:
        return self._tables['aria']

    @property
    def xlink(self) -> SchemaRegistry:
        return self._tables['xlink']

    @property
    def xml(self) -> SchemaRegistry:
        return self._tables['xml']

    @property
    def xmlns(self) -> SchemaRegistry:
        return self._tables['xmlns']


def load_schemas(config: Optional[Config] = None) -> Schemas:
    """
    Load the schema tables and build the registries.

    Args:
        config: Configuration (None for the defaults)

    Returns:
        Schemas: Registries built from the configured tables
    """
    config = config or Config()
    data_dir = config.get('schema.data_dir')
    perf = PerformanceLogger(logger, "schema")

    perf.start("loading")
    tables = {name: load_table(name, data_dir) for name in config.get('schema.tables', [])}
    schemas = Schemas(tables, config.get('registries', {}))
    perf.end("loading")

    return schemas
