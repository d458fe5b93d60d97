"""
property-information - metadata about HTML, SVG and ARIA attributes and properties.
"""

import logging

from property_information.utils.config import Config
from property_information.utils.logging import LOGGER_NAME
from property_information.schema import (
    PropertyDefinition,
    Space,
    SchemaTable,
    SchemaRegistry,
    Schemas,
    build,
    find,
    load_schemas,
    normalize,
    to_react,
)

# Output is configured by the application, see utils.logging.setup_logging
logger = logging.getLogger(LOGGER_NAME)
logger.addHandler(logging.NullHandler())

# Package information
__version__ = "5.6.0"
__description__ = "Metadata about HTML, SVG and ARIA attributes and properties"

# Built from the bundled tables only, whatever PROPERTY_INFORMATION_CONFIG names
schemas = load_schemas(Config(use_environment=False))

html = schemas.html
svg = schemas.svg
aria = schemas.aria
xlink = schemas.xlink
xml = schemas.xml
xmlns = schemas.xmlns

logger.debug(f"property-information v{__version__} initialized")

__all__ = [
    'Config', 'PropertyDefinition', 'Space', 'SchemaTable', 'SchemaRegistry', 'Schemas',
    'build', 'find', 'load_schemas', 'normalize', 'to_react', 'schemas',
    'html', 'svg', 'aria', 'xlink', 'xml', 'xmlns',
]
