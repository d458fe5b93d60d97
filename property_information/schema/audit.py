"""
Completeness checks against external attribute lists.
This module compares a registry with attribute names published elsewhere
(HTML and SVG attribute indexes, parser tables) and reports the gaps.
"""

import logging
from typing import Iterable, List

from .definition import Space
from .normalize import normalize
from .registry import SchemaRegistry

logger = logging.getLogger(__name__)

# HTML attributes that are supported but are not (or no longer, or not yet)
# in the core HTML standards
LEGACY_HTML_ATTRIBUTES = frozenset([
    'bordercolor', 'bottommargin', 'event', 'leftmargin', 'lowsrc',
    'rightmargin', 'topmargin', 'scoped', 'seamless',
])

CUSTOM_HTML_ATTRIBUTES = frozenset([
    'allowtransparency',
    # Mobile Safari keyboard hint
    'autocorrect',
    # WebKit/Blink form persistence
    'autosave',
    'disablepictureinpicture',
    # OpenGraph
    'prefix', 'property',
    # WebKit/Blink search fields
    'results',
    # IE only
    'security', 'unselectable',
])

UPCOMING_HTML_ATTRIBUTES = frozenset([
    # Media capture on input[type=file]
    'capture',
    'controlslist',
])

NON_STANDARD_HTML_ATTRIBUTES = LEGACY_HTML_ATTRIBUTES | CUSTOM_HTML_ATTRIBUTES | UPCOMING_HTML_ATTRIBUTES

NON_STANDARD_SVG_ATTRIBUTES = frozenset([
    'paint-order', 'vector-effect',
    'hatchContentUnits', 'hatchUnits', 'pitch',
])


def undefined_attributes(registry: SchemaRegistry,
                         attributes: Iterable[str],
                         ignore: Iterable[str] = ()) -> List[str]:
    """
    Get the listed attributes the registry does not know.

    Args:
        registry: Registry to check
        attributes: Attribute names from an external list
        ignore: Names to leave out of the check

    Returns:
        List[str]: Sorted unknown attribute names
    """
    ignored = set(ignore)
    missing = sorted({
        attribute for attribute in attributes
        if attribute not in ignored and normalize(attribute) not in registry.normal
    })
    if missing:
        logger.info(f"{len(missing)} attributes undefined in {registry!r}")
    return missing


def unlisted_definitions(registry: SchemaRegistry,
                         space: Space,
                         attributes: Iterable[str],
                         ignore: Iterable[str] = ()) -> List[str]:
    """
    Get the attributes defined in a space that an external list lacks.

    Only definitions belonging to ``space`` are checked, so namespaced
    definitions merged into an HTML or SVG registry are skipped.

    Args:
        registry: Registry to check
        space: Space whose definitions are checked
        attributes: Attribute names from an external list
        ignore: Definitions known to be missing from the list

    Returns:
        List[str]: Sorted attribute names of unlisted definitions
    """
    listed = set(attributes) | set(ignore)
    return sorted(
        definition.attribute for definition in registry.property.values()
        if definition.space is space and definition.attribute not in listed
    )
