"""
Property names as spelled by React.
"""

import json
import os
from types import MappingProxyType

from .tables import DATA_DIR

with open(os.path.join(DATA_DIR, 'hast_to_react.json'), 'r', encoding='utf-8') as _f:
    HAST_TO_REACT = MappingProxyType(json.load(_f))


def to_react(property: str) -> str:
    """
    Get the React spelling of a property name.

    React differs for a few properties only (``classId`` is ``classID``,
    ``xLinkHref`` is ``xlinkHref``); every other name is returned as is.

    Args:
        property: Property name from a registry

    Returns:
        str: Property name React expects
    """
    return HAST_TO_REACT.get(property, property)
