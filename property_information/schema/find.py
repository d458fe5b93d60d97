"""
Name resolution against a schema registry.
This module looks up attribute and property names, synthesizes definitions
for ``data-*`` attributes and echoes back anything unknown.
"""

from html5lib.constants import asciiLetters, asciiLowercase, asciiUppercase, digits

from .definition import PropertyDefinition
from .normalize import normalize
from .registry import SchemaRegistry

DATA = 'data'
DASH = '-'

# Characters allowed after the "data" prefix of a data attribute or property
DATA_CHARACTERS = asciiLetters | digits | frozenset('-_.:')


def find(registry: SchemaRegistry, name: str) -> PropertyDefinition:
    """
    Find the definition for an attribute or property name.

    Known names (ARIA attributes included) are matched case-insensitively,
    by attribute or by property. ``data-*`` attributes and their dataset
    properties get a synthesized definition. Anything else is returned as
    an undefined definition with ``name`` as both attribute and property.

    Args:
        registry: Registry to search
        name: Attribute or property name, in any case

    Returns:
        PropertyDefinition: The matched, synthesized or fallback definition
    """
    key = normalize(name)

    if key in registry.normal:
        return registry.normal[key]

    if len(key) > len(DATA) and key.startswith(DATA) and _is_data_name(name):
        if name[len(DATA)] == DASH:
            if len(name) > len(DATA) + 1:
                return PropertyDefinition(attribute=name, property=_dataset_to_property(name), defined=True)
        else:
            attribute = _dataset_to_attribute(name)
            if attribute is not None:
                return PropertyDefinition(attribute=attribute, property=name, defined=True)

    return PropertyDefinition(attribute=name, property=name)


def _is_data_name(name: str) -> bool:
    """Check that everything after the "data" prefix is a valid data character."""
    return all(char in DATA_CHARACTERS for char in name[len(DATA):])


def _dataset_to_property(attribute: str) -> str:
    """
    Convert a data attribute into its dataset property.

    A dash followed by a lowercase letter is dropped and the letter
    uppercased; other dashes are kept (``data-mike-1`` -> ``dataMike-1``).
    """
    suffix = attribute[len(DATA) + 1:]
    chars = []
    index = 0
    while index < len(suffix):
        char = suffix[index]
        if char == DASH and index + 1 < len(suffix) and suffix[index + 1] in asciiLowercase:
            chars.append(suffix[index + 1].upper())
            index += 2
            continue
        chars.append(char)
        index += 1

    value = ''.join(chars)
    return DATA + value[:1].upper() + value[1:]


def _dataset_to_attribute(property: str):
    """
    Convert a dataset property into its data attribute.

    Returns None when the property could not have come from an attribute,
    which is the case when a dash is followed by a lowercase letter
    (``dataFoo-bar``).
    """
    suffix = property[len(DATA):]
    for index, char in enumerate(suffix[:-1]):
        if char == DASH and suffix[index + 1] in asciiLowercase:
            return None

    value = ''.join(DASH + char.lower() if char in asciiUppercase else char for char in suffix)
    if not value.startswith(DASH):
        value = DASH + value
    return DATA + value
