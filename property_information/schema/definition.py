"""
Property definition records.
This module implements the record describing one attribute/property pair
and the namespace (space) it belongs to.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict


class Space(Enum):
    """Attribute spaces known to the schema tables."""
    HTML = "html"
    SVG = "svg"
    ARIA = "aria"
    XLINK = "xlink"
    XML = "xml"
    XMLNS = "xmlns"
    NONE = "none"


# Interchange key for each flag field, in record order
FLAG_KEYS = {
    'boolean': 'boolean',
    'booleanish': 'booleanish',
    'overloaded_boolean': 'overloadedBoolean',
    'number': 'number',
    'space_separated': 'spaceSeparated',
    'comma_separated': 'commaSeparated',
    'comma_or_space_separated': 'commaOrSpaceSeparated',
    'must_use_property': 'mustUseProperty',
}

FLAG_FIELDS = {key: name for name, key in FLAG_KEYS.items()}


@dataclass(frozen=True)
class PropertyDefinition:
    """
    Definition of one attribute/property pair.

    Instances are immutable, so registries can hand out the same record to
    every caller.
    """

    attribute: str
    property: str
    space: Space = Space.NONE
    boolean: bool = False
    booleanish: bool = False
    overloaded_boolean: bool = False
    number: bool = False
    space_separated: bool = False
    comma_separated: bool = False
    comma_or_space_separated: bool = False
    must_use_property: bool = False
    defined: bool = False

    @property
    def flags(self) -> Dict[str, bool]:
        """Get the value-shape flags that are set, keyed by interchange name."""
        return {key: True for name, key in FLAG_KEYS.items() if getattr(self, name)}

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert the definition into a plain record.

        Flags that are not set and the ``none`` space are left out, so the
        record only carries what is meaningful. ``defined`` is always present.

        Returns:
            Dict[str, Any]: JSON-compatible record
        """
        record: Dict[str, Any] = {}
        if self.space is not Space.NONE:
            record['space'] = self.space.value
        record['attribute'] = self.attribute
        record['property'] = self.property
        record.update(self.flags)
        record['defined'] = self.defined
        return record

    @classmethod
    def from_dict(cls, record: Dict[str, Any]) -> 'PropertyDefinition':
        """
        Create a definition from a plain record produced by ``to_dict``.

        Args:
            record: Record with interchange keys

        Returns:
            PropertyDefinition: The equivalent definition
        """
        known = {'space', 'attribute', 'property', 'defined'} | set(FLAG_FIELDS)
        unknown = set(record) - known
        if unknown:
            raise ValueError(f"Unknown property definition keys: {', '.join(sorted(unknown))}")

        kwargs: Dict[str, Any] = {
            'attribute': record['attribute'],
            'property': record['property'],
            'space': Space(record.get('space', Space.NONE.value)),
            'defined': bool(record.get('defined', False)),
        }
        for key, name in FLAG_FIELDS.items():
            kwargs[name] = bool(record.get(key, False))
        return cls(**kwargs)
