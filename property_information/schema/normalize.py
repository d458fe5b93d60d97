"""
Name normalization for schema lookups.
"""


def normalize(name: str) -> str:
    """
    Normalize an attribute or property name into a lookup key.

    Letter case is folded, non-ASCII letters included. Delimiters are kept
    wherever they occur, so ``class-name`` stays distinct from the
    ``classname`` key that ``className`` normalizes to, and ``:class`` or
    ``class-`` keep their leading and trailing delimiters.

    Args:
        name: Attribute-cased or property-cased name

    Returns:
        str: Lookup key
    """
    return name.lower()
