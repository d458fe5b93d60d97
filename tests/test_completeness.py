"""Cross-checks of the registries against attribute lists published by parsers."""

import pytest
from bs4 import BeautifulSoup
from html5lib.constants import adjustForeignAttributes, adjustSVGAttributes, booleanAttributes, namespaces
from lxml.html import defs

from property_information import find, html, normalize, svg
from property_information.schema import (
    NON_STANDARD_HTML_ATTRIBUTES,
    NON_STANDARD_SVG_ATTRIBUTES,
    Space,
    undefined_attributes,
    unlisted_definitions,
)

# Obsolete draft attributes still listed by html5lib
OBSOLETE_BOOLEAN_ATTRIBUTES = {"irrelevant", "autosubmit"}

# Never standardized
OBSOLETE_LINK_ATTRIBUTES = {"dynsrc"}

DOCUMENT = """<!doctype html>
<html lang="en" xml:lang="en">
<body>
  <a href="#top" class="nav primary" data-track-id="7" aria-hidden="true" tabindex="0" hreflang="en">top</a>
  <input type="checkbox" checked disabled autocomplete="off" maxlength="4">
  <svg viewBox="0 0 10 10" xmlns="http://www.w3.org/2000/svg" xmlns:xlink="http://www.w3.org/1999/xlink">
    <linearGradient id="g" gradientUnits="userSpaceOnUse" gradientTransform="rotate(90)"></linearGradient>
    <use xlink:href="#g" stroke-width="2" stroke-dasharray="1 2" fill-opacity="0.5"></use>
    <text text-anchor="middle" textLength="10" role="img" aria-label="label">t</text>
  </svg>
</body>
</html>
"""


def test_svg_camel_case_attributes_are_defined():
    assert undefined_attributes(svg, adjustSVGAttributes.values()) == []
    assert undefined_attributes(svg, adjustSVGAttributes) == []


def test_svg_camel_case_attributes_keep_their_case():
    for lowercase, camel_case in adjustSVGAttributes.items():
        assert find(svg, lowercase).attribute == camel_case


@pytest.mark.parametrize("registry", [html, svg], ids=["html", "svg"])
def test_foreign_attributes_are_defined(registry):
    assert undefined_attributes(registry, adjustForeignAttributes) == []


def test_foreign_attribute_spaces_match_html5lib_prefixes():
    for name, (prefix, local, namespace) in adjustForeignAttributes.items():
        definition = find(html, name)
        assert definition.attribute == name
        assert namespaces[definition.space.value] == namespace


def test_html5lib_boolean_attributes_are_boolean():
    names = set().union(*booleanAttributes.values()) - OBSOLETE_BOOLEAN_ATTRIBUTES

    assert undefined_attributes(html, names) == []
    assert sorted(name for name in names if not find(html, name).boolean) == []


def test_lxml_attribute_lists_are_defined():
    names = set(defs.safe_attrs) | set(defs.link_attrs) | set(defs.event_attrs)

    assert undefined_attributes(html, names, ignore=OBSOLETE_LINK_ATTRIBUTES) == []
    assert undefined_attributes(html, OBSOLETE_LINK_ATTRIBUTES) == sorted(OBSOLETE_LINK_ATTRIBUTES)


def test_non_standard_attributes_are_defined():
    assert undefined_attributes(html, NON_STANDARD_HTML_ATTRIBUTES) == []
    assert undefined_attributes(svg, NON_STANDARD_SVG_ATTRIBUTES) == []


def test_unlisted_definitions_only_checks_own_space():
    listed = [definition.attribute for definition in html.property.values() if definition.space is Space.HTML]

    assert unlisted_definitions(html, Space.HTML, listed) == []
    assert unlisted_definitions(html, Space.HTML, [a for a in listed if a != "class"]) == ["class"]
    assert unlisted_definitions(html, Space.HTML, [], ignore=listed) == []


def test_unlisted_html4_definitions_are_all_modern_or_non_standard():
    html4 = set(defs.safe_attrs) | set(defs.link_attrs) | set(defs.event_attrs)

    unlisted = unlisted_definitions(html, Space.HTML, html4, ignore=NON_STANDARD_HTML_ATTRIBUTES)

    assert "class" not in unlisted
    assert "srcset" in unlisted
    assert not set(unlisted) & NON_STANDARD_HTML_ATTRIBUTES


def test_every_attribute_of_a_parsed_document_is_defined():
    soup = BeautifulSoup(DOCUMENT, "html5lib")

    unknown = []
    seen = set()
    for tag in soup.find_all(True):
        registry = svg if tag.namespace == namespaces["svg"] else html
        for name in tag.attrs:
            seen.add(str(name))
            if not find(registry, str(name)).defined:
                unknown.append(f"{tag.name}[{name}]")

    assert unknown == []
    assert {"viewBox", "gradientUnits", "xlink:href", "xmlns:xlink", "data-track-id"} <= seen


def test_parsed_data_attribute_resolves_to_dataset_property():
    soup = BeautifulSoup(DOCUMENT, "html5lib")
    anchor = soup.find("a")

    assert [find(html, name).property for name in anchor.attrs if normalize(name).startswith("data")] == [
        "dataTrackId"
    ]
