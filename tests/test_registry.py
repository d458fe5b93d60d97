import pytest

from property_information import PropertyDefinition, SchemaTable, Space, build


def _table(name, space, *pairs, **flags):
    return SchemaTable(name, space, [
        PropertyDefinition(attribute=attribute, property=property, space=space, defined=True, **flags)
        for attribute, property in pairs
    ])


def test_build_indexes_attribute_and_property():
    registry = build([_table("a", Space.HTML, ("for", "htmlFor"))])

    definition = registry.property["htmlFor"]
    assert registry.normal["for"] is definition
    assert registry.normal["htmlfor"] is definition
    assert registry.space is Space.HTML


def test_build_stamps_table_space_on_spaceless_definitions():
    table = SchemaTable("a", Space.ARIA, [PropertyDefinition(attribute="role", property="role", defined=True)])

    registry = build([table])

    assert registry.property["role"].space is Space.ARIA


def test_build_keeps_declared_space():
    table = SchemaTable("mixed", Space.HTML, [
        PropertyDefinition(attribute="xml:lang", property="xmlLang", space=Space.XML, defined=True),
    ])

    registry = build([table])

    assert registry.property["xmlLang"].space is Space.XML


def test_later_tables_extend_earlier_ones():
    registry = build([
        _table("xml", Space.XML, ("xml:lang", "xmlLang")),
        _table("html", Space.HTML, ("lang", "lang")),
    ])

    assert registry.normal["xml:lang"].space is Space.XML
    assert registry.normal["lang"].space is Space.HTML
    assert registry.space is Space.HTML


def test_later_table_wins_on_shared_keys():
    registry = build([
        _table("aria", Space.ARIA, ("role", "role")),
        _table("svg", Space.SVG, ("role", "role"), comma_separated=True),
    ])

    assert registry.normal["role"].space is Space.SVG
    assert registry.property["role"].comma_separated


def test_registry_is_read_only():
    registry = build([_table("a", Space.HTML, ("id", "id"))])

    with pytest.raises(TypeError):
        registry.normal["id"] = None
    with pytest.raises(TypeError):
        registry.property["id"] = None


def test_contains_ignores_case():
    registry = build([_table("a", Space.HTML, ("for", "htmlFor"))])

    assert "HTMLFOR" in registry
    assert "For" in registry
    assert "class" not in registry
    assert len(registry) == 1


def test_build_is_deterministic():
    tables = [_table("a", Space.HTML, ("for", "htmlFor"), ("id", "id"))]

    assert dict(build(tables).normal) == dict(build(tables).normal)


def test_build_without_tables():
    registry = build([])

    assert len(registry) == 0
    assert registry.space is Space.NONE
