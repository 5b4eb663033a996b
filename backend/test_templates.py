"""Template catalog and registry matching."""

import pytest

from app.templates import (
    TEMPLATE_CATALOG,
    TemplateRegistry,
    get_template_registry,
    register_all_templates,
    select_template,
)


def test_catalog_order_is_matching_priority():
    assert [t.id for t in TEMPLATE_CATALOG] == ["car", "button", "card", "navbar"]
    assert [t.id for t in get_template_registry().list_all()] == ["car", "button", "card", "navbar"]


@pytest.mark.parametrize(
    "prompt, expected",
    [
        ("a red sports car", "car"),
        ("some vehicle", "car"),
        ("Automobile dashboard", "car"),
        ("a submit button", "button"),
        ("primary btn", "button"),
        ("a container", "card"),
        ("light box", "card"),
        ("site navigation", "navbar"),
        ("page header", "navbar"),
        ("dropdown menu", "navbar"),
    ],
)
def test_select_template(prompt, expected):
    assert select_template(prompt).id == expected


def test_vehicle_beats_button():
    assert select_template("a car with a button").id == "car"


def test_button_beats_card_and_nav():
    assert select_template("a box with a button in the nav").id == "button"


def test_card_prompt_hits_vehicle_substring():
    # Substring matching: "card" contains "car" and vehicles are checked first
    assert select_template("profile card").id == "car"


def test_no_match_defaults_to_button():
    assert select_template("something pretty").id == "button"


def test_selection_is_deterministic():
    first = select_template("profile card")
    second = select_template("profile card")
    assert first is second
    assert first.artifact == second.artifact


def test_every_template_has_markup_and_styles():
    for template in TEMPLATE_CATALOG:
        assert template.artifact.is_present
        assert f"export default {template.name};" in template.artifact.jsx


def test_registry_get_and_reregister_keeps_priority():
    registry = TemplateRegistry()
    register_all_templates(registry)
    register_all_templates(registry)

    assert registry.get("card").name == "Card"
    assert registry.get("missing") is None
    assert [t.id for t in registry.list_all()] == ["car", "button", "card", "navbar"]
    assert registry.default.id == "button"
