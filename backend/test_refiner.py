"""Stylesheet refinement rules."""

from app.generation.artifact import Artifact
from app.generation.refiner import MODIFIED_MARKER, find_rule, refine_artifact
from app.templates import get_template_registry

BUTTON = get_template_registry().get("button").artifact
CAR = get_template_registry().get("car").artifact


def test_bigger_rewrites_sizes():
    refined = refine_artifact(BUTTON, "make it bigger")

    assert "font-size: 20px" in refined.css
    assert "font-size: 16px" not in refined.css
    assert "padding: 16px 32px 24px" in refined.css  # "padding: 12px 24px" -> first number only
    assert refined.jsx == BUTTON.jsx


def test_larger_rewrites_width_and_height():
    refined = refine_artifact(CAR, "Larger please")

    assert "width: 200px" not in refined.css
    assert "width: 250px" in refined.css
    assert "height: 100px" in refined.css
    # Percent widths are not pixel declarations
    assert "width: 100%" in refined.css


def test_red_rewrites_colors_and_gradients():
    refined = refine_artifact(BUTTON, "turn it red")

    assert "background-color: #dc2626" in refined.css
    assert "#3b82f6" not in refined.css

    car = refine_artifact(CAR, "red")
    assert "linear-gradient(45deg, #00ff00, #00cc00)" not in car.css
    assert car.css.count("linear-gradient(45deg, #ff4444, #cc0000)") == 4


def test_red_rewrites_hex_text_color():
    artifact = Artifact(jsx="<p />", css="p { color: #1f2937; }")
    assert refine_artifact(artifact, "red").css == "p { color: white; }"


def test_blue_palette():
    refined = refine_artifact(CAR, "make it blue")

    assert "linear-gradient(45deg, #3b82f6, #1d4ed8)" in refined.css
    assert "#ff4444" not in refined.css


def test_rounded_rewrites_border_radius():
    refined = refine_artifact(BUTTON, "more rounded")
    assert "border-radius: 25px" in refined.css
    assert "border-radius: 6px" not in refined.css

    assert "border-radius: 25px" in refine_artifact(BUTTON, "circle").css


def test_size_rule_wins_over_color():
    refined = refine_artifact(BUTTON, "bigger and red")

    assert find_rule("bigger and red").name == "size"
    assert "font-size: 20px" in refined.css
    assert "background-color: #3b82f6" in refined.css


def test_unmatched_prompt_appends_marker():
    refined = refine_artifact(BUTTON, "add a shadow")

    assert find_rule("add a shadow") is None
    assert refined.css == BUTTON.css + MODIFIED_MARKER
    assert refined.css.endswith("/* Modified based on user request */")


def test_markup_is_preserved_for_every_rule():
    for prompt in ["bigger", "red", "blue", "rounded", "whatever"]:
        assert refine_artifact(CAR, prompt).jsx == CAR.jsx


def test_unmatched_declaration_forms_are_left_alone():
    artifact = Artifact(jsx="<a />", css="a { font-size: 1.5rem; color: #fff; }")
    refined = refine_artifact(artifact, "bigger and red")
    assert refined.css == artifact.css


def test_size_rule_skips_prefixed_properties():
    navbar = get_template_registry().get("navbar").artifact
    refined = refine_artifact(navbar, "bigger")

    assert "@media (max-width: 768px)" in refined.css
    assert "width: 250px" in refined.css
