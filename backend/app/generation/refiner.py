"""
Refinement engine for an existing component.

Rules are ordered; the first rule whose trigger appears in the prompt
is the only one applied. Every rule rewrites the stylesheet with
regular-expression substitution and never touches the markup.

The patterns are textual, not a parsed stylesheet: declarations
written another way (rem units, 3-digit hex, shorthand) are left as
they are.
"""

import logging
import re
from dataclasses import dataclass
from typing import List, Optional, Tuple

from app.generation.artifact import Artifact

logger = logging.getLogger(__name__)

MODIFIED_MARKER = "\n/* Modified based on user request */"

# Property names must start a declaration: "color" never matches inside
# "background-color", "width" never inside "max-width".
PROPERTY = r"(?<![-\w])"


@dataclass(frozen=True)
class RefinementRule:
    name: str
    triggers: Tuple[str, ...]
    substitutions: Tuple[Tuple[str, str], ...]

    def is_triggered(self, prompt_lower: str) -> bool:
        return any(trigger in prompt_lower for trigger in self.triggers)

    def apply(self, css: str) -> str:
        for pattern, replacement in self.substitutions:
            css = re.sub(pattern, replacement, css)
        return css


SIZE_RULE = RefinementRule(
    name="size",
    triggers=("larger", "bigger"),
    substitutions=(
        (PROPERTY + r"font-size:\s*\d+px", "font-size: 20px"),
        (PROPERTY + r"padding:\s*\d+px", "padding: 16px 32px"),
        (PROPERTY + r"width:\s*\d+px", "width: 250px"),
        (PROPERTY + r"height:\s*\d+px", "height: 100px"),
    ),
)

RED_RULE = RefinementRule(
    name="red",
    triggers=("red",),
    substitutions=(
        (PROPERTY + r"background-color:\s*#[0-9a-fA-F]{6}", "background-color: #dc2626"),
        (PROPERTY + r"color:\s*#[0-9a-fA-F]{6}", "color: white"),
        (
            PROPERTY + r"background:\s*linear-gradient\([^)]*\)",
            "background: linear-gradient(45deg, #ff4444, #cc0000)",
        ),
    ),
)

BLUE_RULE = RefinementRule(
    name="blue",
    triggers=("blue",),
    substitutions=(
        (PROPERTY + r"background-color:\s*#[0-9a-fA-F]{6}", "background-color: #3b82f6"),
        (PROPERTY + r"color:\s*#[0-9a-fA-F]{6}", "color: white"),
        (
            PROPERTY + r"background:\s*linear-gradient\([^)]*\)",
            "background: linear-gradient(45deg, #3b82f6, #1d4ed8)",
        ),
    ),
)

SHAPE_RULE = RefinementRule(
    name="shape",
    triggers=("rounded", "circle"),
    substitutions=(
        (PROPERTY + r"border-radius:\s*\d+px", "border-radius: 25px"),
    ),
)

# Priority order matters: "bigger and red" only resizes.
REFINEMENT_RULES: List[RefinementRule] = [
    SIZE_RULE,
    RED_RULE,
    BLUE_RULE,
    SHAPE_RULE,
]


def find_rule(prompt: str) -> Optional[RefinementRule]:
    prompt_lower = prompt.lower()
    for rule in REFINEMENT_RULES:
        if rule.is_triggered(prompt_lower):
            return rule
    return None


def refine_artifact(artifact: Artifact, prompt: str) -> Artifact:
    rule = find_rule(prompt)

    if rule is None:
        logger.info("No refinement rule triggered, marking stylesheet as modified")
        return Artifact(jsx=artifact.jsx, css=artifact.css + MODIFIED_MARKER)

    logger.info("Applying '%s' refinement rule", rule.name)
    return Artifact(jsx=artifact.jsx, css=rule.apply(artifact.css))
