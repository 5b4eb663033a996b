"""
Prompt classifier: new component vs refinement of the current one.

Plain substring matching over the lowercased prompt. There is no
tokenization and no negation handling, so "don't make it a button"
still reads as a request for a new button.
"""

from dataclasses import dataclass
from typing import Optional

from app.generation.artifact import Artifact


CREATION_KEYWORDS = ("create", "make", "build", "generate", "new")

COMPONENT_TYPES = (
    "car",
    "vehicle",
    "automobile",
    "button",
    "card",
    "navbar",
    "nav",
    "header",
    "menu",
)


def has_creation_keyword(prompt: str) -> bool:
    prompt_lower = prompt.lower()
    return any(keyword in prompt_lower for keyword in CREATION_KEYWORDS)


def has_component_type(prompt: str) -> bool:
    prompt_lower = prompt.lower()
    return any(component in prompt_lower for component in COMPONENT_TYPES)


def is_new_component_request(prompt: str) -> bool:
    return has_creation_keyword(prompt) and has_component_type(prompt)


@dataclass(frozen=True)
class RequestClassification:
    has_creation_keyword: bool
    has_component_type: bool
    has_existing_artifact: bool

    @property
    def is_new(self) -> bool:
        return self.has_creation_keyword and self.has_component_type

    @property
    def is_iterative(self) -> bool:
        # Without a stored artifact there is nothing to refine.
        return not self.is_new and self.has_existing_artifact

    def to_dict(self):
        return {
            "has_creation_keyword": self.has_creation_keyword,
            "has_component_type": self.has_component_type,
            "is_new_component_request": self.is_new,
            "has_existing_component": self.has_existing_artifact,
            "is_iterative": self.is_iterative,
        }


def classify_request(
    prompt: str,
    current_artifact: Optional[Artifact] = None,
) -> RequestClassification:
    return RequestClassification(
        has_creation_keyword=has_creation_keyword(prompt),
        has_component_type=has_component_type(prompt),
        has_existing_artifact=bool(current_artifact and current_artifact.is_present),
    )
