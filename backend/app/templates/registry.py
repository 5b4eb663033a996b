# backend/app/templates/registry.py
"""
Template Registry - Central store for canned UI components
"""

import logging
import threading
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

from app.generation.artifact import Artifact

logger = logging.getLogger(__name__)


class TemplateCategory(Enum):
    """Component categories, in matching priority order"""
    VEHICLE = "vehicle"
    BUTTON = "button"
    CARD = "card"
    NAVIGATION = "navigation"


@dataclass(frozen=True)
class ComponentTemplate:
    """
    A fixed, hard-coded component used when no external
    generation service is available.
    """
    id: str
    name: str
    category: TemplateCategory
    artifact: Artifact

    # Trigger terms, matched as lowercase substrings of the prompt
    keywords: List[str] = field(default_factory=list)

    def matches(self, prompt: str) -> bool:
        prompt_lower = prompt.lower()
        return any(keyword in prompt_lower for keyword in self.keywords)


class TemplateRegistry:
    """
    Ordered registry of component templates

    Registration order is the matching priority: the first template
    whose keyword appears in the prompt wins.
    """

    def __init__(self, default_id: str = "button"):
        self.templates: Dict[str, ComponentTemplate] = {}
        self._order: List[str] = []
        self.default_id = default_id

    def register(self, template: ComponentTemplate) -> None:
        """Register a template; re-registering keeps the original priority"""
        if template.id not in self.templates:
            self._order.append(template.id)
        self.templates[template.id] = template

    def get(self, template_id: str) -> Optional[ComponentTemplate]:
        return self.templates.get(template_id)

    @property
    def default(self) -> ComponentTemplate:
        return self.templates[self.default_id]

    def match(self, prompt: str) -> ComponentTemplate:
        """First template whose keywords appear in the prompt, else the default"""
        for template_id in self._order:
            template = self.templates[template_id]
            if template.matches(prompt):
                logger.info("Template '%s' matched prompt", template.id)
                return template

        logger.info("No template keyword in prompt, using default '%s'", self.default_id)
        return self.default

    def list_all(self) -> list[ComponentTemplate]:
        """List templates in priority order"""
        return [self.templates[tid] for tid in self._order]


# Global registry instance
_global_registry: Optional[TemplateRegistry] = None
_registry_lock = threading.Lock()


def get_template_registry() -> TemplateRegistry:
    """Get or create the global template registry"""
    global _global_registry
    if _global_registry is None:
        with _registry_lock:
            if _global_registry is None:
                from app.templates.catalog import register_all_templates
                registry = TemplateRegistry()
                register_all_templates(registry)
                _global_registry = registry
    return _global_registry


def select_template(prompt: str) -> ComponentTemplate:
    return get_template_registry().match(prompt)
