# backend/app/templates/__init__.py
"""
Component Template Library

Canned React components used when the remote generator is
unavailable or returns something unusable.
"""

from app.templates.registry import (
    ComponentTemplate,
    TemplateCategory,
    TemplateRegistry,
    get_template_registry,
    select_template,
)
from app.templates.catalog import (
    TEMPLATE_CATALOG,
    register_all_templates,
)

__all__ = [
    "ComponentTemplate",
    "TemplateCategory",
    "TemplateRegistry",
    "get_template_registry",
    "select_template",
    "TEMPLATE_CATALOG",
    "register_all_templates",
]
