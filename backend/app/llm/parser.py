from typing import Any, Dict, Optional

from app.generation.artifact import Artifact
from app.utils.json_extract import extract_json


# Alternate field names some models use for the same payload
MARKUP_KEYS = ("jsx", "markup")
STYLESHEET_KEYS = ("css", "stylesheet")


def _first_text(data: Dict[str, Any], keys) -> Optional[str]:
    for key in keys:
        value = data.get(key)
        if isinstance(value, str) and value.strip():
            return value
    return None


# ============================================================
# ARTIFACT PARSER (LLM TRUST BOUNDARY)
# ============================================================

def parse_artifact(content: str) -> Optional[Artifact]:
    """
    Parse a completion into an artifact.

    Returns None when the content is not a JSON object carrying
    non-empty markup and stylesheet strings. NEVER throws.
    """
    data = extract_json(content)
    if not data:
        return None

    jsx = _first_text(data, MARKUP_KEYS)
    css = _first_text(data, STYLESHEET_KEYS)
    if jsx is None or css is None:
        return None

    return Artifact(jsx=jsx, css=css)
