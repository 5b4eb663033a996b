import json
import re
from typing import Any, Dict


def extract_json(text: str) -> Dict[str, Any]:
    """
    Extract first valid JSON object from LLM output.
    Returns {} if parsing fails or the payload is not an object.
    """
    if not text or not isinstance(text, str):
        return {}

    try:
        data = json.loads(text)
    except ValueError:
        data = None

    if isinstance(data, dict):
        return data

    # Try to extract JSON block
    match = re.search(r"\{.*\}", text, re.DOTALL)
    if not match:
        return {}

    try:
        data = json.loads(match.group(0))
    except ValueError:
        return {}

    return data if isinstance(data, dict) else {}
