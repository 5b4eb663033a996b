from typing import Dict, List, Optional

from app.generation.artifact import Artifact


SYSTEM_PROMPT = """
You are a React component generator. Generate ONLY valid React JSX components with CSS styling.
Return a JSON object with 'jsx' and 'css' properties. The JSX should be a complete React component.
Make components modern, responsive, and well-styled.
"""

REFINEMENT_NOTE = (
    "This is an iterative refinement. "
    "Modify the existing component based on the user request."
)


def build_messages(prompt: str, context: Optional[Artifact] = None) -> List[Dict]:
    """
    Two-message chat prompt: system instructions + user content.

    When a current artifact is supplied it is serialized into the user
    message so the model edits it instead of starting over.
    """
    system = SYSTEM_PROMPT.strip()
    if context is not None:
        system = f"{system}\n\n{REFINEMENT_NOTE}"

    if context is not None:
        user = (
            f"Current component:\nJSX: {context.jsx}\nCSS: {context.css}\n\n"
            f"User request: {prompt}\n\n"
            "Modify the component according to the user's request. "
            "Return only valid JSON with jsx and css properties."
        )
    else:
        user = (
            f"Create a React component for: {prompt}. "
            "Return only valid JSON with jsx and css properties."
        )

    return [
        {"role": "system", "content": system},
        {"role": "user", "content": user},
    ]
