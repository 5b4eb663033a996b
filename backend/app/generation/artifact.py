from dataclasses import dataclass
from typing import Dict, Optional


@dataclass(frozen=True)
class Artifact:
    """A generated component: React markup plus its stylesheet."""
    jsx: str
    css: str

    @property
    def is_present(self) -> bool:
        return bool(self.jsx) and bool(self.css)

    def to_dict(self) -> Dict[str, str]:
        return {"jsx": self.jsx, "css": self.css}

    @classmethod
    def from_fields(cls, jsx: Optional[str], css: Optional[str]) -> Optional["Artifact"]:
        """Build from nullable storage columns; None unless both are set."""
        if not jsx or not css:
            return None
        return cls(jsx=jsx, css=css)


@dataclass
class GenerationResult:
    """
    Outcome of one generation attempt.

    Either carries an artifact (success) or says the caller has to fall
    back to another generator, with the reason for diagnostics.
    """
    artifact: Optional[Artifact]
    source: Optional[str] = None
    reason: Optional[str] = None

    @property
    def is_success(self) -> bool:
        return self.artifact is not None

    @property
    def needs_fallback(self) -> bool:
        return self.artifact is None

    @classmethod
    def success(cls, artifact: Artifact, source: str):
        return cls(artifact=artifact, source=source)

    @classmethod
    def fallback(cls, reason: str):
        return cls(artifact=None, reason=reason)
