from __future__ import annotations

from typing import Dict, List, Optional


class InvalidInput(ValueError):
    """Raised when evaluation inputs violate the engine preconditions.

    ``errors`` lists one ``{"field", "message"}`` entry per offending field so
    callers can highlight the field without parsing the message.
    """

    def __init__(self, errors: Optional[List[Dict[str, str]]] = None, message: str = ""):
        self.errors: List[Dict[str, str]] = list(errors or [])
        if not message:
            parts = [f"{e.get('field', '?')}: {e.get('message', '')}" for e in self.errors]
            message = "Invalid input: " + ("; ".join(parts) if parts else "unknown error")
        super().__init__(message)

    @property
    def fields(self) -> List[str]:
        return [e.get("field", "") for e in self.errors]
