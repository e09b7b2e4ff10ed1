"""Process-local state repository."""

import json
from dataclasses import dataclass, field

from nutri_balance.services.state import StateRepository


@dataclass
class InMemoryStateRepository(StateRepository):
    """Keeps blobs as JSON text, so stored state must be JSON-serializable."""

    blobs: dict[str, str] = field(default_factory=dict)

    def load(self, key: str) -> object | None:
        raw = self.blobs.get(key)
        return json.loads(raw) if raw is not None else None

    def save(self, key: str, value: object) -> None:
        self.blobs[key] = json.dumps(value)
