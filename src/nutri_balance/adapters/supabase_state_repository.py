"""Supabase repository for persisted application state."""

from dataclasses import dataclass
from datetime import UTC, datetime

from supabase import Client

from nutri_balance.services.state import StateRepository


@dataclass
class SupabaseStateRepository(StateRepository):
    """Stores each blob as a JSON ``value`` row keyed by ``key``."""

    client: Client
    table_name: str = "app_state"

    def load(self, key: str) -> object | None:
        """Return the stored blob for ``key``."""
        response = (
            self.client.table(self.table_name)
            .select("value")
            .eq("key", key)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return response.data[0].get("value")

    def save(self, key: str, value: object) -> None:
        """Upsert the blob for ``key``."""
        response = (
            self.client.table(self.table_name)
            .upsert(
                {
                    "key": key,
                    "value": value,
                    "updated_at": datetime.now(tz=UTC).isoformat(),
                },
                on_conflict="key",
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError(f"Failed to save state: {key}")
