"""Key-value repository protocol."""

from typing import Protocol


class KeyValueRepository(Protocol):
    """Interface for per-template key/value pairs (object data or format data)."""

    def get_all(self, template_id: int) -> dict[str, str]:
        """Return every pair stored for a template."""
        ...

    def insert_all(self, template_id: int, data: dict[str, str]) -> None:
        """Insert pairs for a template. Existing keys must have been removed."""
        ...

    def delete_all(self, template_ids: list[int]) -> None:
        """Remove every pair stored for the given templates."""
        ...
