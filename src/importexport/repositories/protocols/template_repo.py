"""Template repository protocol."""

from typing import Protocol, Optional

from importexport.domain.models import Template


class TemplateRepository(Protocol):
    """Interface for template metadata access."""

    def create(self, template: Template) -> Template:
        """Persist a new template and return it with its assigned ID."""
        ...

    def get_by_id(self, template_id: int) -> Optional[Template]:
        """Retrieve template by ID."""
        ...

    def get_by_object_and_name(self, object_type: str, name: str) -> Optional[Template]:
        """Retrieve the template of an object type carrying the given name."""
        ...

    def list_by_object(self, object_type: str) -> list[Template]:
        """List templates of an object type, ordered by name."""
        ...

    def update(self, template: Template) -> Template:
        """Update name, validity, comment and change audit fields.

        Raises NotFoundError when the row no longer exists.
        """
        ...

    def delete_many(self, template_ids: list[int]) -> int:
        """Delete template rows; returns the number removed."""
        ...
