"""Object backend protocol."""

from typing import Protocol, Sequence

from importexport.domain.models import AttributeDescriptor, Template
from importexport.domain.views import Cell, Row


class ObjectBackend(Protocol):
    """
    Protocol for object backends.

    An object backend translates between persisted domain objects (tickets,
    customers, ...) and generic rows. Concrete implementations live outside
    this package and are registered with the BackendRegistry.
    """

    def attributes_get(self, template: Template) -> list[AttributeDescriptor]:
        """Describe the backend's configuration surface for this template."""
        ...

    def mapping_object_attributes_get(self, template: Template) -> list[AttributeDescriptor]:
        """Describe the per-column mapping configuration."""
        ...

    def column_headers_get(self, template_id: int) -> list[str]:
        """Header cells written before the data rows when headers are enabled."""
        ...

    def export_data_get(self, template_id: int) -> list[Row]:
        """Return every row to export."""
        ...

    def import_data_save(self, template_id: int, row: Sequence[Cell]) -> None:
        """Persist one imported row; raises AppError when the row is rejected."""
        ...
