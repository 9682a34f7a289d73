"""Template domain model."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from importexport.domain.models.enums import TemplateKind, ValidityState


@dataclass
class Template:
    """
    Named configuration binding one object type and one format type.

    ``object_type`` and ``format_type`` are fixed once the template exists;
    only ``name``, ``validity`` and ``comment`` change on update.
    """

    template_id: int
    kind: TemplateKind
    object_type: str
    format_type: str
    name: str
    validity: ValidityState = ValidityState.VALID
    comment: str = ""
    created_at: Optional[datetime] = field(default=None)
    created_by: Optional[int] = field(default=None)
    changed_at: Optional[datetime] = field(default=None)
    changed_by: Optional[int] = field(default=None)

    def __post_init__(self) -> None:
        if isinstance(self.kind, str):
            self.kind = TemplateKind(self.kind)
        if isinstance(self.validity, str):
            self.validity = ValidityState(self.validity)

    @property
    def number(self) -> str:
        """Zero-padded display number of the template."""
        return f"{self.template_id:06d}"
