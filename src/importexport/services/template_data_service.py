"""Per-template key/value configuration (object data and format data)."""

import logging
from collections.abc import Iterable, Mapping
from typing import Union

from importexport.core.exceptions import ValidationError
from importexport.repositories.protocols import KeyValueRepository

logger = logging.getLogger(__name__)

TemplateIds = Union[int, Iterable[int]]


def normalize_template_ids(template_ids: TemplateIds) -> list[int]:
    """Accept a single template ID or a collection of them."""
    if isinstance(template_ids, bool):
        raise ValidationError("TemplateID must be an integer or a collection of integers")
    if isinstance(template_ids, int):
        return [template_ids]
    if isinstance(template_ids, (str, bytes)) or not isinstance(template_ids, Iterable):
        raise ValidationError("TemplateID must be an integer or a collection of integers")

    ids = []
    for template_id in template_ids:
        if isinstance(template_id, bool) or not isinstance(template_id, int):
            raise ValidationError(f"Invalid TemplateID: {template_id!r}")
        ids.append(template_id)
    return ids


class TemplateDataService:
    """
    Key/value store attached to each template.

    One instance serves the object data, another the format data. Saving
    replaces everything stored for the template: existing pairs are deleted,
    then the given pairs are inserted. The two steps are not atomic.
    """

    def __init__(self, repo: KeyValueRepository, label: str):
        self._repo = repo
        self._label = label

    @property
    def label(self) -> str:
        return self._label

    def get_all(self, template_id: int) -> dict[str, str]:
        """Return the key/value mapping of a template (empty if none)."""
        (template_id,) = normalize_template_ids(template_id)
        return self._repo.get_all(template_id)

    def save_all(self, template_id: int, data: Mapping[str, str]) -> None:
        """Replace all pairs of a template with ``data``."""
        (template_id,) = normalize_template_ids(template_id)
        pairs = self._validate_pairs(data)

        self._repo.delete_all([template_id])
        self._repo.insert_all(template_id, pairs)
        logger.debug("Saved %d %s pairs for template %s", len(pairs), self._label, template_id)

    def delete_all(self, template_ids: TemplateIds) -> None:
        """Remove all pairs for one template or a collection of templates."""
        ids = normalize_template_ids(template_ids)
        self._repo.delete_all(ids)

    def _validate_pairs(self, data: Mapping[str, str]) -> dict[str, str]:
        if not isinstance(data, Mapping):
            logger.error("%s must be a mapping, got %s", self._label, type(data).__name__)
            raise ValidationError(f"{self._label} must be a key/value mapping")

        pairs: dict[str, str] = {}
        for key, value in data.items():
            if not isinstance(key, str) or not key:
                raise ValidationError(f"{self._label} keys must be non-empty strings")
            if value is None:
                value = ""
            if not isinstance(value, str):
                raise ValidationError(f"{self._label} value for '{key}' must be a string")
            pairs[key] = value
        return pairs
