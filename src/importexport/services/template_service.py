"""Template service for import/export template metadata."""

import logging
from dataclasses import dataclass
from typing import Optional

from sqlalchemy.exc import IntegrityError

from importexport.core.exceptions import ValidationError, NotFoundError, ConflictError
from importexport.core.text import clean_name, now_utc
from importexport.domain.models import Template, TemplateKind, ValidityState
from importexport.repositories.protocols import TemplateRepository
from importexport.services.template_data_service import (
    TemplateDataService,
    TemplateIds,
    normalize_template_ids,
)

logger = logging.getLogger(__name__)


@dataclass
class TemplateCreate:
    """Input data for creating a template."""

    kind: TemplateKind
    object_type: str
    format_type: str
    name: str
    validity: ValidityState = ValidityState.VALID
    comment: Optional[str] = None


@dataclass
class TemplateUpdate:
    """Mutable fields of an existing template."""

    name: str
    validity: ValidityState = ValidityState.VALID
    comment: Optional[str] = None


class TemplateService:
    """
    Service for managing import/export templates.

    Template names are unique per object type. Deleting a template removes
    its object data and format data first.
    """

    def __init__(
        self,
        template_repo: TemplateRepository,
        object_data: TemplateDataService,
        format_data: TemplateDataService,
    ):
        self._template_repo = template_repo
        self._object_data = object_data
        self._format_data = format_data

    def list_ids(self, object_type: str) -> list[int]:
        """List the IDs of an object type's templates, ordered by name."""
        return [t.template_id for t in self.list_templates(object_type)]

    def list_templates(self, object_type: str) -> list[Template]:
        """List an object type's templates, ordered by name."""
        if not object_type:
            raise ValidationError("Need Object!")
        return self._template_repo.list_by_object(object_type)

    def get(self, template_id: int) -> Template:
        """Get template by ID."""
        (template_id,) = normalize_template_ids(template_id)
        template = self._template_repo.get_by_id(template_id)
        if not template:
            raise NotFoundError("Template", str(template_id))
        return template

    def add(self, data: TemplateCreate, user_id: int) -> int:
        """
        Create a new template.

        Args:
            data: Template fields; name and backend keys are sanitized
            user_id: Audit user

        Returns:
            ID of the created template
        """
        self._require(
            Type=data.kind,
            Object=data.object_type,
            Format=data.format_type,
            Name=data.name,
            ValidID=data.validity,
            UserID=user_id,
        )
        object_type = clean_name(data.object_type)
        format_type = clean_name(data.format_type)
        name = clean_name(data.name)
        self._require(Object=object_type, Format=format_type, Name=name)

        if self._template_repo.get_by_object_and_name(object_type, name):
            logger.error(
                "Can't add new template! Template with same name already exists in this object."
                " (object=%s, name=%s)",
                object_type,
                name,
            )
            raise ConflictError(
                f"Template with name '{name}' already exists for object '{object_type}'"
            )

        now = now_utc()
        template = Template(
            template_id=0,
            kind=self._coerce(TemplateKind, data.kind, "Type"),
            object_type=object_type,
            format_type=format_type,
            name=name,
            validity=self._coerce(ValidityState, data.validity, "ValidID"),
            comment=data.comment or "",
            created_at=now,
            created_by=user_id,
            changed_at=now,
            changed_by=user_id,
        )
        try:
            created = self._template_repo.create(template)
        except IntegrityError as exc:
            logger.error("Template insert rejected by the database: %s", exc)
            raise ConflictError(
                f"Template with name '{name}' already exists for object '{object_type}'"
            ) from exc
        logger.info("Added template %s '%s' (%s/%s)", created.number, name, object_type, format_type)
        return created.template_id

    def update(self, template_id: int, patch: TemplateUpdate, user_id: int) -> Template:
        """
        Update name, validity and comment of a template.

        Object and format type are fixed at creation time; the name is
        re-checked for uniqueness within the template's object type.
        """
        self._require(TemplateID=template_id, Name=patch.name, ValidID=patch.validity, UserID=user_id)
        (template_id,) = normalize_template_ids(template_id)
        name = clean_name(patch.name)
        self._require(Name=name)

        template = self._template_repo.get_by_id(template_id)
        if not template:
            logger.error("Can't update template! I can't find the template %s.", template_id)
            raise NotFoundError("Template", str(template_id))

        existing = self._template_repo.get_by_object_and_name(template.object_type, name)
        if existing and existing.template_id != template.template_id:
            logger.error(
                "Can't update template! Template with same name already exists in this object."
                " (object=%s, name=%s)",
                template.object_type,
                name,
            )
            raise ConflictError(
                f"Template with name '{name}' already exists for object '{template.object_type}'"
            )

        template.name = name
        template.validity = self._coerce(ValidityState, patch.validity, "ValidID")
        template.comment = patch.comment or ""
        template.changed_at = now_utc()
        template.changed_by = user_id
        try:
            return self._template_repo.update(template)
        except IntegrityError as exc:
            logger.error("Template update rejected by the database: %s", exc)
            raise ConflictError(
                f"Template with name '{name}' already exists for object '{template.object_type}'"
            ) from exc

    def delete(self, template_ids: TemplateIds) -> None:
        """Delete one or many templates together with their key/value data."""
        ids = normalize_template_ids(template_ids)
        if not ids:
            return

        self._format_data.delete_all(ids)
        self._object_data.delete_all(ids)
        deleted = self._template_repo.delete_many(ids)
        logger.info("Deleted %d template(s): %s", deleted, ids)

    @staticmethod
    def _require(**arguments: object) -> None:
        for argument, value in arguments.items():
            if value is None or value == "":
                logger.error("Need %s!", argument)
                raise ValidationError(f"Need {argument}!")

    @staticmethod
    def _coerce(enum_type, value, argument: str):
        try:
            return enum_type(value)
        except ValueError:
            logger.error("Invalid %s: %r", argument, value)
            raise ValidationError(f"Invalid {argument}: {value}") from None
