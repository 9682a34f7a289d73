"""SQLAlchemy implementation of TemplateRepository."""

from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from importexport.core.exceptions import NotFoundError
from importexport.domain.models import Template
from importexport.repositories.sqlalchemy.orm_models import TemplateORM


class SqlAlchemyTemplateRepository:
    """SQLAlchemy-backed template repository."""

    def __init__(self, db: Session):
        self._db = db

    def create(self, template: Template) -> Template:
        """Persist a new template and return it with its assigned ID."""
        orm_template = TemplateORM(
            kind=template.kind,
            object_type=template.object_type,
            format_type=template.format_type,
            name=template.name,
            validity_state=template.validity,
            comment=template.comment,
            created_at=template.created_at,
            created_by=template.created_by,
            changed_at=template.changed_at,
            changed_by=template.changed_by,
        )
        self._db.add(orm_template)
        try:
            self._db.commit()
        except IntegrityError:
            self._db.rollback()
            raise
        self._db.refresh(orm_template)
        return self._to_domain(orm_template)

    def get_by_id(self, template_id: int) -> Optional[Template]:
        """Retrieve template by ID."""
        orm_template = self._db.query(TemplateORM).filter(
            TemplateORM.id == template_id
        ).first()
        return self._to_domain(orm_template) if orm_template else None

    def get_by_object_and_name(self, object_type: str, name: str) -> Optional[Template]:
        """Retrieve the template of an object type carrying the given name."""
        orm_template = self._db.query(TemplateORM).filter(
            TemplateORM.object_type == object_type,
            TemplateORM.name == name,
        ).first()
        return self._to_domain(orm_template) if orm_template else None

    def list_by_object(self, object_type: str) -> list[Template]:
        """List templates of an object type, ordered by name."""
        orm_templates = (
            self._db.query(TemplateORM)
            .filter(TemplateORM.object_type == object_type)
            .order_by(TemplateORM.name, TemplateORM.id)
            .all()
        )
        return [self._to_domain(t) for t in orm_templates]

    def update(self, template: Template) -> Template:
        """Update name, validity, comment and change audit fields."""
        orm_template = self._db.query(TemplateORM).filter(
            TemplateORM.id == template.template_id
        ).first()
        if orm_template:
            orm_template.name = template.name
            orm_template.validity_state = template.validity
            orm_template.comment = template.comment
            orm_template.changed_at = template.changed_at
            orm_template.changed_by = template.changed_by
            try:
                self._db.commit()
            except IntegrityError:
                self._db.rollback()
                raise
            self._db.refresh(orm_template)
            return self._to_domain(orm_template)
        raise NotFoundError("Template", str(template.template_id))

    def delete_many(self, template_ids: list[int]) -> int:
        """Delete template rows; returns the number removed."""
        if not template_ids:
            return 0
        deleted = self._db.query(TemplateORM).filter(
            TemplateORM.id.in_(template_ids)
        ).delete(synchronize_session=False)
        self._db.commit()
        return deleted

    @staticmethod
    def _to_domain(orm: TemplateORM) -> Template:
        """Convert ORM model to domain model."""
        return Template(
            template_id=orm.id,
            kind=orm.kind,
            object_type=orm.object_type,
            format_type=orm.format_type,
            name=orm.name,
            validity=orm.validity_state,
            comment=orm.comment or "",
            created_at=orm.created_at,
            created_by=orm.created_by,
            changed_at=orm.changed_at,
            changed_by=orm.changed_by,
        )
