"""SQLAlchemy implementation of KeyValueRepository."""

from typing import Type, Union

from sqlalchemy.orm import Session

from importexport.repositories.sqlalchemy.orm_models import ObjectDataORM, FormatDataORM

DataORM = Union[Type[ObjectDataORM], Type[FormatDataORM]]


class SqlAlchemyKeyValueRepository:
    """
    SQLAlchemy-backed key/value repository.

    The same implementation serves both the ``object_data`` and the
    ``format_data`` table; the ORM class picks which one.
    """

    def __init__(self, db: Session, model: DataORM):
        self._db = db
        self._model = model

    def get_all(self, template_id: int) -> dict[str, str]:
        """Return every pair stored for a template."""
        rows = (
            self._db.query(self._model)
            .filter(self._model.template_id == template_id)
            .all()
        )
        return {row.data_key: row.data_value or "" for row in rows}

    def insert_all(self, template_id: int, data: dict[str, str]) -> None:
        """Insert pairs for a template. Existing keys must have been removed."""
        for key, value in data.items():
            self._db.add(
                self._model(template_id=template_id, data_key=key, data_value=value)
            )
        self._db.commit()

    def delete_all(self, template_ids: list[int]) -> None:
        """Remove every pair stored for the given templates."""
        if not template_ids:
            return
        self._db.query(self._model).filter(
            self._model.template_id.in_(template_ids)
        ).delete(synchronize_session=False)
        self._db.commit()


class SqlAlchemyObjectDataRepository(SqlAlchemyKeyValueRepository):
    """Key/value pairs consumed by object backends."""

    def __init__(self, db: Session):
        super().__init__(db, ObjectDataORM)


class SqlAlchemyFormatDataRepository(SqlAlchemyKeyValueRepository):
    """Key/value pairs consumed by format backends."""

    def __init__(self, db: Session):
        super().__init__(db, FormatDataORM)
