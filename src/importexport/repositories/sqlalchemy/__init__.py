"""SQLAlchemy repository implementations."""

from importexport.repositories.sqlalchemy.database import (
    get_engine,
    get_session_factory,
    get_db,
    get_session,
    init_db,
    reset_database,
    Base,
)
from importexport.repositories.sqlalchemy.template_repo import SqlAlchemyTemplateRepository
from importexport.repositories.sqlalchemy.key_value_repo import (
    SqlAlchemyKeyValueRepository,
    SqlAlchemyObjectDataRepository,
    SqlAlchemyFormatDataRepository,
)

__all__ = [
    "get_engine",
    "get_session_factory",
    "get_db",
    "get_session",
    "init_db",
    "reset_database",
    "Base",
    "SqlAlchemyTemplateRepository",
    "SqlAlchemyKeyValueRepository",
    "SqlAlchemyObjectDataRepository",
    "SqlAlchemyFormatDataRepository",
]
