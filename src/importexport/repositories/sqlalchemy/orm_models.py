"""SQLAlchemy ORM model definitions."""

from datetime import datetime

from sqlalchemy import (
    Column,
    Integer,
    String,
    DateTime,
    Text,
    ForeignKey,
    UniqueConstraint,
    Enum as SqlEnum,
)

from importexport.repositories.sqlalchemy.database import Base
from importexport.domain.models.enums import TemplateKind, ValidityState


class TemplateORM(Base):
    """SQLAlchemy model for Template."""

    __tablename__ = "template"
    __table_args__ = (
        UniqueConstraint("object_type", "name", name="uq_template_object_name"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    kind = Column(SqlEnum(TemplateKind), nullable=False)
    object_type = Column(String(200), nullable=False, index=True)
    format_type = Column(String(200), nullable=False)
    name = Column(String(200), nullable=False)
    validity_state = Column(
        SqlEnum(ValidityState),
        default=ValidityState.VALID,
        nullable=False,
    )
    comment = Column(String(250), nullable=True)
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)
    created_by = Column(Integer, nullable=False)
    changed_at = Column(DateTime, nullable=False, default=datetime.utcnow)
    changed_by = Column(Integer, nullable=False)


class ObjectDataORM(Base):
    """SQLAlchemy model for one object-backend configuration pair."""

    __tablename__ = "object_data"
    __table_args__ = (
        UniqueConstraint("template_id", "data_key", name="uq_object_data_key"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    template_id = Column(
        Integer, ForeignKey("template.id", ondelete="CASCADE"), nullable=False, index=True
    )
    data_key = Column(String(100), nullable=False)
    data_value = Column(Text, nullable=True)


class FormatDataORM(Base):
    """SQLAlchemy model for one format-backend configuration pair."""

    __tablename__ = "format_data"
    __table_args__ = (
        UniqueConstraint("template_id", "data_key", name="uq_format_data_key"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    template_id = Column(
        Integer, ForeignKey("template.id", ondelete="CASCADE"), nullable=False, index=True
    )
    data_key = Column(String(100), nullable=False)
    data_value = Column(Text, nullable=True)
