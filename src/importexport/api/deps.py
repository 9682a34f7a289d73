"""Dependency injection for FastAPI."""

from typing import Optional

from fastapi import Depends, Header
from sqlalchemy.orm import Session

from importexport.backends import (
    BackendRegistry,
    BackendServices,
    BackendFactory,
    backend_factories,
)
from importexport.config.settings import Settings, get_settings
from importexport.repositories.sqlalchemy.database import get_db
from importexport.repositories.sqlalchemy import (
    SqlAlchemyTemplateRepository,
    SqlAlchemyObjectDataRepository,
    SqlAlchemyFormatDataRepository,
)
from importexport.services import (
    TemplateDataService,
    TemplateService,
    ImportExportService,
)


def get_app_settings() -> Settings:
    """Provide the current Settings."""
    return get_settings()


def get_user_id(
    x_user_id: Optional[int] = Header(default=None),
    settings: Settings = Depends(get_app_settings),
) -> int:
    """Audit user of the request (falls back to the configured default)."""
    return x_user_id if x_user_id is not None else settings.default_user_id


def get_object_data(db: Session = Depends(get_db)) -> TemplateDataService:
    """Provide the object data store."""
    return TemplateDataService(SqlAlchemyObjectDataRepository(db), label="ObjectData")


def get_format_data(db: Session = Depends(get_db)) -> TemplateDataService:
    """Provide the format data store."""
    return TemplateDataService(SqlAlchemyFormatDataRepository(db), label="FormatData")


def get_template_service(
    db: Session = Depends(get_db),
    object_data: TemplateDataService = Depends(get_object_data),
    format_data: TemplateDataService = Depends(get_format_data),
) -> TemplateService:
    """Provide TemplateService instance."""
    return TemplateService(
        template_repo=SqlAlchemyTemplateRepository(db),
        object_data=object_data,
        format_data=format_data,
    )


def get_backend_factories() -> dict[str, BackendFactory]:
    """Provide the backend factory map."""
    return backend_factories()


def get_backend_registry(
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
    object_data: TemplateDataService = Depends(get_object_data),
    format_data: TemplateDataService = Depends(get_format_data),
    factories: dict[str, BackendFactory] = Depends(get_backend_factories),
) -> BackendRegistry:
    """Provide a BackendRegistry scoped to the request."""
    return BackendRegistry(
        BackendServices(
            settings=settings,
            object_data=object_data,
            format_data=format_data,
            session=db,
        ),
        factories=factories,
    )


def get_import_export_service(
    templates: TemplateService = Depends(get_template_service),
    format_data: TemplateDataService = Depends(get_format_data),
    registry: BackendRegistry = Depends(get_backend_registry),
    settings: Settings = Depends(get_app_settings),
) -> ImportExportService:
    """Provide ImportExportService instance."""
    return ImportExportService(
        templates=templates,
        format_data=format_data,
        registry=registry,
        settings=settings,
    )
