"""Application context for in-process service management.

Provides a centralized way to access all services without HTTP, e.g. from
scripts or batch jobs. Each context owns one database session and one
BackendRegistry; closing it discards the cached backend instances.
"""

from typing import Optional

from sqlalchemy.orm import Session

from importexport.backends import BackendRegistry, BackendServices, backend_factories
from importexport.backends.registry import BackendFactory
from importexport.config.settings import Settings, get_settings
from importexport.domain.models import BackendKind
from importexport.repositories.sqlalchemy import (
    get_session,
    SqlAlchemyTemplateRepository,
    SqlAlchemyObjectDataRepository,
    SqlAlchemyFormatDataRepository,
)
from importexport.services import (
    TemplateDataService,
    TemplateService,
    ImportExportService,
)


class ImportExportContext:
    """
    Application context providing in-process access to all services.

    Services and the backend registry are created lazily on first access.
    """

    def __init__(
        self,
        session: Optional[Session] = None,
        settings: Optional[Settings] = None,
    ):
        """
        Initialize application context.

        Args:
            session: Optional session to use; a new one is opened otherwise
            settings: Optional settings; the global settings otherwise
        """
        self._session = session
        self._owns_session = session is None
        self._settings = settings or get_settings()

        self._object_data: Optional[TemplateDataService] = None
        self._format_data: Optional[TemplateDataService] = None
        self._templates: Optional[TemplateService] = None
        self._registry: Optional[BackendRegistry] = None
        self._import_export: Optional[ImportExportService] = None

    def _get_session(self) -> Session:
        """Get or create database session."""
        if self._session is None:
            self._session = get_session()
            self._owns_session = True
        return self._session

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def object_data(self) -> TemplateDataService:
        """Get the object data store."""
        if self._object_data is None:
            self._object_data = TemplateDataService(
                SqlAlchemyObjectDataRepository(self._get_session()), label="ObjectData"
            )
        return self._object_data

    @property
    def format_data(self) -> TemplateDataService:
        """Get the format data store."""
        if self._format_data is None:
            self._format_data = TemplateDataService(
                SqlAlchemyFormatDataRepository(self._get_session()), label="FormatData"
            )
        return self._format_data

    @property
    def templates(self) -> TemplateService:
        """Get the TemplateService instance."""
        if self._templates is None:
            self._templates = TemplateService(
                template_repo=SqlAlchemyTemplateRepository(self._get_session()),
                object_data=self.object_data,
                format_data=self.format_data,
            )
        return self._templates

    @property
    def registry(self) -> BackendRegistry:
        """Get the BackendRegistry of this context."""
        if self._registry is None:
            self._registry = BackendRegistry(
                BackendServices(
                    settings=self._settings,
                    object_data=self.object_data,
                    format_data=self.format_data,
                    session=self._get_session(),
                ),
                factories=backend_factories(),
            )
        return self._registry

    @property
    def import_export(self) -> ImportExportService:
        """Get the ImportExportService instance."""
        if self._import_export is None:
            self._import_export = ImportExportService(
                templates=self.templates,
                format_data=self.format_data,
                registry=self.registry,
                settings=self._settings,
            )
        return self._import_export

    def register_backend(self, kind: BackendKind, name: str, factory: BackendFactory) -> None:
        """Register an extra (e.g. object) backend with this context's registry."""
        self.registry.register(kind, name, factory)

    def close(self) -> None:
        """Clean up resources and drop cached backends."""
        if self._registry is not None:
            self._registry.clear()
        if self._session is not None and self._owns_session:
            self._session.close()
        self._session = None
        self._object_data = None
        self._format_data = None
        self._templates = None
        self._registry = None
        self._import_export = None

    def __enter__(self) -> "ImportExportContext":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
