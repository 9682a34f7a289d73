"""
Pytest configuration and fixtures for import/export template tests.

This module provides:
- In-memory SQLite database fixtures
- Repository, service and backend registry fixtures
- An in-memory "Ticket" object backend
- Factory helpers for templates
- FastAPI test client wired to the test database
"""

from typing import Callable, Optional, Sequence

import pytest
from sqlalchemy import create_engine, event, StaticPool
from sqlalchemy.orm import sessionmaker, Session
from fastapi.testclient import TestClient

from importexport.main import app
from importexport.api.deps import get_backend_factories
from importexport.backends import (
    BackendRegistry,
    BackendServices,
    CsvFormatBackend,
    backend_factories,
    backend_identifier,
)
from importexport.config.settings import (
    Settings,
    BackendRegistration,
    set_settings,
    reset_settings,
)
from importexport.core.exceptions import ValidationError
from importexport.domain.models import (
    AttributeDescriptor,
    AttributeInput,
    BackendKind,
    InputType,
    Template,
    TemplateKind,
    ValidityState,
)
from importexport.repositories.sqlalchemy.database import (
    Base,
    get_db,
    enable_sqlite_foreign_keys,
    reset_database,
)
# Import ORM models to register them with Base before creating tables
from importexport.repositories.sqlalchemy import orm_models  # noqa: F401
from importexport.repositories.sqlalchemy import (
    SqlAlchemyTemplateRepository,
    SqlAlchemyObjectDataRepository,
    SqlAlchemyFormatDataRepository,
)
from importexport.services import (
    TemplateDataService,
    TemplateService,
    TemplateCreate,
    ImportExportService,
)


# =============================================================================
# OBJECT BACKEND STUB
# =============================================================================


class MemoryTicketBackend:
    """
    Object backend keeping "tickets" in a dict.

    Rows are (title, state). Rows without a title are rejected.
    """

    HEADERS = ["Title", "State"]

    def __init__(self, store: dict[int, list[list[str]]]):
        self._store = store

    def attributes_get(self, template: Template) -> list[AttributeDescriptor]:
        return [
            AttributeDescriptor(
                key="DefaultState",
                name="Default State",
                input=AttributeInput(type=InputType.TEXT, default_value="new"),
            )
        ]

    def mapping_object_attributes_get(self, template: Template) -> list[AttributeDescriptor]:
        return [
            AttributeDescriptor(
                key="Key",
                name="Key",
                input=AttributeInput(
                    type=InputType.SELECTION,
                    options={"Title": "Title", "State": "State"},
                ),
            )
        ]

    def column_headers_get(self, template_id: int) -> list[str]:
        return list(self.HEADERS)

    def export_data_get(self, template_id: int) -> list[list[str]]:
        return [list(row) for row in self._store.get(template_id, [])]

    def import_data_save(self, template_id: int, row: Sequence[str]) -> None:
        if not row or not row[0]:
            raise ValidationError("Ticket title is required")
        self._store.setdefault(template_id, []).append(list(row))


@pytest.fixture
def ticket_store() -> dict[int, list[list[str]]]:
    """Backing store shared by every MemoryTicketBackend of a test."""
    return {}


@pytest.fixture
def factories(ticket_store) -> dict:
    """Built-in backend factories plus the Ticket object backend."""
    result = backend_factories()
    result[backend_identifier(BackendKind.OBJECT, "Ticket")] = (
        lambda services: MemoryTicketBackend(ticket_store)
    )
    return result


# =============================================================================
# DATABASE FIXTURES
# =============================================================================


@pytest.fixture(scope="function")
def test_engine():
    """Create test database engine with shared in-memory SQLite."""
    reset_settings()

    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    event.listen(engine, "connect", enable_sqlite_foreign_keys)
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def test_session(test_engine) -> Session:
    """Create test database session."""
    TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)
    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()


# =============================================================================
# REPOSITORY FIXTURES
# =============================================================================


@pytest.fixture
def template_repo(test_session) -> SqlAlchemyTemplateRepository:
    """Provide test TemplateRepository."""
    return SqlAlchemyTemplateRepository(test_session)


@pytest.fixture
def object_data_repo(test_session) -> SqlAlchemyObjectDataRepository:
    """Provide test object data repository."""
    return SqlAlchemyObjectDataRepository(test_session)


@pytest.fixture
def format_data_repo(test_session) -> SqlAlchemyFormatDataRepository:
    """Provide test format data repository."""
    return SqlAlchemyFormatDataRepository(test_session)


# =============================================================================
# SERVICE FIXTURES
# =============================================================================


@pytest.fixture
def settings() -> Settings:
    """Settings with a Ticket object backend in the catalog."""
    return Settings(
        database_url="sqlite://",
        object_backend_registration={
            "Ticket": BackendRegistration(name="Ticket"),
            "FAQ": BackendRegistration(name="FAQ Article"),
        },
    )


@pytest.fixture
def object_data(object_data_repo) -> TemplateDataService:
    """Provide the object data store."""
    return TemplateDataService(object_data_repo, label="ObjectData")


@pytest.fixture
def format_data(format_data_repo) -> TemplateDataService:
    """Provide the format data store."""
    return TemplateDataService(format_data_repo, label="FormatData")


@pytest.fixture
def template_service(template_repo, object_data, format_data) -> TemplateService:
    """Provide test TemplateService."""
    return TemplateService(
        template_repo=template_repo,
        object_data=object_data,
        format_data=format_data,
    )


@pytest.fixture
def backend_services(settings, object_data, format_data, test_session) -> BackendServices:
    """Collaborators handed to backend factories."""
    return BackendServices(
        settings=settings,
        object_data=object_data,
        format_data=format_data,
        session=test_session,
    )


@pytest.fixture
def backend_registry(backend_services, factories) -> BackendRegistry:
    """Provide a BackendRegistry with CSV and Ticket backends."""
    return BackendRegistry(backend_services, factories=factories)


@pytest.fixture
def import_export_service(
    template_service,
    format_data,
    backend_registry,
    settings,
) -> ImportExportService:
    """Provide test ImportExportService."""
    return ImportExportService(
        templates=template_service,
        format_data=format_data,
        registry=backend_registry,
        settings=settings,
    )


@pytest.fixture
def csv_backend(format_data) -> CsvFormatBackend:
    """Provide a CSV format backend reading the test format data."""
    return CsvFormatBackend(format_data=format_data)


# =============================================================================
# FACTORY FIXTURES
# =============================================================================


@pytest.fixture
def template_factory(template_service) -> Callable[..., int]:
    """Factory for creating test templates; returns the template ID."""
    counter = {"n": 0}

    def _create_template(
        name: Optional[str] = None,
        object_type: str = "Ticket",
        format_type: str = "CSV",
        kind: TemplateKind = TemplateKind.IMPORT,
        validity: ValidityState = ValidityState.VALID,
        comment: Optional[str] = None,
        user_id: int = 1,
    ) -> int:
        if name is None:
            counter["n"] += 1
            name = f"Template {counter['n']}"
        return template_service.add(
            TemplateCreate(
                kind=kind,
                object_type=object_type,
                format_type=format_type,
                name=name,
                validity=validity,
                comment=comment,
            ),
            user_id=user_id,
        )

    return _create_template


@pytest.fixture
def csv_template_factory(template_factory, format_data) -> Callable[..., int]:
    """Factory for templates that already carry CSV format data."""

    def _create_csv_template(
        separator: str = "Comma",
        charset: str = "UTF-8",
        include_headers: bool = False,
        **kwargs,
    ) -> int:
        template_id = template_factory(**kwargs)
        format_data.save_all(
            template_id,
            {
                "ColumnSeparator": separator,
                "Charset": charset,
                "IncludeColumnHeaders": "1" if include_headers else "0",
            },
        )
        return template_id

    return _create_csv_template


# =============================================================================
# API TEST CLIENT FIXTURE
# =============================================================================


@pytest.fixture
def client(test_engine, factories, settings) -> TestClient:
    """Provide FastAPI test client with test database and Ticket backend."""
    set_settings(settings)
    reset_database()
    TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)

    def override_get_db():
        session = TestSessionLocal()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_backend_factories] = lambda: factories
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
    reset_database()
    reset_settings()
