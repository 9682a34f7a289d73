"""Backend registry: resolves backend names to shared instances."""

import logging
import threading
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable, Optional

from sqlalchemy.orm import Session

from importexport.config.settings import Settings
from importexport.core.exceptions import (
    ValidationError,
    BackendLoadError,
    BackendInstantiationError,
)
from importexport.domain.models import BackendKind

if TYPE_CHECKING:
    from importexport.services.import_export_service import ImportExportService
    from importexport.services.template_data_service import TemplateDataService

logger = logging.getLogger(__name__)


@dataclass
class BackendServices:
    """Collaborators handed to every backend factory."""

    settings: Settings
    object_data: "TemplateDataService"
    format_data: "TemplateDataService"
    session: Optional[Session] = None
    logger: logging.Logger = field(
        default_factory=lambda: logging.getLogger("importexport.backends")
    )
    dispatcher: Optional["ImportExportService"] = None


BackendFactory = Callable[[BackendServices], Any]


def backend_identifier(kind: BackendKind, name: str) -> str:
    """Fully qualified identifier of a backend, e.g. ``importexport.backends.format.CSV``."""
    return f"importexport.backends.{BackendKind(kind).value.lower()}.{name}"


class BackendRegistry:
    """
    Maps backend identifiers to factories and caches the built instances.

    A registry belongs to one execution context (a request, a CLI run, an
    ImportExportContext). Every lookup of the same backend within that
    context returns the same instance; a new registry builds new ones.
    Resolution is serialized so concurrent callers never build two
    instances of one backend; a factory may resolve other backends from
    the same thread.
    """

    def __init__(
        self,
        services: BackendServices,
        factories: Optional[dict[str, BackendFactory]] = None,
    ):
        self._services = services
        self._factories: dict[str, BackendFactory] = dict(factories or {})
        self._instances: dict[str, Any] = {}
        # Reentrant: a factory may resolve other backends while it is built
        self._lock = threading.RLock()

    @property
    def services(self) -> BackendServices:
        return self._services

    def bind_dispatcher(self, dispatcher: "ImportExportService") -> None:
        """Give backends a reference back to the service dispatching to them."""
        self._services.dispatcher = dispatcher

    def register(self, kind: BackendKind, name: str, factory: BackendFactory) -> None:
        """Register a factory for a backend name."""
        identifier = backend_identifier(kind, name)
        with self._lock:
            if identifier in self._factories:
                raise ValueError(f"Duplicate backend '{identifier}'")
            self._factories[identifier] = factory

    def is_registered(self, kind: BackendKind, name: str) -> bool:
        return backend_identifier(kind, name) in self._factories

    def resolve(self, kind: BackendKind, name: str) -> Any:
        """
        Return the backend instance for ``name``, building it on first use.

        Raises:
            BackendLoadError: no factory is registered for the name
            BackendInstantiationError: the factory failed
        """
        if not name:
            logger.error("Need Module!")
            raise ValidationError("Need backend name!")

        identifier = backend_identifier(kind, name)
        with self._lock:
            instance = self._instances.get(identifier)
            if instance is not None:
                return instance

            factory = self._factories.get(identifier)
            if factory is None:
                logger.error("Can't load backend module %s!", identifier)
                raise BackendLoadError(identifier)

            try:
                instance = factory(self._services)
            except Exception as exc:
                logger.error(
                    "Can't create a new instance of backend module %s! (%s)", identifier, exc
                )
                raise BackendInstantiationError(identifier, str(exc)) from exc

            if instance is None:
                logger.error("Can't create a new instance of backend module %s!", identifier)
                raise BackendInstantiationError(identifier, "factory returned nothing")

            self._instances[identifier] = instance
            logger.debug("Loaded backend %s", identifier)
            return instance

    def clear(self) -> None:
        """Drop every cached instance."""
        with self._lock:
            self._instances.clear()
