"""Backend factories known to the application.

The CSV format backend ships with the package. Object backends (and any
further format backends) are registered at startup with
``register_backend_factory``; every new BackendRegistry starts from a copy
of this map.
"""

from importexport.backends.format.csv_backend import CsvFormatBackend
from importexport.backends.registry import BackendFactory, backend_identifier
from importexport.domain.models import BackendKind

_registered: dict[str, BackendFactory] = {}


def register_backend_factory(kind: BackendKind, name: str, factory: BackendFactory) -> None:
    """Make a backend available to every registry created afterwards."""
    _registered[backend_identifier(kind, name)] = factory


def reset_backend_factories() -> None:
    """Forget all startup registrations (built-in backends stay)."""
    _registered.clear()


def backend_factories() -> dict[str, BackendFactory]:
    """Built-in factories plus everything registered at startup."""
    factories: dict[str, BackendFactory] = {
        backend_identifier(BackendKind.FORMAT, "CSV"): CsvFormatBackend.from_services,
    }
    factories.update(_registered)
    return factories
