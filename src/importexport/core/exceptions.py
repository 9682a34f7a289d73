"""Application-level exceptions."""


class AppError(Exception):
    """Base exception for application errors."""

    def __init__(self, message: str, code: str = "APP_ERROR"):
        self.message = message
        self.code = code
        super().__init__(message)


class ValidationError(AppError):
    """Raised when input validation fails."""

    def __init__(self, message: str):
        super().__init__(message, code="VALIDATION_ERROR")


class NotFoundError(AppError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        super().__init__(f"{resource} not found: {identifier}", code="NOT_FOUND")


class ConflictError(AppError):
    """Raised when a template name is already taken for its object type."""

    def __init__(self, message: str):
        super().__init__(message, code="CONFLICT")


class BackendLoadError(AppError):
    """Raised when no backend is registered under the requested name."""

    def __init__(self, identifier: str):
        super().__init__(f"Can't load backend module {identifier}", code="BACKEND_LOAD_ERROR")


class BackendInstantiationError(AppError):
    """Raised when a registered backend factory fails to build an instance."""

    def __init__(self, identifier: str, reason: str):
        super().__init__(
            f"Can't create a new instance of backend module {identifier}: {reason}",
            code="BACKEND_INSTANTIATION_ERROR",
        )


class SerializationError(AppError):
    """Raised when a row cannot be combined into serialized output."""

    def __init__(self, message: str):
        super().__init__(message, code="SERIALIZATION_ERROR")
