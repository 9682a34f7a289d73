"""Enumerations for domain models."""

from enum import Enum


class TemplateKind(str, Enum):
    """Direction of a template."""

    IMPORT = "Import"
    EXPORT = "Export"


class ValidityState(str, Enum):
    """Validity of a template."""

    VALID = "valid"
    INVALID = "invalid"
    INVALID_TEMPORARILY = "invalid-temporarily"


class BackendKind(str, Enum):
    """Kinds of pluggable backends."""

    OBJECT = "Object"
    FORMAT = "Format"


class InputType(str, Enum):
    """Input widgets an attribute descriptor can ask for."""

    SELECTION = "Selection"
    TEXT = "Text"
    DTL = "DTL"  # display-template expression, evaluated by the rendering layer
