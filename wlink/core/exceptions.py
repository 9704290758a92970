__all__ = [
    "BaseError",
    "BadRequestError",
    "ComponentError",
    "DecodeError",
    "InterfaceError",
    "InvalidManifestError",
    "LinkError",
    "LoadError",
    "NotSupportedError",
    "ValidationError",
]

from typing import Any


class BaseError(Exception):
    status_code: int


class BadRequestError(BaseError):
    status_code = 400


class NotSupportedError(BaseError):
    status_code = 415


class DecodeError(BaseError):
    status_code = 422


class LoadError(BaseError):
    status_code = 500


class ValidationError(BaseError):
    status_code = 422
    kind: str = "Validation"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"{self.kind} error: {self.message}"


class ComponentError(ValidationError):
    kind = "Component"


class LinkError(ValidationError):
    kind = "Link"


class InterfaceError(ValidationError):
    kind = "Interface"


class InvalidManifestError(BaseError):
    status_code = 422

    def __init__(self, report: Any):
        self.report = report
        super().__init__(
            "Validation failed: "
            + "; ".join(str(error) for error in report.errors)
        )
