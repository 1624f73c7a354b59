"""Exception hierarchy for the classification pipeline.

Callers can tell the failure kinds apart:
- ConfigurationError: a required capability is missing or unconfigured
- TransportError: the service could not be reached or returned an error status
- SchemaError: the service replied, but the payload was empty or malformed
- InputValidationError: the request itself is unusable
- TaxonomyError: the reference data is broken (raised at load time)
"""
from __future__ import annotations

from typing import Optional


class ClassificationError(Exception):
    """Base class for every classification failure."""

    kind = "classification_error"


class ConfigurationError(ClassificationError):
    kind = "configuration_error"


class TransportError(ClassificationError):
    """Network or service failure talking to an external capability."""

    kind = "transport_error"

    def __init__(
        self,
        message: str,
        status: Optional[int] = None,
        body: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.status = status
        self.body = body

    def __str__(self) -> str:
        base = super().__str__()
        if self.status is None:
            return base
        detail = f"{base} (status={self.status})"
        if self.body:
            detail += f": {self.body[:500]}"
        return detail


class SchemaError(ClassificationError):
    kind = "schema_error"


class InputValidationError(ClassificationError):
    kind = "validation_error"


class TaxonomyError(ClassificationError):
    kind = "taxonomy_error"
