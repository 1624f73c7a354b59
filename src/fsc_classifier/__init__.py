"""Classify companies into Federal Supply Classification (FSC) codes."""

__version__ = "0.1.0"

from .config import Settings
from .errors import (
    ClassificationError,
    ConfigurationError,
    InputValidationError,
    SchemaError,
    TaxonomyError,
    TransportError,
)
from .pipeline.orchestrator import ClassificationOrchestrator, build_orchestrator
from .schemas.contracts import CategoryMatch, ClassificationRequest, ClassificationResult

__all__ = [
    "__version__",
    "build_orchestrator",
    "CategoryMatch",
    "ClassificationError",
    "ClassificationOrchestrator",
    "ClassificationRequest",
    "ClassificationResult",
    "ConfigurationError",
    "InputValidationError",
    "SchemaError",
    "Settings",
    "TaxonomyError",
    "TransportError",
]
