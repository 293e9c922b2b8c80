"""Validation layer for modelcheck.

Validators are registered per model type by providers, composed into AND/OR
bundles and run by the model validation service, which caches the resulting
messages per model.
"""

from .cache import CacheEntry, ValidationCache
from .framework import (
    DocumentedModelValidator,
    ModelValidationResult,
    ModelValidator,
    Severity,
    ValidatorBundle,
    ValidatorResult,
)
from .registry import ValidatorProvider, ValidatorRegistry
from .rules import (
    FailedValidator,
    HasChildResource,
    HasDescription,
    HasFileExtension,
    HasTitle,
    HasValidChild,
    IsChildResourceValidResourceType,
    ListContainsNoNulls,
    ModelListHasNoErrors,
    ModelListHasNoWarnings,
    failed_error_validators,
    failed_warning_validators,
)
from .service import ModelValidationService

__all__ = [
    "CacheEntry",
    "ValidationCache",
    "DocumentedModelValidator",
    "ModelValidationResult",
    "ModelValidator",
    "Severity",
    "ValidatorBundle",
    "ValidatorResult",
    "ValidatorProvider",
    "ValidatorRegistry",
    "ModelValidationService",
    "FailedValidator",
    "HasChildResource",
    "HasDescription",
    "HasFileExtension",
    "HasTitle",
    "HasValidChild",
    "IsChildResourceValidResourceType",
    "ListContainsNoNulls",
    "ModelListHasNoErrors",
    "ModelListHasNoWarnings",
    "failed_error_validators",
    "failed_warning_validators",
]
