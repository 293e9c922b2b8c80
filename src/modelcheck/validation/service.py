"""Model validation service.

Runs the validators registered for a model's type and records the outcome in
the validation cache.
"""

import logging
from typing import Any

from ..exceptions import CacheRetrievalError
from .cache import ValidationCache
from .framework import (
    ModelValidationResult,
    ModelValidator,
    Severity,
    ValidatorBundle,
    ValidatorResult,
)
from .registry import ValidatorRegistry

logger = logging.getLogger(__name__)


class ModelValidationService:
    """Validates models against the validators registered for their type."""

    def __init__(self, registry: ValidatorRegistry, cache: ValidationCache | None = None,
                 use_cache: bool = True):
        self.registry = registry
        self.cache = cache
        self.use_cache = use_cache

    def validate(self, model: Any) -> ModelValidationResult:
        """Run every validator registered for ``type(model)``.

        Args:
            model: Model to validate

        Returns:
            ModelValidationResult with one result per registered validator
        """
        generation = self.cache.generation if self.cache is not None else None
        validators = self.registry.get_validators(type(model))

        logger.debug(f"Validating {_describe(model)} with {len(validators)} validators")

        results = tuple(self._run(validator, model) for validator in validators)
        result = ModelValidationResult(model=model, results=results, validators=tuple(validators))

        messages = result.messages
        if self.cache is not None:
            self.cache.cache_validation_results(
                model,
                messages[Severity.ERROR],
                messages[Severity.WARNING],
                generation=generation,
            )

        logger.debug(f"Validated {_describe(model)}: valid={result.valid}, "
                     f"{len(messages[Severity.ERROR])} errors, "
                     f"{len(messages[Severity.WARNING])} warnings")
        return result

    def get_error_messages(self, model: Any) -> list[str]:
        """Error messages of ``model``, read from the cache when possible."""
        return self._get_messages(model, Severity.ERROR)

    def get_warning_messages(self, model: Any) -> list[str]:
        """Warning messages of ``model``, read from the cache when possible."""
        return self._get_messages(model, Severity.WARNING)

    def reset(self) -> None:
        """Drop all cached validation results."""
        if self.cache is not None:
            self.cache.clear()

    def _get_messages(self, model: Any, severity: Severity) -> list[str]:
        if self.cache is not None and self.use_cache:
            try:
                if severity == Severity.ERROR:
                    return self.cache.get_cached_error_messages(model)
                return self.cache.get_cached_warning_messages(model)
            except CacheRetrievalError:
                logger.debug(f"No cached results for {_describe(model)}, validating")
        return self.validate(model).messages[severity]

    def _run(self, validator: ModelValidator, model: Any) -> ValidatorResult:
        bundled = None
        if isinstance(validator, ValidatorBundle):
            children: list[ValidatorResult] = []

            def check(child: ModelValidator, m: Any) -> bool:
                child_result = self._run(child, m)
                children.append(child_result)
                return child_result.valid

            valid = validator.evaluate_with(model, check)
            bundled = tuple(children)
        else:
            valid = validator.evaluate(model)

        return ValidatorResult(
            valid=bool(valid),
            message=validator.message,
            detailed_message=validator.detailed_message(model),
            severity=validator.severity,
            validator=validator.identity,
            bundled=bundled,
            documentation_resource_type=validator.documentation_resource_type,
        )


def _describe(model: Any) -> str:
    return getattr(model, "path", None) or type(model).__name__
