"""Validation engine wiring the registry, cache and validation service."""

import logging
from typing import Any

from modelcheck.config import LogLevel, ModelcheckConfig, load_config
from modelcheck.validation.cache import ValidationCache
from modelcheck.validation.framework import ModelValidationResult
from modelcheck.validation.registry import ValidatorProvider, ValidatorRegistry
from modelcheck.validation.service import ModelValidationService

logger = logging.getLogger(__name__)

_LOG_LEVELS = {
    LogLevel.ERROR: logging.ERROR,
    LogLevel.WARN: logging.WARNING,
    LogLevel.INFO: logging.INFO,
    LogLevel.DEBUG: logging.DEBUG,
}


class ValidationEngine:
    """Owns the validator registry, result cache and validation service.

    Without an explicit config the engine loads the nearest ``.modelcheck.json``,
    falling back to defaults.

    Providers added to the engine are bound to its registry and activated.
    ``shutdown()`` deactivates them and empties the registry and cache.
    """

    def __init__(self, config: ModelcheckConfig | None = None):
        self.config = config or load_config()
        logging.getLogger("modelcheck").setLevel(_LOG_LEVELS[LogLevel(self.config.logging.level)])

        self.registry = ValidatorRegistry()
        self.cache = None
        if self.config.cache.enabled:
            self.cache = ValidationCache(max_age_seconds=self.config.cache.max_age_seconds)
        self.service = ModelValidationService(
            self.registry,
            self.cache,
            use_cache=self.config.validation.use_cache,
        )

    def add_provider(self, provider: ValidatorProvider) -> None:
        provider.registry = self.registry
        provider.activate()

    def remove_provider(self, provider: ValidatorProvider) -> None:
        provider.deactivate()

    def validate(self, model: Any) -> ModelValidationResult:
        return self.service.validate(model)

    def shutdown(self) -> None:
        for provider in self.registry.providers:
            provider.deactivate()
        self.registry.clear()
        self.service.reset()
        logger.info("Validation engine shut down")

    def __enter__(self) -> "ValidationEngine":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.shutdown()
