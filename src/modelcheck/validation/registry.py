"""Validator registry mapping model types to their validators.

Providers contribute validators for a single model type. The registry keeps
the union of every provider's contribution per type, in registration order.
"""

import logging
import threading
from abc import ABC, abstractmethod
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from .framework import ModelValidator

logger = logging.getLogger(__name__)


class ValidatorProvider(ABC):
    """Contributes validators for one model type to a registry."""

    def __init__(self, registry: "ValidatorRegistry | None" = None):
        self.registry = registry

    @property
    @abstractmethod
    def model_type(self) -> type:
        """Model type the validators apply to."""
        pass

    @abstractmethod
    def get_validators(self) -> list[ModelValidator]:
        """Validators to register for ``model_type``."""
        pass

    def activate(self) -> None:
        if self.registry is not None:
            self.registry.register_all_from_provider(self)

    def deactivate(self) -> None:
        if self.registry is not None:
            self.registry.unregister_all_from_provider(self)


@dataclass(frozen=True)
class _Contribution:
    model_type: type
    validators: tuple[ModelValidator, ...]


class ValidatorRegistry:
    """Thread-safe mapping of model type to registered validators."""

    def __init__(self):
        self._validators: dict[type, list[ModelValidator]] = {}
        self._contributions: dict[int, _Contribution] = {}
        self._providers: dict[int, ValidatorProvider] = {}
        self._lock = threading.Lock()

    def register_validators(self, validators: list[ModelValidator], model_type: type) -> None:
        """Append validators to ``model_type``, skipping instances already registered."""
        with self._lock:
            self._add(validators, model_type)

    def remove_validators(self, validators: list[ModelValidator], model_type: type) -> None:
        """Remove exactly the given validator instances from ``model_type``."""
        with self._lock:
            self._remove(validators, model_type)

    def register_all_from_provider(self, provider: ValidatorProvider) -> None:
        model_type = provider.model_type
        validators = tuple(provider.get_validators() or ())

        with self._lock:
            previous = self._contributions.pop(id(provider), None)
            if previous is not None:
                self._release(previous)
            self._add(validators, model_type)
            self._contributions[id(provider)] = _Contribution(model_type, validators)
            self._providers[id(provider)] = provider

        logger.info(f"Registered {len(validators)} validators for {model_type.__name__} "
                    f"from {type(provider).__name__}")

    def unregister_all_from_provider(self, provider: ValidatorProvider) -> None:
        with self._lock:
            self._providers.pop(id(provider), None)
            contribution = self._contributions.pop(id(provider), None)
            if contribution is None:
                return
            self._release(contribution)

        logger.info(f"Unregistered {len(contribution.validators)} validators for "
                    f"{contribution.model_type.__name__} from {type(provider).__name__}")

    def register_all_from_all_providers(self) -> None:
        """Re-register the validators of every known provider."""
        with self._lock:
            providers = list(self._providers.values())
        for provider in providers:
            self.register_all_from_provider(provider)

    @property
    def providers(self) -> list[ValidatorProvider]:
        with self._lock:
            return list(self._providers.values())

    def get_validators(self, model_type: type) -> list[ModelValidator]:
        """Snapshot of the validators registered for ``model_type``."""
        with self._lock:
            return list(self._validators.get(model_type, ()))

    @property
    def registered_map(self) -> Mapping[type, list[ModelValidator]]:
        """Read-only snapshot of every registered type and its validators."""
        with self._lock:
            return MappingProxyType({
                model_type: list(validators)
                for model_type, validators in self._validators.items()
            })

    def clear(self) -> None:
        with self._lock:
            self._validators.clear()
            self._contributions.clear()
            self._providers.clear()
        logger.info("Validator registry cleared")

    def _add(self, validators, model_type: type) -> None:
        registered = self._validators.setdefault(model_type, [])
        for validator in validators:
            if not any(validator is existing for existing in registered):
                registered.append(validator)

    def _release(self, contribution: _Contribution) -> None:
        # Instances still contributed by another provider for the type stay registered.
        shared = [
            validator
            for other in self._contributions.values()
            if other.model_type is contribution.model_type
            for validator in other.validators
        ]
        released = [
            validator for validator in contribution.validators
            if not any(validator is other for other in shared)
        ]
        self._remove(released, contribution.model_type)

    def _remove(self, validators, model_type: type) -> None:
        registered = self._validators.get(model_type)
        if registered is None:
            return
        remaining = [
            existing for existing in registered
            if not any(existing is validator for validator in validators)
        ]
        if remaining:
            self._validators[model_type] = remaining
        else:
            del self._validators[model_type]
