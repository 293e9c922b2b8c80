"""Core validation framework for modelcheck.

Defines the validator contract, AND/OR validator bundles and the in-memory
result shapes produced by the validation service.
"""

import logging
import threading
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

logger = logging.getLogger(__name__)


class Severity(str, Enum):
    """Validation message level, ordered INFO < WARNING < ERROR."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"

    @property
    def rank(self) -> int:
        return _SEVERITY_RANK[self]

    def __lt__(self, other):
        if not isinstance(other, Severity):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other):
        if not isinstance(other, Severity):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other):
        if not isinstance(other, Severity):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other):
        if not isinstance(other, Severity):
            return NotImplemented
        return self.rank >= other.rank

    @classmethod
    def highest(cls, severities: Iterable["Severity"]) -> "Severity":
        """Highest severity of ``severities``, INFO when empty."""
        return max(severities, default=cls.INFO)


_SEVERITY_RANK = {Severity.INFO: 0, Severity.WARNING: 1, Severity.ERROR: 2}


class ModelValidator(ABC):
    """Base class for model validators.

    Validators must not keep per-call state; one instance may be evaluated
    concurrently against different models.
    """

    @abstractmethod
    def evaluate(self, model: Any) -> bool:
        """Whether ``model`` passes this validator.

        Must return a definite bool. An exception raised here is treated as a
        bug in the validator and propagates to the caller.
        """
        pass

    @property
    @abstractmethod
    def message(self) -> str:
        """Short description of what the validator checks."""
        pass

    @abstractmethod
    def detailed_message(self, model: Any) -> str:
        """Explanation shown when ``model`` fails this validator."""
        pass

    @property
    @abstractmethod
    def severity(self) -> Severity:
        pass

    @property
    def identity(self) -> str:
        """Stable identifier of the validator, its defining class path by default."""
        cls = type(self)
        return f"{cls.__module__}.{cls.__qualname__}"

    @property
    def documentation_resource_type(self) -> str | None:
        return None

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.severity.value}: {self.message!r}>"


class DocumentedModelValidator(ModelValidator):
    """Validator whose message is documented by a resource of a given type."""

    @property
    @abstractmethod
    def documentation_resource_type(self) -> str:
        """Resource type of the component documenting this validator."""
        pass


class ValidatorBundle(ModelValidator):
    """Validator composed of an ordered list of child validators.

    With ``all_must_be_true`` the bundle passes only when every child passes and
    stops at the first failing child. Otherwise the bundle passes as soon as one
    child passes. Children after the deciding one are never evaluated.

    ``register_validators()`` populates the initial children. It runs once per
    bundle: at construction, or on first evaluation when ``register_on_init``
    is False.
    """

    # Result of an OR bundle with no children.
    EMPTY_ANY_RESULT = False

    register_on_init = True

    def __init__(self):
        self._validators: list[ModelValidator] = []
        self._registered = False
        self._register_lock = threading.Lock()
        if self.register_on_init:
            self.ensure_registered()

    @property
    @abstractmethod
    def all_must_be_true(self) -> bool:
        pass

    @abstractmethod
    def register_validators(self) -> None:
        """Add the bundle's initial child validators."""
        pass

    def ensure_registered(self) -> None:
        if self._registered:
            return
        with self._register_lock:
            if self._registered:
                return
            self.register_validators()
            self._registered = True
        logger.debug(f"Registered {len(self._validators)} validators for bundle {self.identity}")

    def add_validator(self, validator: ModelValidator) -> None:
        self._validators.append(validator)

    def add_all_validators(self, validators: Iterable[ModelValidator] | None) -> None:
        if validators is None:
            return
        for validator in validators:
            self.add_validator(validator)

    @property
    def validators(self) -> list[ModelValidator]:
        return list(self._validators)

    def evaluate(self, model: Any) -> bool:
        return self.evaluate_with(model, lambda validator, m: validator.evaluate(m))

    def evaluate_with(self, model: Any,
                      check: Callable[[ModelValidator, Any], bool]) -> bool:
        """Fold ``check`` over the children using this bundle's policy.

        Args:
            model: Model to validate
            check: Called as ``check(child, model)`` for each child that runs

        Returns:
            Whether the bundle passes
        """
        self.ensure_registered()
        validators = self.validators
        if not validators:
            return True if self.all_must_be_true else self.EMPTY_ANY_RESULT

        for validator in validators:
            valid = check(validator, model)
            if self.all_must_be_true and not valid:
                return False
            if not self.all_must_be_true and valid:
                return True
        return self.all_must_be_true

    def detailed_message(self, model: Any) -> str:
        if self.all_must_be_true:
            return "All of the following are true:"
        return "One of the following is true:"

    @property
    def severity(self) -> Severity:
        return Severity.highest(validator.severity for validator in self.validators)


@dataclass(frozen=True)
class ValidatorResult:
    """Outcome of running a single validator against a model."""
    valid: bool
    message: str
    detailed_message: str
    severity: Severity
    validator: str
    bundled: tuple["ValidatorResult", ...] | None = None
    documentation_resource_type: str | None = None

    @property
    def messages(self) -> dict[Severity, list[str]]:
        """Failure messages of this result keyed by severity.

        A failing result reports the messages of its failing bundled results
        or, when none failed, its own detailed message.
        """
        messages: dict[Severity, list[str]] = {severity: [] for severity in Severity}
        if self.valid:
            return messages

        failed_children = [result for result in self.bundled or () if not result.valid]
        if not failed_children:
            messages[self.severity].append(self.detailed_message)
            return messages

        for child in failed_children:
            for severity, child_messages in child.messages.items():
                messages[severity].extend(child_messages)
        return messages


@dataclass(frozen=True)
class ModelValidationResult:
    """Results of all validators registered for a model's type."""
    model: Any
    results: tuple[ValidatorResult, ...] = ()
    validators: tuple[ModelValidator, ...] = field(default=(), repr=False)

    @property
    def valid(self) -> bool:
        return all(result.valid for result in self.results)

    @property
    def messages(self) -> dict[Severity, list[str]]:
        messages: dict[Severity, list[str]] = {severity: [] for severity in Severity}
        for result in self.results:
            for severity, result_messages in result.messages.items():
                messages[severity].extend(result_messages)
        return messages

    @property
    def error_messages(self) -> list[str]:
        return self.messages[Severity.ERROR]

    @property
    def warning_messages(self) -> list[str]:
        return self.messages[Severity.WARNING]
