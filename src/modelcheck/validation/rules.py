"""Commonly used validators for resource models.

Each validator checks one aspect of a resource. Validators taking a severity
report their failures at that level.
"""

import logging
from typing import TYPE_CHECKING, Any

from ..exceptions import ChildResourceNotFoundError, InvalidResourceTypeError
from .framework import ModelValidationResult, ModelValidator, Severity, ValidatorBundle

if TYPE_CHECKING:
    from .service import ModelValidationService

logger = logging.getLogger(__name__)


class HasTitle(ModelValidator):
    """Resource has a title that differs from its name."""

    def evaluate(self, model: Any) -> bool:
        return bool(model.title) and model.title != model.name

    @property
    def message(self) -> str:
        return "Title is configured."

    def detailed_message(self, model: Any) -> str:
        return "The jcr:title property must be configured."

    @property
    def severity(self) -> Severity:
        return Severity.ERROR


class HasDescription(ModelValidator):
    """Resource has a non-empty description."""

    def __init__(self, severity: Severity):
        self._severity = severity

    def evaluate(self, model: Any) -> bool:
        return bool(model.description)

    @property
    def message(self) -> str:
        return "Description is configured."

    def detailed_message(self, model: Any) -> str:
        return "The jcr:description property must be configured."

    @property
    def severity(self) -> Severity:
        return self._severity


class HasFileExtension(ModelValidator):
    """Resource name ends with a file extension."""

    def __init__(self, extension: str, severity: Severity):
        self.extension = extension
        self._severity = severity

    def evaluate(self, model: Any) -> bool:
        return model.name.endswith(self.extension)

    @property
    def message(self) -> str:
        return f"Resource name ends with {self.extension} extension."

    def detailed_message(self, model: Any) -> str:
        if model is not None:
            return f"Filename {model.name} is expected to end with .{self.extension}."
        return f"Filename is expected to end with .{self.extension}."

    @property
    def severity(self) -> Severity:
        return self._severity


class HasChildResource(ModelValidator):
    """Resource has a child with a given name."""

    def __init__(self, child_name: str, severity: Severity):
        self.child_name = child_name
        self._severity = severity

    def evaluate(self, model: Any) -> bool:
        try:
            model.get_child(self.child_name)
        except ChildResourceNotFoundError:
            return False
        return True

    @property
    def message(self) -> str:
        return f"Has child resource '{self.child_name}'."

    def detailed_message(self, model: Any) -> str:
        return f"Expected child resource '{self.child_name}' was not found."

    @property
    def severity(self) -> Severity:
        return self._severity


class IsChildResourceValidResourceType(ModelValidator):
    """Named child, when present, adapts to a given model type.

    A missing child passes; use HasChildResource to require it.
    """

    def __init__(self, child_name: str, child_type: type, severity: Severity):
        self.child_name = child_name
        self.child_type = child_type
        self._severity = severity

    def evaluate(self, model: Any) -> bool:
        try:
            model.get_child_as(self.child_name, self.child_type)
        except InvalidResourceTypeError:
            return False
        except ChildResourceNotFoundError:
            return True
        return True

    @property
    def message(self) -> str:
        return f"Has valid child resource '{self.child_name}'."

    def detailed_message(self, model: Any) -> str:
        return (f"Child resource '{self.child_name}' could not be adapted to "
                f"{self.child_type.__name__}. Likely the wrong resourceType.")

    @property
    def severity(self) -> Severity:
        return self._severity


class HasValidChild(ValidatorBundle):
    """Named child exists and adapts to a given model type."""

    def __init__(self, child_name: str, child_type: type, severity: Severity):
        self.child_name = child_name
        self.child_type = child_type
        self._severity = severity
        super().__init__()

    @property
    def all_must_be_true(self) -> bool:
        return True

    def register_validators(self) -> None:
        self.add_validator(HasChildResource(self.child_name, self._severity))
        self.add_validator(
            IsChildResourceValidResourceType(self.child_name, self.child_type, self._severity)
        )

    @property
    def message(self) -> str:
        return f"Has valid child {self.child_type.__name__} '{self.child_name}'"


class ListContainsNoNulls(ModelValidator):
    """A list captured at construction holds no None entries."""

    def __init__(self, items: list, message: str, severity: Severity):
        self.items = items
        self._message = message
        self._severity = severity

    def evaluate(self, model: Any) -> bool:
        return all(item is not None for item in self.items)

    @property
    def message(self) -> str:
        return self._message

    def detailed_message(self, model: Any) -> str:
        return self._message

    @property
    def severity(self) -> Severity:
        return self._severity


class ModelListHasNoFailedValidators(ModelValidator):
    """No model of a list fails any validator of the given severity.

    Members are validated in order through the validation service; the first
    member reporting messages at ``severity`` fails the check.
    """

    def __init__(self, models: list, message: str, detailed_message: str,
                 severity: Severity, validation_service: "ModelValidationService"):
        self.models = models
        self._message = message
        self._detailed_message = detailed_message
        self._severity = severity
        self.validation_service = validation_service

    def evaluate(self, model: Any) -> bool:
        for member in self.models:
            result = self.validation_service.validate(member)
            if result.messages.get(self._severity):
                logger.debug(f"{getattr(member, 'path', member)} has "
                             f"{self._severity.value} messages")
                return False
        return True

    @property
    def message(self) -> str:
        return self._message

    def detailed_message(self, model: Any) -> str:
        return self._detailed_message

    @property
    def severity(self) -> Severity:
        return self._severity


class ModelListHasNoErrors(ModelListHasNoFailedValidators):
    """No model of a list has ERROR messages. Warnings are not considered."""

    def __init__(self, models: list, message: str, detailed_message: str,
                 validation_service: "ModelValidationService"):
        super().__init__(models, message, detailed_message, Severity.ERROR, validation_service)


class ModelListHasNoWarnings(ModelListHasNoFailedValidators):
    """No model of a list has WARNING messages."""

    def __init__(self, models: list, message: str, detailed_message: str,
                 validation_service: "ModelValidationService"):
        super().__init__(models, message, detailed_message, Severity.WARNING, validation_service)


class FailedValidator(ModelValidator):
    """Always-failing validator that replays a message from another validation."""

    def __init__(self, message: str, severity: Severity):
        self._message = message
        self._severity = severity

    def evaluate(self, model: Any) -> bool:
        return False

    @property
    def message(self) -> str:
        return self._message

    def detailed_message(self, model: Any) -> str:
        return ""

    @property
    def severity(self) -> Severity:
        return self._severity


def failed_error_validators(model: Any, result: ModelValidationResult) -> list[ModelValidator]:
    """One failing ERROR validator per error message of ``result``."""
    return [
        FailedValidator(f"Error validator failed for {model.path}: {message}", Severity.ERROR)
        for message in result.messages.get(Severity.ERROR, [])
    ]


def failed_warning_validators(model: Any, result: ModelValidationResult) -> list[ModelValidator]:
    """One failing WARNING validator per warning message of ``result``."""
    return [
        FailedValidator(f"Warning validator failed for {model.path}: {message}", Severity.WARNING)
        for message in result.messages.get(Severity.WARNING, [])
    ]
