"""Shared fixtures for modelcheck tests."""

import pytest

from modelcheck.models import BaseResource
from modelcheck.validation import (
    ModelValidator,
    Severity,
    ValidationCache,
    ValidatorRegistry,
)


class StubValidator(ModelValidator):
    """Validator returning a fixed outcome and counting its evaluations."""

    def __init__(self, result: bool = True, severity: Severity = Severity.ERROR,
                 message: str = "stub", detail: str | None = None):
        self.result = result
        self._severity = severity
        self._message = message
        self._detail = detail if detail is not None else f"{message} failed"
        self.calls = 0

    def evaluate(self, model):
        self.calls += 1
        return self.result

    @property
    def message(self):
        return self._message

    def detailed_message(self, model):
        return self._detail

    @property
    def severity(self):
        return self._severity


@pytest.fixture
def stub_validator():
    """Factory for call-counting stub validators."""
    return StubValidator


@pytest.fixture
def registry():
    return ValidatorRegistry()


@pytest.fixture
def cache():
    return ValidationCache()


@pytest.fixture
def resource():
    """Resource with a title, description and one child."""
    return BaseResource(
        name="page",
        path="/content/page",
        title="Home",
        description="Landing page",
        children=[
            BaseResource(name="thumbnail", path="/content/page/thumbnail", resource_type="image"),
        ],
    )
