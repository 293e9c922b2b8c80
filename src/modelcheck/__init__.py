"""modelcheck - Pluggable validation engine for typed resource models.

modelcheck evaluates independently registered validators against a model,
composes them into AND/OR bundles and caches the resulting messages per model.
"""

__version__ = "0.1.0"
__author__ = "modelcheck maintainers"
__description__ = "Pluggable validation engine for typed resource models"

from modelcheck.config import ModelcheckConfig
from modelcheck.engine import ValidationEngine

__all__ = [
    "__version__",
    "__author__",
    "__description__",
    "ModelcheckConfig",
    "ValidationEngine",
]
