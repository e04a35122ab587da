"""Multi-touch attribution domain."""

from .modeler import (
    AttributionModeler,
    attribute,
    compare_models,
    describe_model,
    distribute_credit,
)
from .models import (
    AttributionComparison,
    AttributionModel,
    AttributionRequest,
    ComparisonRequest,
)

__all__ = [
    "AttributionComparison",
    "AttributionModel",
    "AttributionModeler",
    "AttributionRequest",
    "ComparisonRequest",
    "attribute",
    "compare_models",
    "describe_model",
    "distribute_credit",
]
