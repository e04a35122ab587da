"""Declarative rule conditions.

A condition is a tree of ``Comparison`` leaves joined by ``AllOf`` / ``AnyOf``.
Every node is a pydantic model (so rules round-trip through JSON) and is
callable on a ``Campaign``, so it can be used anywhere a plain predicate is
expected.
"""

import operator
from enum import StrEnum
from typing import Annotated, Literal

from pydantic import BaseModel, Field

from chronos.shared.models import Campaign


class Operator(StrEnum):
    LT = "lt"
    LE = "le"
    GT = "gt"
    GE = "ge"
    EQ = "eq"
    NE = "ne"


_OPERATORS = {
    Operator.LT: operator.lt,
    Operator.LE: operator.le,
    Operator.GT: operator.gt,
    Operator.GE: operator.ge,
    Operator.EQ: operator.eq,
    Operator.NE: operator.ne,
}

CampaignMetric = Literal[
    "roas",
    "spend",
    "leads",
    "clicks",
    "chronos_tracked_sales",
    "platform_reported_sales",
    "status",
    "platform",
]


class Comparison(BaseModel):
    kind: Literal["comparison"] = "comparison"
    metric: CampaignMetric
    op: Operator
    value: float | str

    def __call__(self, campaign: Campaign) -> bool:
        return _OPERATORS[self.op](getattr(campaign, self.metric), self.value)


class AllOf(BaseModel):
    kind: Literal["all_of"] = "all_of"
    conditions: list["Condition"]

    def __call__(self, campaign: Campaign) -> bool:
        return all(condition(campaign) for condition in self.conditions)


class AnyOf(BaseModel):
    kind: Literal["any_of"] = "any_of"
    conditions: list["Condition"]

    def __call__(self, campaign: Campaign) -> bool:
        return any(condition(campaign) for condition in self.conditions)


Condition = Annotated[Comparison | AllOf | AnyOf, Field(discriminator="kind")]

AllOf.model_rebuild()
AnyOf.model_rebuild()


def where(metric: CampaignMetric, op: Operator | str, value: float | str) -> Comparison:
    return Comparison(metric=metric, op=Operator(op), value=value)


def all_of(*conditions: Comparison | AllOf | AnyOf) -> AllOf:
    return AllOf(conditions=list(conditions))


def any_of(*conditions: Comparison | AllOf | AnyOf) -> AnyOf:
    return AnyOf(conditions=list(conditions))
