"""Multi-touch attribution of journey revenue to ad campaigns.

Each journey's lifetime value is split across its ``Ad Click`` touchpoints
according to the selected model, then summed per campaign:

1. Keep only ad touchpoints, in chronological (insertion) order
2. Split ``total_ltv`` across them with the model's weights
3. Resolve each touchpoint's ``source`` to a campaign by exact name
4. Round the per-campaign totals half-up to whole currency units

Unmatched sources and journeys without ad touchpoints contribute nothing.
"""

from collections.abc import Iterable, Sequence
from decimal import ROUND_HALF_UP, Decimal

import structlog

from chronos.shared.models import Campaign, CustomerJourney, Touchpoint, TouchpointType

from .models import AttributionComparison, AttributionModel

logger = structlog.get_logger()

U_SHAPED_ENDPOINT_SHARE = 0.4
U_SHAPED_INTERIOR_SHARE = 0.2

MODEL_DESCRIPTIONS: dict[AttributionModel, str] = {
    AttributionModel.LAST_CLICK: (
        "100% credit to the final touchpoint. Favors bottom-of-funnel campaigns."
    ),
    AttributionModel.FIRST_CLICK: (
        "100% credit to the first touchpoint. Highlights top-of-funnel discovery."
    ),
    AttributionModel.LINEAR: "Distributes credit equally among all touchpoints.",
    AttributionModel.TIME_DECAY: (
        "Gives more credit to touchpoints closer to conversion. Values recency."
    ),
    AttributionModel.U_SHAPED: (
        "Gives 40% to first, 40% to last, and 20% to middle touchpoints."
    ),
}


def describe_model(model: AttributionModel | str) -> str:
    return MODEL_DESCRIPTIONS[AttributionModel(model)]


def round_half_up(value: float) -> int:
    # Decimal on the shortest repr, so 0.49999999999999994 stays below the midpoint
    return int(Decimal(str(value)).quantize(Decimal(1), rounding=ROUND_HALF_UP))


def ad_touchpoints(journey: CustomerJourney) -> list[Touchpoint]:
    """Return the journey's ad clicks in the order they were recorded."""
    return [tp for tp in journey.touchpoints if tp.type == TouchpointType.AD_CLICK]


def distribute_credit(
    touchpoints: Sequence[Touchpoint],
    total: float,
    model: AttributionModel | str,
) -> list[float]:
    """Split ``total`` across ``touchpoints`` and return one credit per touchpoint.

    The U-Shaped model with exactly two touchpoints has no interior to receive
    the middle 20%, so the credits sum to 80% of ``total``.
    """
    model = AttributionModel(model)
    n = len(touchpoints)
    if n == 0:
        return []

    credits = [0.0] * n

    if model == AttributionModel.FIRST_CLICK:
        credits[0] = total
    elif model == AttributionModel.LAST_CLICK:
        credits[-1] = total
    elif model == AttributionModel.LINEAR:
        credits = [total / n] * n
    elif model == AttributionModel.TIME_DECAY:
        # 2**i scaled so the last weight is 1; same ratios, no overflow on long journeys
        weights = [2.0 ** (i - n + 1) for i in range(n)]
        weight_sum = sum(weights)
        credits = [total * w / weight_sum for w in weights]
    elif model == AttributionModel.U_SHAPED:
        if n == 1:
            credits[0] = total
        else:
            credits[0] = total * U_SHAPED_ENDPOINT_SHARE
            credits[-1] = total * U_SHAPED_ENDPOINT_SHARE
            interior = n - 2
            if interior > 0:
                share = total * U_SHAPED_INTERIOR_SHARE / interior
                for i in range(1, n - 1):
                    credits[i] = share

    return credits


def attribute(
    campaigns: Iterable[Campaign],
    journeys: Iterable[CustomerJourney],
    model: AttributionModel | str,
) -> list[Campaign]:
    """Recompute ``chronos_tracked_sales`` for every campaign under ``model``.

    Returns copies; the input campaigns are left untouched. A campaign that no
    journey credits ends with ``chronos_tracked_sales == 0``.
    """
    model = AttributionModel(model)
    campaigns = list(campaigns)

    revenue: dict[str, float] = {c.id: 0.0 for c in campaigns}
    by_name: dict[str, Campaign] = {}
    for campaign in campaigns:
        by_name.setdefault(campaign.name, campaign)

    journey_count = 0
    skipped = 0
    unmatched = 0

    for journey in journeys:
        journey_count += 1
        touchpoints = ad_touchpoints(journey)
        if not touchpoints:
            skipped += 1
            continue

        credits = distribute_credit(touchpoints, journey.total_ltv, model)
        for touchpoint, credit in zip(touchpoints, credits, strict=True):
            campaign = by_name.get(touchpoint.source)
            if campaign is None:
                unmatched += 1
                continue
            revenue[campaign.id] += credit

    attributed = [
        c.model_copy(
            deep=True,
            update={"chronos_tracked_sales": round_half_up(revenue.get(c.id, 0.0))},
        )
        for c in campaigns
    ]

    logger.info(
        "attribution_computed",
        model=model.value,
        campaign_count=len(campaigns),
        journey_count=journey_count,
        journeys_without_ads=skipped,
        unmatched_touchpoints=unmatched,
    )

    return attributed


def compare_models(
    campaigns: Iterable[Campaign],
    journeys: Iterable[CustomerJourney],
    model: AttributionModel | str,
    baseline: AttributionModel | str = AttributionModel.LAST_CLICK,
) -> list[AttributionComparison]:
    """Attribute under ``model`` and ``baseline`` and report the percent change.

    The change is 0 when the baseline credited the campaign nothing.
    """
    model = AttributionModel(model)
    baseline = AttributionModel(baseline)
    campaigns = list(campaigns)
    journeys = list(journeys)

    attributed = attribute(campaigns, journeys, model)
    baseline_revenue = {
        c.id: c.chronos_tracked_sales for c in attribute(campaigns, journeys, baseline)
    }

    comparisons = []
    for campaign in attributed:
        base = baseline_revenue.get(campaign.id, 0)
        change = (campaign.chronos_tracked_sales - base) / base * 100 if base > 0 else 0.0
        comparisons.append(
            AttributionComparison(
                campaign_id=campaign.id,
                campaign_name=campaign.name,
                model=model,
                baseline=baseline,
                revenue=campaign.chronos_tracked_sales,
                baseline_revenue=base,
                change_pct=round(change, 1),
            )
        )
    return comparisons


class AttributionModeler:
    """Caller-owned attribution entry point with a default model."""

    def __init__(self, default_model: AttributionModel | str = AttributionModel.LAST_CLICK) -> None:
        self._default_model = AttributionModel(default_model)

    @property
    def default_model(self) -> AttributionModel:
        return self._default_model

    def attribute(
        self,
        campaigns: Iterable[Campaign],
        journeys: Iterable[CustomerJourney],
        model: AttributionModel | str | None = None,
    ) -> list[Campaign]:
        return attribute(campaigns, journeys, model or self._default_model)

    def compare(
        self,
        campaigns: Iterable[Campaign],
        journeys: Iterable[CustomerJourney],
        model: AttributionModel | str,
        baseline: AttributionModel | str | None = None,
    ) -> list[AttributionComparison]:
        return compare_models(campaigns, journeys, model, baseline or self._default_model)
