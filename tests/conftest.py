"""Shared test fixtures for Chronos core tests."""

from datetime import UTC, datetime, timedelta

import pytest

from chronos.shared.models import Campaign, CustomerJourney, Touchpoint

T0 = datetime(2026, 3, 2, 9, 0, 0, tzinfo=UTC)


@pytest.fixture
def sample_campaigns() -> list[Campaign]:
    return [
        Campaign(
            id="cmp_fb_001",
            name="Top of Funnel - Cold Traffic - US",
            platform="Facebook",
            status="Active",
            spend=12500,
            platform_reported_sales=8000,
            chronos_tracked_sales=28500,
            clicks=5200,
            leads=850,
        ),
        Campaign(
            id="cmp_ggl_002",
            name="Google Search - Brand",
            platform="Google",
            status="Active",
            spend=4200,
            platform_reported_sales=6100,
            chronos_tracked_sales=5500,
            clicks=1900,
            leads=210,
        ),
        Campaign(
            id="cmp_tt_003",
            name="TikTok - UGC Retargeting",
            platform="TikTok",
            status="Paused",
            spend=3000,
            platform_reported_sales=1200,
            chronos_tracked_sales=8400,
            clicks=2400,
            leads=95,
        ),
    ]


@pytest.fixture
def sample_journey() -> CustomerJourney:
    """Organic visit, three ad clicks (FB, Google, TikTok), then checkout."""
    names = [
        ("Organic Search", "google.com"),
        ("Ad Click", "Top of Funnel - Cold Traffic - US"),
        ("Email Open", "Welcome Flow"),
        ("Ad Click", "Google Search - Brand"),
        ("Ad Click", "TikTok - UGC Retargeting"),
        ("Checkout", "Direct"),
    ]
    return CustomerJourney(
        id="journey-1",
        customer_name="Sarah Connor",
        email="sarah@example.com",
        total_ltv=1000.0,
        touchpoints=[
            Touchpoint(
                id=f"tp-{i}",
                type=tp_type,
                source=source,
                device="Mobile",
                timestamp=T0 + timedelta(hours=i),
            )
            for i, (tp_type, source) in enumerate(names)
        ],
    )
