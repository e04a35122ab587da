"""Built-in campaign automation rules."""

from .conditions import all_of, where
from .models import CampaignRule, RuleAction


def default_rules() -> list[CampaignRule]:
    """Return a fresh copy of the built-in rules, highest priority first.

    A new list of new rule objects is built on every call so that toggling a
    rule on one engine never leaks into another.
    """
    return [
        CampaignRule(
            id="kill-low-roas",
            name="Kill Low ROAS Campaigns",
            description="Pause campaigns with ROAS below 0.8x after significant spend",
            enabled=True,
            condition=all_of(where("roas", "lt", 0.8), where("spend", "gt", 1000)),
            action=RuleAction.PAUSE,
            reason="ROAS below 0.8x with spend over $1,000",
            priority=100,
        ),
        CampaignRule(
            id="zero-conversions-alert",
            name="Zero Conversions Alert",
            description="Alert when active campaign has no conversions",
            enabled=True,
            condition=all_of(
                where("status", "eq", "Active"),
                where("chronos_tracked_sales", "eq", 0),
                where("spend", "gt", 100),
            ),
            action=RuleAction.ALERT,
            reason="No tracked conversions despite active spend",
            priority=95,
        ),
        CampaignRule(
            id="scale-high-performers",
            name="Scale High Performers",
            description="Increase budget for campaigns with exceptional ROAS",
            enabled=True,
            condition=all_of(
                where("roas", "gt", 3.0),
                where("spend", "lt", 5000),
                where("status", "eq", "Active"),
            ),
            action=RuleAction.INCREASE_BUDGET,
            reason="Exceptional ROAS (>3.0x) with room to scale",
            priority=90,
        ),
        CampaignRule(
            id="high-spend-low-leads",
            name="High Spend Low Leads",
            description="Pause campaigns with high spend but very few leads",
            enabled=True,
            condition=all_of(
                where("spend", "gt", 500),
                where("leads", "lt", 5),
                where("status", "eq", "Active"),
            ),
            action=RuleAction.PAUSE,
            reason="High spend ($500+) with less than 5 leads",
            priority=85,
        ),
        CampaignRule(
            id="alert-declining-performance",
            name="Alert on Declining Performance",
            description="Alert when ROAS drops significantly",
            enabled=True,
            condition=all_of(
                where("roas", "lt", 1.5),
                where("roas", "gt", 0.8),
                where("spend", "gt", 500),
            ),
            action=RuleAction.ALERT,
            reason="ROAS declining but still profitable - monitor closely",
            priority=80,
        ),
        CampaignRule(
            id="reduce-budget-mediocre",
            name="Reduce Budget on Mediocre Campaigns",
            description="Decrease budget for campaigns with average performance",
            enabled=True,
            condition=all_of(
                where("roas", "ge", 1.0),
                where("roas", "lt", 1.5),
                where("spend", "gt", 2000),
            ),
            action=RuleAction.DECREASE_BUDGET,
            reason="Mediocre ROAS - reallocate budget to better performers",
            priority=70,
        ),
        CampaignRule(
            id="revive-paused-potential",
            name="Revive Paused High-Potential",
            description="Re-enable paused campaigns with historical good ROAS",
            enabled=False,
            condition=all_of(where("status", "eq", "Paused"), where("roas", "gt", 2.0)),
            action=RuleAction.ENABLE,
            reason="Historical ROAS suggests potential - consider re-enabling",
            priority=60,
        ),
    ]
