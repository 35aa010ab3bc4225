"""
Advice message variants and the templates that fill them.

One frozen dataclass per severity; each carries only the fields it uses.
Warnings have `actions`, on-track has a `bonus`, ahead has `options`.
Builders are pure functions from an AdviceData bag to a message.
"""
import math
from dataclasses import asdict, dataclass, field
from typing import Tuple, Union

SEVERE = "severe"
MODERATE = "moderate"
MINOR = "minor"
ON_TRACK = "onTrack"
AHEAD = "ahead"

WARNING_TIERS = (SEVERE, MODERATE, MINOR)
SUCCESS_TIERS = (ON_TRACK, AHEAD)
SEVERITIES = WARNING_TIERS + SUCCESS_TIERS


def short_money(num: float) -> str:
    """Compact dollar token for message text: $1.5M, $650K, $420."""
    if num >= 1_000_000:
        return f"${num / 1_000_000:.1f}M"
    if num >= 1_000:
        return f"${math.floor(num / 1_000 + 0.5)}K"
    return f"${math.floor(num + 0.5)}"


@dataclass(frozen=True)
class AdviceData:
    # situation
    shortfall: float
    surplus: float
    projected_savings: float
    target_savings: float
    percent_short: int
    percent_to_target: int
    retire_age: int
    # levers
    needed_monthly_savings: float
    additional_needed: int
    delay_years: int
    delay_to_age: int
    expense_reduction: int
    run_out_age: int
    years_short: int
    percent_increase: int
    # surplus
    years_early: int
    early_age: int
    extra_monthly: int
    cushion: float


@dataclass(frozen=True)
class Action:
    kind: str
    text: str
    impact: str


@dataclass(frozen=True)
class SevereMessage:
    title: str
    body: str
    actions: Tuple[Action, ...]
    severity: str = field(default=SEVERE, init=False)

    def to_dict(self) -> dict:
        return _flat(self)


@dataclass(frozen=True)
class ModerateMessage:
    title: str
    body: str
    actions: Tuple[Action, ...]
    severity: str = field(default=MODERATE, init=False)

    def to_dict(self) -> dict:
        return _flat(self)


@dataclass(frozen=True)
class MinorMessage:
    title: str
    body: str
    actions: Tuple[Action, ...]
    severity: str = field(default=MINOR, init=False)

    def to_dict(self) -> dict:
        return _flat(self)


@dataclass(frozen=True)
class OnTrackMessage:
    title: str
    body: str
    bonus: str
    severity: str = field(default=ON_TRACK, init=False)

    def to_dict(self) -> dict:
        return _flat(self)


@dataclass(frozen=True)
class AheadMessage:
    title: str
    body: str
    options: Tuple[str, ...]
    severity: str = field(default=AHEAD, init=False)

    def to_dict(self) -> dict:
        return _flat(self)


AdviceMessage = Union[SevereMessage, ModerateMessage, MinorMessage, OnTrackMessage, AheadMessage]


def _flat(message) -> dict:
    # Uniform {severity, title, body, actions, bonus, options} shape for export
    raw = asdict(message)
    return {
        "severity": raw["severity"],
        "title": raw["title"],
        "body": raw["body"],
        "actions": [{"text": a["text"], "impact": a["impact"]} for a in raw.get("actions", ())],
        "bonus": raw.get("bonus"),
        "options": list(raw["options"]) if "options" in raw else None,
    }


# ---------- Warning templates ----------
def severe(d: AdviceData) -> SevereMessage:
    # more than 50% below target
    return SevereMessage(
        title=f"Critical: You may run out of money at age {d.run_out_age}",
        body=(f"Your current plan leaves you {short_money(d.shortfall)} short over your retirement. "
              f"You'll deplete savings {d.years_short} years into retirement."),
        actions=(
            Action("increase_savings",
                   f"Increase savings to {short_money(d.needed_monthly_savings)}/month",
                   f"Fixes the {short_money(d.shortfall)} shortfall"),
            Action("delay_retirement",
                   f"Retire at {d.delay_to_age} instead of {d.retire_age}",
                   f"Gives {d.delay_years} more years to save"),
            Action("reduce_expenses",
                   f"Reduce retirement budget by {short_money(d.expense_reduction)}/month",
                   "Makes current savings sufficient"),
        ),
    )


def moderate(d: AdviceData) -> ModerateMessage:
    # 20-50% below target
    return ModerateMessage(
        title=f"You're {d.percent_short}% below your retirement target",
        body=(f"You need {short_money(d.target_savings)} at retirement, "
              f"but you're projected to have only {short_money(d.projected_savings)}."),
        actions=(
            Action("increase_savings",
                   f"Save an extra {short_money(d.additional_needed)}/month",
                   f"Gets you to target by age {d.retire_age}"),
            Action("delay_retirement",
                   f"Or retire {d.delay_years} years later at age {d.delay_to_age}",
                   "More time for compound growth"),
        ),
    )


def minor(d: AdviceData) -> MinorMessage:
    return MinorMessage(
        title=f"Almost there! Just {short_money(d.shortfall)} short",
        body=f"You're {d.percent_to_target}% of the way to your retirement goal.",
        actions=(
            Action("small_adjustment",
                   f"A small {d.percent_increase}% increase in savings gets you there",
                   f"Only {short_money(d.additional_needed)}/month more"),
        ),
    )


# ---------- Success templates ----------
def on_track(d: AdviceData) -> OnTrackMessage:
    return OnTrackMessage(
        title=f"You're on track to retire at {d.retire_age}!",
        body=(f"Your projected savings of {short_money(d.projected_savings)} "
              f"meets your target of {short_money(d.target_savings)}."),
        bonus=f"You have a {short_money(d.cushion)} cushion for unexpected expenses.",
    )


def ahead(d: AdviceData) -> AheadMessage:
    # more than 15% above target
    return AheadMessage(
        title=f"Great news! You could retire {d.years_early} years early",
        body=f"You're projected to have {short_money(d.surplus)} more than needed.",
        options=(
            f"Retire at {d.early_age} instead of {d.retire_age}",
            f"Keep retiring at {d.retire_age} but increase spending by {short_money(d.extra_monthly)}/month",
            "Build a larger safety cushion for healthcare or family support",
        ),
    )


BUILDERS = {
    SEVERE: severe,
    MODERATE: moderate,
    MINOR: minor,
    ON_TRACK: on_track,
    AHEAD: ahead,
}
