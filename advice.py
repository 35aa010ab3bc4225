import logging
from dataclasses import dataclass
from typing import Optional

from config import HORIZON_AGE, SEVERITY_THRESHOLDS
from messages import (AHEAD, BUILDERS, MINOR, MODERATE, ON_TRACK, SEVERE,
                      AdviceData, AdviceMessage)
from projection import ProjectionResult, UserProfile
from rates import DEFAULT_RATES, RateModel
from solvers import (additional_savings_needed, delay_years_needed, early_retirement_years,
                     expense_reduction, round_half_up, run_out_age)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Outcome:
    shortfall: float        # target - projected; negative means surplus
    percent_short: float
    percent_surplus: float
    severity: str

    @property
    def surplus(self) -> float:
        return -self.shortfall


def assess(projected_at_retire: float, target: float) -> Outcome:
    """
    Bucket the projection against the target into exactly one tier:
    severe (>50% short), moderate (>20% short), minor (any shortfall),
    ahead (>15% surplus), onTrack (otherwise). A non-positive target gives
    0% either way.
    """
    shortfall = target - projected_at_retire
    percent_short = shortfall / target * 100 if target > 0 else 0.0
    percent_surplus = -shortfall / target * 100 if target > 0 else 0.0

    if shortfall > 0:
        if percent_short > SEVERITY_THRESHOLDS["severe"]:
            severity = SEVERE
        elif percent_short > SEVERITY_THRESHOLDS["moderate"]:
            severity = MODERATE
        else:
            severity = MINOR
    else:
        severity = AHEAD if percent_surplus > SEVERITY_THRESHOLDS["ahead"] else ON_TRACK
    return Outcome(shortfall, percent_short, percent_surplus, severity)


def classify(projected_at_retire: float, target: float) -> str:
    return assess(projected_at_retire, target).severity


def gather(profile: UserProfile, projected_at_retire: float, target: float,
           rates: RateModel = DEFAULT_RATES, outcome: Optional[Outcome] = None) -> AdviceData:
    """Run every lever once and flatten the numbers the templates quote."""
    if outcome is None:
        outcome = assess(projected_at_retire, target)
    shortfall = outcome.shortfall
    surplus = outcome.surplus

    retire_age = int(profile.retire_age)
    years_to_retirement = retire_age - int(profile.current_age)
    retirement_years = HORIZON_AGE - min(retire_age, HORIZON_AGE - 1)
    monthly_expenses = profile.retirement_expenses / 12.0

    additional = additional_savings_needed(shortfall, years_to_retirement, rates.growth)
    delay = delay_years_needed(shortfall, profile.monthly_savings, rates.growth)
    cut = expense_reduction(shortfall, retirement_years, rates.retired_growth, rates.inflation)
    runs_out = run_out_age(projected_at_retire, retire_age, monthly_expenses,
                           rates.retired_growth, rates.inflation)
    years_early = early_retirement_years(surplus, monthly_expenses,
                                         rates.retired_growth, rates.inflation)

    if profile.monthly_savings > 0:
        percent_increase = round_half_up(additional / profile.monthly_savings * 100)
    else:
        percent_increase = 0
    if retirement_years > 0:
        extra_monthly = round_half_up(profile.retirement_expenses * years_early / retirement_years / 12)
    else:
        extra_monthly = 0

    return AdviceData(
        shortfall=abs(shortfall),
        surplus=abs(surplus),
        projected_savings=projected_at_retire,
        target_savings=target,
        percent_short=round_half_up(outcome.percent_short),
        percent_to_target=round_half_up(100 - outcome.percent_short),
        retire_age=retire_age,
        needed_monthly_savings=profile.monthly_savings + additional,
        additional_needed=additional,
        delay_years=delay,
        delay_to_age=retire_age + delay,
        expense_reduction=cut,
        run_out_age=runs_out,
        years_short=max(0, runs_out - retire_age),
        percent_increase=percent_increase,
        years_early=years_early,
        early_age=retire_age - years_early,
        extra_monthly=extra_monthly,
        cushion=surplus,
    )


def compose(profile: UserProfile, projected_at_retire: float, target: float,
            rates: RateModel = DEFAULT_RATES) -> AdviceMessage:
    outcome = assess(projected_at_retire, target)
    data = gather(profile, projected_at_retire, target, rates, outcome)
    logger.debug("advice tier %s (shortfall %.0f)", outcome.severity, outcome.shortfall)
    return BUILDERS[outcome.severity](data)


def advise(profile: UserProfile, result: ProjectionResult,
           rates: RateModel = DEFAULT_RATES) -> AdviceMessage:
    return compose(profile, result.projected_at_retire, result.target_nest_egg, rates)
