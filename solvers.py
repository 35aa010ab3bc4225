"""
Closed-form and iterative levers for closing a retirement gap.

Every function is pure and returns 0 (or the stated boundary value) for
non-positive or degenerate inputs instead of raising. Rates are annual;
monthly rates are annual / 12. Every loop is capped.
"""
import logging
import math

from config import MAX_AGE, MAX_SOLVER_MONTHS

logger = logging.getLogger(__name__)


def round_half_up(x: float) -> int:
    # half-up rounding to a whole currency unit
    return int(math.floor(x + 0.5))


# ---------- Annuity primitives ----------
def real_rate(return_rate: float, inflation: float) -> float:
    return (1 + return_rate) / (1 + inflation) - 1


def fv_annuity_factor(monthly_rate: float, months: int) -> float:
    """Future value of 1/month for `months` months: ((1+r)^n - 1) / r."""
    if months <= 0:
        return 0.0
    if monthly_rate == 0:
        return float(months)
    return ((1 + monthly_rate) ** months - 1) / monthly_rate


def pv_annuity_factor(monthly_rate: float, months: int) -> float:
    """Present value of 1/month for `months` months: (1 - (1+r)^-n) / r."""
    if months <= 0:
        return 0.0
    if monthly_rate == 0:
        return float(months)
    return (1 - (1 + monthly_rate) ** (-months)) / monthly_rate


def present_value(payment: float, monthly_rate: float, months: int) -> float:
    return payment * pv_annuity_factor(monthly_rate, months)


# ---------- Shortfall levers ----------
def additional_savings_needed(shortfall: float, years_to_retirement: float, rate: float = 0.06) -> int:
    """Extra monthly saving whose future value at retirement equals the shortfall."""
    if shortfall <= 0 or years_to_retirement <= 0:
        return 0
    months = int(round(years_to_retirement * 12))
    factor = fv_annuity_factor(rate / 12.0, months)
    if factor == 0:
        return round_half_up(shortfall / months) if months > 0 else 0
    return round_half_up(shortfall / factor)


def delay_years_needed(shortfall: float, monthly_savings: float, rate: float = 0.06) -> int:
    """Whole years of extra saving (at the current rate) to accumulate the shortfall."""
    if shortfall <= 0 or monthly_savings <= 0:
        return 0
    monthly_rate = rate / 12.0
    accumulated = 0.0
    months = 0
    while accumulated < shortfall and months < MAX_SOLVER_MONTHS:
        accumulated = accumulated * (1 + monthly_rate) + monthly_savings
        months += 1
    return math.ceil(months / 12)


def expense_reduction(shortfall: float, retirement_years: float,
                      return_rate: float = 0.04, inflation: float = 0.03) -> int:
    """Monthly spending cut whose present value over retirement equals the shortfall."""
    if shortfall <= 0 or retirement_years <= 0:
        return 0
    months = int(round(retirement_years * 12))
    factor = pv_annuity_factor(real_rate(return_rate, inflation) / 12.0, months)
    if factor == 0:
        return round_half_up(shortfall / months) if months > 0 else 0
    return round_half_up(shortfall / factor)


def run_out_age(starting_balance: float, retire_age: int, monthly_expenses: float,
                return_rate: float = 0.04, inflation: float = 0.03) -> int:
    """
    Age at which withdrawals exhaust the balance. Each month grows the balance
    at the real rate, then pays expenses. Never simulated past MAX_AGE, so a
    balance that outlasts the cap reports the capped age.
    """
    if starting_balance <= 0:
        return int(retire_age)
    monthly_rate = real_rate(return_rate, inflation) / 12.0
    max_months = max(0, (MAX_AGE - int(retire_age)) * 12)

    balance = starting_balance
    age = int(retire_age)
    months = 0
    while balance > 0 and months < max_months:
        balance = balance * (1 + monthly_rate) - monthly_expenses
        if balance < 0:
            return age
        months += 1
        if months % 12 == 0:
            age += 1
    return age


def early_retirement_years(surplus: float, monthly_expenses: float,
                           return_rate: float = 0.04, inflation: float = 0.03) -> int:
    """Whole years of expenses the surplus can fund (capped at 50)."""
    if surplus <= 0 or monthly_expenses <= 0:
        return 0
    monthly_rate = real_rate(return_rate, inflation) / 12.0
    balance = surplus
    funded = 0
    steps = 0
    while balance > 0 and steps < MAX_SOLVER_MONTHS:
        balance = balance * (1 + monthly_rate) - monthly_expenses
        steps += 1
        if balance > 0:
            funded += 1
    return funded // 12


# ---------- Surplus / readouts ----------
# Library-level readouts for callers that want a closed-form number without
# running the projection; the advice templates do not quote them.
def extra_monthly_spending(surplus: float, retirement_years: float,
                           return_rate: float = 0.04, inflation: float = 0.03) -> int:
    """Level monthly spend the surplus can fund across the whole retirement."""
    if surplus <= 0 or retirement_years <= 0:
        return 0
    months = int(round(retirement_years * 12))
    factor = pv_annuity_factor(real_rate(return_rate, inflation) / 12.0, months)
    if factor == 0:
        return round_half_up(surplus / months) if months > 0 else 0
    return round_half_up(surplus / factor)


def needed_savings(retirement_expenses: float, retirement_years: float,
                   return_rate: float = 0.04, inflation: float = 0.03) -> int:
    """Nest egg needed at retirement for ANNUAL expenses over `retirement_years`."""
    if retirement_years <= 0:
        return 0
    months = int(round(retirement_years * 12))
    monthly_rate = real_rate(return_rate, inflation) / 12.0
    return round_half_up(present_value(retirement_expenses / 12.0, monthly_rate, months))


def projected_savings(current_savings: float, monthly_savings: float,
                      years_to_retirement: float, rate: float = 0.06) -> int:
    # ordinary annuity: contributions at the end of each month
    if years_to_retirement <= 0:
        return round_half_up(current_savings)
    months = int(round(years_to_retirement * 12))
    monthly_rate = rate / 12.0
    grown = current_savings * (1 + monthly_rate) ** months
    return round_half_up(grown + monthly_savings * fv_annuity_factor(monthly_rate, months))


def monthly_goal(current_age: int, retire_age: int, current_savings: float,
                 target: float, rate: float = 0.06) -> float:
    """
    Monthly saving needed to reach `target`, after growing today's savings
    once a year at `rate`. 0 when already covered or no working years remain.
    """
    years = retire_age - current_age
    if years <= 0:
        return 0.0
    gap = target - current_savings * (1 + rate) ** years
    if gap <= 0:
        return 0.0
    factor = fv_annuity_factor(rate / 12.0, years * 12)
    if factor == 0:
        return 0.0
    goal = gap / factor
    logger.debug("monthly goal %.2f for gap %.2f over %d years", goal, gap, years)
    return goal
