import logging
import math
from dataclasses import dataclass, field
from typing import Tuple

import numpy as np
import pandas as pd

from config import HORIZON_AGE
from rates import DEFAULT_RATES, RateModel
from solvers import present_value

logger = logging.getLogger(__name__)

# Growth base used to bend the recommended path (compound-looking, not linear)
TRAJECTORY_BASE = 1.065


@dataclass(frozen=True)
class UserProfile:
    current_age: int
    current_savings: float
    retire_age: int
    income: float                 # annual
    monthly_savings: float
    retirement_expenses: float    # ANNUAL, in today's money

    @classmethod
    def from_inputs(cls, **values):
        """Build from loose UI values; retire age is bumped past current age like the sliders do."""
        current_age = int(values["current_age"])
        retire_age = int(values["retire_age"])
        if retire_age <= current_age:
            retire_age = current_age + 1
        return cls(
            current_age=current_age,
            current_savings=float(values["current_savings"]),
            retire_age=retire_age,
            income=float(values["income"]),
            monthly_savings=float(values["monthly_savings"]),
            retirement_expenses=float(values["retirement_expenses"]),
        )

    @property
    def savings_rate(self) -> float:
        """Monthly savings as a % of monthly income."""
        if self.income <= 0:
            return 0.0
        return self.monthly_savings * 12 / self.income * 100

    @property
    def expenses_ratio(self) -> float:
        """Retirement expenses as a % of today's income."""
        if self.income <= 0:
            return 0.0
        return self.retirement_expenses / self.income * 100


@dataclass(frozen=True)
class ProjectionPoint:
    age: int
    projected_balance: float
    recommended_balance: float
    is_retired: bool


@dataclass(frozen=True)
class ProjectionResult:
    series: Tuple[ProjectionPoint, ...] = field(default_factory=tuple)
    target_nest_egg: float = 0.0
    retire_age: int = 0

    def _point(self, age: int):
        # series is age-ascending with one point per year
        if not self.series:
            return None
        idx = age - self.series[0].age
        if 0 <= idx < len(self.series):
            return self.series[idx]
        return None

    def balance_at(self, age: int) -> float:
        point = self._point(age)
        return point.projected_balance if point is not None else 0.0

    def recommended_at(self, age: int) -> float:
        point = self._point(age)
        return point.recommended_balance if point is not None else 0.0

    @property
    def projected_at_retire(self) -> float:
        # retire_age is already clamped to HORIZON_AGE - 1, so a plan retiring
        # at or past the horizon still reads a real point instead of 0
        return self.balance_at(self.retire_age)

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame({
            "age": [p.age for p in self.series],
            "projected_balance": [p.projected_balance for p in self.series],
            "recommended_balance": [p.recommended_balance for p in self.series],
            "is_retired": [p.is_retired for p in self.series],
        })


def _clean(x: float) -> float:
    return 0.0 if math.isnan(x) else float(x)


def target_nest_egg(retirement_expenses: float, retire_age: int, rates: RateModel = DEFAULT_RATES) -> float:
    """PV at retirement of monthly expenses until HORIZON_AGE, at the real monthly rate."""
    safe_retire = min(retire_age, HORIZON_AGE - 1)
    months = (HORIZON_AGE - safe_retire) * 12
    return _clean(present_value(retirement_expenses / 12.0, rates.monthly_real_return, months))


def _recommended_path(ages: np.ndarray, current_savings: float, target: float,
                      current_age: int, safe_retire: int) -> np.ndarray:
    """
    Target trajectory, independent of the simulated balance: grows from today's
    savings to the nest egg along a 6.5%-compounding shape, then runs down
    linearly to zero at the horizon.
    """
    out = np.zeros(len(ages), dtype=float)
    total_working = safe_retire - current_age
    total_retired = HORIZON_AGE - safe_retire
    denom = TRAJECTORY_BASE ** total_working - 1 if total_working > 0 else 0.0

    for i, age in enumerate(ages):
        if age < safe_retire:
            worked = age - current_age
            if total_working <= 0:
                progress = 0.0
            elif denom == 0:
                progress = worked / total_working
            else:
                progress = (TRAJECTORY_BASE ** worked - 1) / denom
            out[i] = current_savings + (target - current_savings) * progress
        else:
            years_left = HORIZON_AGE - age
            out[i] = target * years_left / total_retired if total_retired > 0 else 0.0
    return np.maximum(out, 0.0)


def project(profile: UserProfile, rates: RateModel = DEFAULT_RATES) -> ProjectionResult:
    """
    Month-by-month projection from current age to HORIZON_AGE.

    Point `age` holds the balance at the end of the year spent at that age,
    so the first point already includes a year of saving and the horizon
    year is simulated too.
    Working months add savings then grow at `rates.growth`; retired months pay
    expenses then grow at the real post-retirement rate. The balance is
    floored at zero after every month.
    """
    safe_retire = min(int(profile.retire_age), HORIZON_AGE - 1)
    monthly_expenses = profile.retirement_expenses / 12.0
    target = target_nest_egg(profile.retirement_expenses, safe_retire, rates)

    start = int(profile.current_age)
    if start > HORIZON_AGE:
        logger.debug("current age %s is past the horizon, nothing to project", start)
        return ProjectionResult(series=(), target_nest_egg=target, retire_age=safe_retire)

    ages = np.arange(start, HORIZON_AGE + 1)
    recommended = _recommended_path(ages, max(0.0, profile.current_savings), target, start, safe_retire)

    grow_m = 1 + rates.monthly_growth
    real_m = 1 + rates.monthly_real_return
    balance = max(0.0, _clean(profile.current_savings))

    points = []
    for i, age in enumerate(ages):
        retired = bool(age >= safe_retire)
        for _ in range(12):
            if retired:
                balance = (balance - monthly_expenses) * real_m
            else:
                balance = (balance + profile.monthly_savings) * grow_m
            balance = max(0.0, _clean(balance))
        points.append(ProjectionPoint(
            age=int(age),
            projected_balance=_clean(balance),
            recommended_balance=_clean(recommended[i]),
            is_retired=retired,
        ))

    result = ProjectionResult(series=tuple(points), target_nest_egg=target, retire_age=safe_retire)
    logger.debug("projected %d points, target %.0f, at retire %.0f",
                 len(points), target, result.projected_at_retire)
    return result


def empty_result() -> ProjectionResult:
    return ProjectionResult(series=(), target_nest_egg=0.0, retire_age=0)


def safe_project(profile: UserProfile, rates: RateModel = DEFAULT_RATES) -> ProjectionResult:
    # Top-level wrapper for the page: log and fall back to an empty result.
    try:
        return project(profile, rates)
    except Exception:
        logger.exception("projection failed for %s", profile)
        return empty_result()
