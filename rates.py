# Fixed economic assumptions. All annual, nominal unless noted.
# These are not forecasts, just the constants the projection runs on.
from dataclasses import dataclass


@dataclass(frozen=True)
class RateModel:
    growth: float = 0.06          # while working
    retired_growth: float = 0.04  # once retired
    inflation: float = 0.03
    geometric: bool = False       # True = (1+a)^(1/12)-1 monthly rates instead of a/12

    @property
    def real_return(self) -> float:
        """Post-retirement return after inflation: (1+gr)/(1+i) - 1."""
        return (1 + self.retired_growth) / (1 + self.inflation) - 1

    def monthly(self, annual: float) -> float:
        if self.geometric:
            return (1 + annual) ** (1 / 12.0) - 1
        return annual / 12.0

    @property
    def monthly_growth(self) -> float:
        return self.monthly(self.growth)

    @property
    def monthly_real_return(self) -> float:
        return self.monthly(self.real_return)


DEFAULT_RATES = RateModel()

PRESETS = {
    "Baseline": DEFAULT_RATES,
    "Conservative": RateModel(growth=0.05, retired_growth=0.035, inflation=0.03),
    "Optimistic": RateModel(growth=0.07, retired_growth=0.05, inflation=0.025),
    "High inflation": RateModel(growth=0.06, retired_growth=0.04, inflation=0.045),
}
