from dataclasses import asdict

from advice import assess
from projection import UserProfile, project
from rates import DEFAULT_RATES, RateModel


def clone_profile(profile: UserProfile, **overrides) -> UserProfile:
    base = asdict(profile)
    base.update(overrides)
    return UserProfile(**base)


def compare(profile: UserProfile, variants: list[tuple[str, dict]], rates: RateModel = DEFAULT_RATES):
    """
    variants: list of (name, overrides-dict)
    returns: dict name -> {projected_at_retire, target_nest_egg, severity}
    """
    res = {}
    for name, edits in variants:
        result = project(clone_profile(profile, **edits), rates)
        res[name] = {
            "projected_at_retire": result.projected_at_retire,
            "target_nest_egg": result.target_nest_egg,
            "severity": assess(result.projected_at_retire, result.target_nest_egg).severity,
        }
    return res


def what_ifs(profile: UserProfile, more_saving: float = 200, retire_later: int = 1,
             cut_spend_pct: float = 10, rates: RateModel = DEFAULT_RATES):
    """The page's three quick levers, each applied on its own against the baseline."""
    return compare(profile, [
        ("Current plan", {}),
        ("More saving", {"monthly_savings": profile.monthly_savings + more_saving}),
        ("Retire later", {"retire_age": profile.retire_age + retire_later}),
        ("Spend less", {"retirement_expenses": profile.retirement_expenses * (1 - cut_spend_pct / 100.0)}),
    ], rates)
