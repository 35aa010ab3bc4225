import pytest

from projection import target_nest_egg
from solvers import (additional_savings_needed, delay_years_needed, early_retirement_years,
                     expense_reduction, extra_monthly_spending, monthly_goal, needed_savings,
                     projected_savings, pv_annuity_factor, round_half_up, run_out_age)


def test_additional_savings_zero_years_or_no_shortfall():
    assert additional_savings_needed(100_000, 0) == 0
    assert additional_savings_needed(0, 10) == 0
    assert additional_savings_needed(-5_000, 10) == 0


def test_additional_savings_matches_fv_annuity():
    # 35 years at 6%/12: factor ~1424.7
    assert additional_savings_needed(1_587_411, 35) == pytest.approx(1114, abs=1)


def test_additional_savings_zero_rate_is_equal_split():
    assert additional_savings_needed(1_200, 1, rate=0.0) == 100


def test_delay_years_boundaries():
    assert delay_years_needed(0, 500) == 0
    assert delay_years_needed(1_000, 0) == 0


def test_delay_years_rounds_up():
    assert delay_years_needed(6_000, 500, rate=0.0) == 1
    assert delay_years_needed(6_001, 500, rate=0.0) == 2


def test_delay_years_capped_at_fifty():
    assert delay_years_needed(1e12, 1) == 50


def test_expense_reduction_zero_real_rate():
    # return == inflation -> no real growth, straight division
    assert expense_reduction(36_000, 30, return_rate=0.03, inflation=0.03) == 100
    assert expense_reduction(0, 30) == 0
    assert expense_reduction(10_000, 0) == 0


def test_expense_reduction_inverts_target_nest_egg():
    target = target_nest_egg(60_000, 65)
    assert expense_reduction(target, 30) == 5_000


def test_run_out_age_boundaries():
    assert run_out_age(0, 65, 3_000) == 65
    assert run_out_age(-10, 70, 3_000) == 70


def test_run_out_age_depletes():
    assert run_out_age(12_500, 65, 1_000, return_rate=0.03, inflation=0.03) == 66
    assert run_out_age(12_000, 65, 1_000, return_rate=0.03, inflation=0.03) == 66


def test_run_out_age_capped_at_120():
    assert run_out_age(100_000, 65, 0) == 120
    assert run_out_age(5_000_000, 60, 100) == 120


def test_early_retirement_years():
    assert early_retirement_years(0, 1_000) == 0
    assert early_retirement_years(10_000, 0) == 0
    assert early_retirement_years(25_000, 1_000, return_rate=0.03, inflation=0.03) == 2
    assert early_retirement_years(24_000, 1_000, return_rate=0.03, inflation=0.03) == 1


def test_early_retirement_years_capped():
    assert early_retirement_years(1e12, 1) == 50


def test_extra_monthly_spending():
    assert extra_monthly_spending(0, 30) == 0
    assert extra_monthly_spending(36_000, 30, return_rate=0.03, inflation=0.03) == 100


def test_needed_savings_agrees_with_projection_target():
    assert needed_savings(40_000, 33) == pytest.approx(target_nest_egg(40_000, 62), abs=1)
    assert needed_savings(40_000, 0) == 0


def test_projected_savings_closed_form():
    assert projected_savings(0, 10_050, 35) == pytest.approx(14_318_339, rel=1e-3)
    assert projected_savings(25_000, 500, 0) == 25_000


def test_pv_factor_zero_rate_and_no_months():
    assert pv_annuity_factor(0.0, 120) == 120
    assert pv_annuity_factor(0.01, 0) == 0


def test_monthly_goal():
    assert monthly_goal(60, 60, 0, 500_000) == 0
    assert monthly_goal(40, 60, 5_000_000, 500_000) == 0
    goal = monthly_goal(40, 60, 0, 500_000)
    assert goal == pytest.approx(500_000 / ((1.005 ** 240 - 1) / 0.005))


def test_round_half_up_rounds_halves_away_from_even():
    assert round_half_up(2.5) == 3
    assert round_half_up(3.5) == 4
    assert round_half_up(2.49) == 2
