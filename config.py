import logging
import os
import sys
from typing import Optional

APP_NAME = "Nest Egg Advisor: Retirement Trajectory Planner"

# Plan horizon (we assume you live to 95) and solver caps
HORIZON_AGE = 95
MAX_AGE = 120                 # run-out age never reported past this
MAX_SOLVER_MONTHS = 600       # 50 years

# Starting inputs for the page (retirement expenses are ANNUAL)
DEFAULTS = {
    "current_age": 45,
    "current_savings": 173_000,
    "retire_age": 62,
    "income": 213_000,
    "monthly_savings": 1_420,
    "retirement_expenses": 40_000,
    "rate_preset": "Baseline",
}

# Slider ranges: (min, max, step). retire_age min is current_age + 1 at runtime.
INPUT_RANGES = {
    "current_age": (18, 80, 1),
    "current_savings": (0, 2_000_000, 1_000),
    "retire_age": (19, 85, 1),
    "income": (30_000, 500_000, 1_000),
    "monthly_savings": (0, 20_000, 50),
    "retirement_expenses": (20_000, 200_000, 1_000),
}

# Shortfall / surplus cut-offs in percent of the target nest egg
SEVERITY_THRESHOLDS = {
    "severe": 50.0,     # % short
    "moderate": 20.0,   # % short
    "ahead": 15.0,      # % surplus
}

LOG_LEVEL = os.environ.get("NEST_EGG_LOG_LEVEL", "WARNING").upper()
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: Optional[str] = None):
    """Set up root logging once for the page (stdout only, no log files)."""
    level = (level or LOG_LEVEL).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    return logging.getLogger("nest_egg")
