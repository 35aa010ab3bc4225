import logging

from config import DEFAULTS, INPUT_RANGES, configure_logging


def test_configure_logging_accepts_explicit_and_default_level():
    assert isinstance(configure_logging("debug"), logging.Logger)
    assert isinstance(configure_logging(), logging.Logger)


def test_defaults_sit_inside_slider_ranges():
    for key, (lo, hi, _step) in INPUT_RANGES.items():
        assert lo <= DEFAULTS[key] <= hi
