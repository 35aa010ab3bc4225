import json

import numpy as np
import pytest

from advice import advise
from exporters import _json_default, export_advice, export_series
from projection import UserProfile, project

USER = UserProfile(current_age=50, current_savings=400_000, retire_age=62, income=150_000,
                   monthly_savings=1_200, retirement_expenses=55_000)


def test_export_series_csv():
    name, data = export_series(project(USER))
    assert name == "projection_series.csv"
    lines = data.decode().splitlines()
    assert lines[0] == "age,projected_balance,recommended_balance,is_retired"
    assert len(lines) == 1 + (95 - 50 + 1)
    first = lines[1].split(",")
    assert first[0] == "50"
    # a year of saving on top of the opening 400K
    assert float(first[1]) > 400_000
    assert lines[-1].startswith("95,")


def test_export_advice_json():
    result = project(USER)
    message = advise(USER, result)
    name, data = export_advice(USER, result, message)
    assert name == "advice.json"
    blob = json.loads(data)
    assert blob["profile"]["retire_age"] == 62
    assert blob["advice"]["severity"] == message.severity
    assert blob["target_nest_egg"] == pytest.approx(result.target_nest_egg)


def test_json_default_handles_numpy_and_rejects_others():
    assert _json_default(np.float64(1.5)) == 1.5
    assert _json_default(np.arange(3)) == [0, 1, 2]
    with pytest.raises(TypeError):
        _json_default(object())
