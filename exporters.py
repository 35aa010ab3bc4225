# exporters.py
import json
from dataclasses import asdict

import numpy as np

from projection import ProjectionResult, UserProfile


def export_series(result: ProjectionResult) -> tuple[str, bytes]:
    df = result.to_frame()
    return "projection_series.csv", df.to_csv(index=False).encode()


def _json_default(o):
    # numpy scalars/arrays can leak in from the recommended path
    if isinstance(o, np.ndarray):
        return o.tolist()
    if isinstance(o, (np.floating, np.integer, np.bool_)):
        return o.item()
    raise TypeError(f"Object of type {o.__class__.__name__} is not JSON serializable")


def export_advice(profile: UserProfile, result: ProjectionResult, message) -> tuple[str, bytes]:
    """
    Export the inputs, the headline numbers and the advice as one JSON blob.
    `message` is any advice variant (anything with to_dict()).
    """
    blob = json.dumps({
        "profile": asdict(profile),
        "target_nest_egg": result.target_nest_egg,
        "projected_at_retire": result.projected_at_retire,
        "advice": message.to_dict(),
    }, indent=2, default=_json_default)
    return "advice.json", blob.encode()
