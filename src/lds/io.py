from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Tuple, Union
import numpy as np

from .params import SequenceParams


ParamsInput = Union[SequenceParams, Dict[str, Any], None]


def _params_dict(params: ParamsInput) -> Dict[str, Any]:
    if params is None:
        return {}
    if isinstance(params, SequenceParams):
        return params.as_dict()
    if isinstance(params, dict):
        return dict(params)
    raise TypeError("params must be a SequenceParams, a dict or None")


def save_points_json(points: np.ndarray, save_path: str, params: ParamsInput = None) -> str:
    """Save a point set to a JSON file.

    The JSON structure is:
        {"params": {...},
         "dim": int or null,
         "points": [[x0, x1, ...], ...]
        }

    A 1-D array (scalar sequence) is stored as a flat list with ``dim``
    null. ``dim`` keeps the column count of empty point sets.
    """
    pts = np.asarray(points, dtype=np.float64)
    if pts.ndim not in (1, 2):
        raise ValueError(f"points must have shape (N,) or (N, dim) (got {pts.shape})")
    if not np.all(np.isfinite(pts)):
        raise ValueError("points must be finite")

    path = Path(save_path)
    if path.suffix.lower() == "":
        path = path.with_suffix(".json")
    if path.parent and not path.parent.exists():
        path.parent.mkdir(parents=True, exist_ok=True)

    dim = int(pts.shape[1]) if pts.ndim == 2 else None
    payload = {"params": _params_dict(params), "dim": dim, "points": pts.tolist()}
    with path.open("w", encoding="utf-8") as fh:
        json.dump(payload, fh, ensure_ascii=False, indent=2)

    return str(path.resolve())


def load_points_json(load_path: str) -> Tuple[np.ndarray, Dict[str, Any]]:
    """Load a point set saved by save_points_json.

    Returns ``(points, params)`` with ``points`` as float64 array.
    """
    path = Path(load_path)
    if not path.exists():
        raise FileNotFoundError(f"File not found: {load_path}")

    with path.open("r", encoding="utf-8") as fh:
        data = json.load(fh)

    if not isinstance(data, dict) or "points" not in data:
        raise TypeError("Invalid point JSON: expected an object with 'points' list")
    raw = data["points"]
    if not isinstance(raw, list):
        raise TypeError("'points' must be a list")
    params = data.get("params", {})
    if not isinstance(params, dict):
        raise TypeError("'params' must be an object")

    try:
        pts = np.asarray(raw, dtype=np.float64)
    except (TypeError, ValueError):
        raise TypeError("'points' must be a list of numbers or of equal-length number lists")
    if pts.ndim not in (1, 2):
        raise TypeError("'points' must be a list of numbers or of equal-length number lists")

    dim = data.get("dim")
    if dim is not None:
        if not isinstance(dim, int) or isinstance(dim, bool) or dim < 0:
            raise TypeError("'dim' must be a non-negative integer or null")
        if pts.size == 0:
            pts = pts.reshape(0, dim)
        elif pts.ndim != 2 or pts.shape[1] != dim:
            raise ValueError(f"'points' rows must have {dim} coordinates (got shape {pts.shape})")

    return pts, params


__all__ = ["save_points_json", "load_points_json"]
