"""Helpers to tabulate TX current models over a range of powers."""

from __future__ import annotations

from typing import Iterable, Mapping

import numpy as np
import pandas as pd

from .tx_current import TxCurrentModel


def power_grid(min_dbm: float, max_dbm: float, step_db: float = 1.0) -> np.ndarray:
    """Return the powers from ``min_dbm`` to ``max_dbm`` (inclusive) every ``step_db``."""

    if step_db <= 0:
        raise ValueError("step_db must be > 0")
    if max_dbm < min_dbm:
        raise ValueError("max_dbm must be >= min_dbm")
    count = int(np.floor((max_dbm - min_dbm) / step_db + 1e-9)) + 1
    return min_dbm + step_db * np.arange(count, dtype=float)


def current_curve(model: TxCurrentModel, powers_dbm: Iterable[float]) -> np.ndarray:
    """Evaluate ``model`` at each power of ``powers_dbm`` (A)."""

    return np.array([model.estimate(float(p)) for p in powers_dbm], dtype=float)


def compare_models(
    models: Mapping[str, TxCurrentModel], powers_dbm: Iterable[float]
) -> pd.DataFrame:
    """Return a table with one ``<name>_A`` column per model."""

    powers = np.asarray(list(powers_dbm), dtype=float)
    data: dict[str, np.ndarray] = {"power_dBm": powers}
    for name, model in models.items():
        data[f"{name}_A"] = current_curve(model, powers)
    return pd.DataFrame(data)


def tx_charge_c(model: TxCurrentModel, power_dbm: float, airtime_s: float) -> float:
    """Return the charge (C) drawn while transmitting for ``airtime_s`` seconds."""

    if airtime_s <= 0:
        return 0.0
    return model.estimate(power_dbm) * airtime_s
