"""Transmit current models for LoRa radios.

Each model answers a single question: how much current (A) does the radio
draw while transmitting at ``tx_power_dbm``?  The energy accounting of the
simulator multiplies that value by the supply voltage and the packet airtime.
"""

from __future__ import annotations

import logging
import math
import numbers
from abc import ABC, abstractmethod

import numpy as np

logger = logging.getLogger(__name__)


def dbm_to_w(power_dbm: float) -> float:
    """Convert a power level from dBm to Watts, saturating to ``inf``."""

    with np.errstate(over="ignore"):
        return float(np.power(10.0, (power_dbm - 30) / 10))


def _divide(numerator: float, denominator: float) -> float:
    """IEEE division: a zero denominator gives ``inf`` (or ``nan``), never an error."""

    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.divide(numerator, denominator))


def w_to_dbm(power_w: float) -> float:
    """Convert a power level from Watts to dBm."""

    return 10 * math.log10(power_w) + 30


def _validate_positive_real(name: str, value: object) -> float:
    """Return ``value`` as a positive real number or raise a clear error."""

    if isinstance(value, bool):
        raise TypeError(f"{name} must be a real number, not bool")
    if not isinstance(value, numbers.Real):
        raise TypeError(f"{name} must be a real number")
    if not math.isfinite(value) or value <= 0:
        raise ValueError(f"{name} must be a positive, finite number")
    return value


def _validate_non_negative_real(name: str, value: object) -> float:
    if isinstance(value, bool):
        raise TypeError(f"{name} must be a real number, not bool")
    if not isinstance(value, numbers.Real):
        raise TypeError(f"{name} must be a real number")
    if not math.isfinite(value) or value < 0:
        raise ValueError(f"{name} must be a non-negative, finite number")
    return value


class TxCurrentModel(ABC):
    """Estimate the current drawn by the radio during a transmission."""

    kind: str = ""

    @abstractmethod
    def estimate(self, tx_power_dbm: float) -> float:
        """Return the TX current (A) for the requested power ``tx_power_dbm``."""

    def validate(self) -> None:
        """Check the parameters, raising ``ValueError``/``TypeError`` if unusable.

        Models never validate on their own; this is only called when a model
        is built with ``strict=True``.
        """

    def parameters(self) -> dict[str, float]:
        """Return the configurable parameters of the model."""

        return {}

    def __repr__(self) -> str:
        args = ", ".join(f"{k}={v!r}" for k, v in self.parameters().items())
        return f"{type(self).__name__}({args})"


class LinearTxCurrentModel(TxCurrentModel):
    """Power amplifier model: RF power over ``voltage * eta`` plus standby.

    :param eta: Efficiency of the power amplifier, in ``(0, 1]``.
    :param voltage: Supply voltage (V).
    :param standby_current: Current drawn in STANDBY (A), 1.4 mA by default.
    """

    kind = "linear"

    def __init__(
        self, eta: float = 0.10, voltage: float = 3.3, standby_current: float = 0.0014
    ) -> None:
        self._eta = eta
        self._voltage = voltage
        self._standby_current = standby_current

    @property
    def eta(self) -> float:
        return self._eta

    @eta.setter
    def eta(self, eta: float) -> None:
        logger.debug("%r: eta=%s", self, eta)
        self._eta = eta

    @property
    def voltage(self) -> float:
        return self._voltage

    @voltage.setter
    def voltage(self, voltage: float) -> None:
        logger.debug("%r: voltage=%s", self, voltage)
        self._voltage = voltage

    @property
    def standby_current(self) -> float:
        return self._standby_current

    @standby_current.setter
    def standby_current(self, standby_current: float) -> None:
        logger.debug("%r: standby_current=%s", self, standby_current)
        self._standby_current = standby_current

    def estimate(self, tx_power_dbm: float) -> float:
        logger.debug("%r: estimate(%s dBm)", self, tx_power_dbm)
        return (
            _divide(dbm_to_w(tx_power_dbm), self._voltage * self._eta)
            + self._standby_current
        )

    def validate(self) -> None:
        eta = _validate_positive_real("eta", self._eta)
        if eta > 1:
            raise ValueError("eta must not exceed 1")
        _validate_positive_real("voltage", self._voltage)
        _validate_non_negative_real("standby_current", self._standby_current)

    def parameters(self) -> dict[str, float]:
        return {
            "eta": self._eta,
            "voltage": self._voltage,
            "standby_current": self._standby_current,
        }


class ConstantTxCurrentModel(TxCurrentModel):
    """Same current whatever the requested power (28 mA, i.e. TX at 0 dBm)."""

    kind = "constant"

    def __init__(self, tx_current: float = 0.028) -> None:
        self._tx_current = tx_current

    @property
    def tx_current(self) -> float:
        return self._tx_current

    @tx_current.setter
    def tx_current(self, tx_current: float) -> None:
        logger.debug("%r: tx_current=%s", self, tx_current)
        self._tx_current = tx_current

    def estimate(self, tx_power_dbm: float) -> float:
        logger.debug("%r: estimate(%s dBm)", self, tx_power_dbm)
        return self._tx_current

    def validate(self) -> None:
        _validate_non_negative_real("tx_current", self._tx_current)

    def parameters(self) -> dict[str, float]:
        return {"tx_current": self._tx_current}


class LiandoTxCurrentModel(TxCurrentModel):
    """Piecewise linear model fitted on the measurements of Liando et al.

    Below the first breakpoint and at or above the last one the reference
    value is divided by the supply voltage; in between, the reference values
    are interpolated directly.  The table is kept exactly as measured, its
    third breakpoint (1 dBm) included: the scan walks the table in order, so
    powers in ``[8, 14)`` interpolate on the ``(1, 14)`` segment.
    """

    kind = "liando"

    POWER_BREAKPOINTS_DBM: tuple[float, ...] = (5.0, 8.0, 1.0, 14.0, 17.0, 20.0)
    CURRENT_BREAKPOINTS_W: tuple[float, ...] = (0.15, 0.2, 0.25, 0.3, 0.4, 0.4)

    def __init__(self, voltage: float = 3.3) -> None:
        self._voltage = voltage

    @property
    def voltage(self) -> float:
        return self._voltage

    @voltage.setter
    def voltage(self, voltage: float) -> None:
        logger.debug("%r: voltage=%s", self, voltage)
        self._voltage = voltage

    def estimate(self, tx_power_dbm: float) -> float:
        logger.debug("%r: estimate(%s dBm)", self, tx_power_dbm)
        ptx = self.POWER_BREAKPOINTS_DBM
        power_w = self.CURRENT_BREAKPOINTS_W

        if tx_power_dbm < ptx[0]:
            return _divide(power_w[0], self._voltage)

        for i in range(1, len(ptx)):
            if tx_power_dbm < ptx[i]:
                return power_w[i] - (ptx[i] - tx_power_dbm) * (
                    power_w[i] - power_w[i - 1]
                ) / (ptx[i] - ptx[i - 1])

        return _divide(power_w[-1], self._voltage)

    def validate(self) -> None:
        _validate_positive_real("voltage", self._voltage)

    def parameters(self) -> dict[str, float]:
        return {"voltage": self._voltage}


PiecewiseTxCurrentModel = LiandoTxCurrentModel

# ------------------------------------------------------------------
# Model registry helpers
# ------------------------------------------------------------------

TX_CURRENT_MODELS: dict[str, type[TxCurrentModel]] = {
    "linear": LinearTxCurrentModel,
    "constant": ConstantTxCurrentModel,
    "liando": LiandoTxCurrentModel,
    "piecewise": LiandoTxCurrentModel,
}


def register_tx_current_model(name: str, cls: type[TxCurrentModel]) -> None:
    """Register a TX current model class under ``name``."""
    TX_CURRENT_MODELS[name.strip().lower()] = cls


def get_tx_current_model_class(name: str) -> type[TxCurrentModel]:
    """Retrieve a TX current model class by name."""
    key = name.strip().lower()
    if key not in TX_CURRENT_MODELS:
        supported = ", ".join(sorted(TX_CURRENT_MODELS))
        raise KeyError(f"Unknown TX current model: {name} (expected one of: {supported})")
    return TX_CURRENT_MODELS[key]


def create_tx_current_model(
    kind: str = "linear", *, strict: bool = False, **params: float
) -> TxCurrentModel:
    """Instantiate the ``kind`` model with ``params``.

    When ``strict`` is true the parameters are checked once here and a
    ``ValueError``/``TypeError`` is raised for values that would give
    non-physical currents.  ``estimate`` never performs that check.
    """

    cls = get_tx_current_model_class(kind)
    model = cls(**params)
    if strict:
        model.validate()
    logger.debug("Created %r", model)
    return model


__all__ = [
    "ConstantTxCurrentModel",
    "LiandoTxCurrentModel",
    "LinearTxCurrentModel",
    "PiecewiseTxCurrentModel",
    "TX_CURRENT_MODELS",
    "TxCurrentModel",
    "create_tx_current_model",
    "dbm_to_w",
    "get_tx_current_model_class",
    "register_tx_current_model",
    "w_to_dbm",
]
