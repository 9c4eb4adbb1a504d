"""Configuration structures for the TX current models.

Every option is listed with its default value and its unit.  Values can be
read from the ``[tx_current]`` section of an INI file::

    [tx_current]
    model = linear
    eta = 0.12
    voltage = 3.0
    standby_current = 0.0014
"""

from __future__ import annotations

import configparser
import logging
from dataclasses import asdict, dataclass, fields
from pathlib import Path

from .tx_current import TxCurrentModel, create_tx_current_model, get_tx_current_model_class

logger = logging.getLogger(__name__)

DEFAULT_SECTION = "tx_current"


@dataclass(frozen=True)
class LinearTxCurrentConfig:
    """Parameters of :class:`~loratxcurrent.tx_current.LinearTxCurrentModel`."""

    eta: float = 0.10  # power amplifier efficiency, (0, 1]
    voltage: float = 3.3  # V
    standby_current: float = 0.0014  # A

    kind = "linear"

    def build(self, *, strict: bool = False) -> TxCurrentModel:
        return create_tx_current_model(self.kind, strict=strict, **self.to_dict())

    def to_dict(self) -> dict[str, float]:
        return asdict(self)


@dataclass(frozen=True)
class ConstantTxCurrentConfig:
    """Parameters of :class:`~loratxcurrent.tx_current.ConstantTxCurrentModel`."""

    tx_current: float = 0.028  # A

    kind = "constant"

    def build(self, *, strict: bool = False) -> TxCurrentModel:
        return create_tx_current_model(self.kind, strict=strict, **self.to_dict())

    def to_dict(self) -> dict[str, float]:
        return asdict(self)


@dataclass(frozen=True)
class LiandoTxCurrentConfig:
    """Parameters of :class:`~loratxcurrent.tx_current.LiandoTxCurrentModel`.

    The breakpoint table is fixed; only the supply voltage is configurable.
    """

    voltage: float = 3.3  # V

    kind = "liando"

    def build(self, *, strict: bool = False) -> TxCurrentModel:
        return create_tx_current_model(self.kind, strict=strict, **self.to_dict())

    def to_dict(self) -> dict[str, float]:
        return asdict(self)


TxCurrentConfig = LinearTxCurrentConfig | ConstantTxCurrentConfig | LiandoTxCurrentConfig

_CONFIG_CLASSES: dict[str, type] = {
    "linear": LinearTxCurrentConfig,
    "constant": ConstantTxCurrentConfig,
    "liando": LiandoTxCurrentConfig,
}


def config_class_for(kind: str) -> type:
    """Return the configuration dataclass matching the model ``kind``."""

    model_cls = get_tx_current_model_class(kind)
    if model_cls.kind not in _CONFIG_CLASSES:
        supported = ", ".join(sorted(_CONFIG_CLASSES))
        raise KeyError(
            f"No configuration available for TX current model: {kind} "
            f"(expected one of: {supported})"
        )
    return _CONFIG_CLASSES[model_cls.kind]


def load_tx_current_config(
    path: str | Path | None, section: str = DEFAULT_SECTION
) -> TxCurrentConfig:
    """Return the TX current configuration defined in ``path``.

    A missing file or section yields the default linear configuration.
    """

    if path is None:
        return LinearTxCurrentConfig()
    cfg_path = Path(path)
    if not cfg_path.is_file():
        logger.debug("No TX current configuration at %s, using defaults", cfg_path)
        return LinearTxCurrentConfig()

    cp = configparser.ConfigParser()
    cp.read(cfg_path)
    if not cp.has_section(section):
        return LinearTxCurrentConfig()

    kind = cp.get(section, "model", fallback="linear")
    config_cls = config_class_for(kind)
    known = {f.name for f in fields(config_cls)}

    values: dict[str, float] = {}
    for key in cp.options(section):
        if key == "model":
            continue
        if key not in known:
            logger.warning(
                "Ignoring unknown option '%s' for the %s TX current model in %s",
                key,
                config_cls.kind,
                cfg_path,
            )
            continue
        try:
            values[key] = cp.getfloat(section, key)
        except ValueError as exc:
            raise ValueError(
                f"[{section}] {key} must be a number, got {cp.get(section, key)!r}"
            ) from exc
    return config_cls(**values)


__all__ = [
    "ConstantTxCurrentConfig",
    "LiandoTxCurrentConfig",
    "LinearTxCurrentConfig",
    "TxCurrentConfig",
    "config_class_for",
    "load_tx_current_config",
]
