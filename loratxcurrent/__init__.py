"""Modèles de courant d'émission pour les radios LoRa."""

from .config import (
    ConstantTxCurrentConfig,
    LiandoTxCurrentConfig,
    LinearTxCurrentConfig,
    load_tx_current_config,
)
from .curves import compare_models, current_curve, power_grid, tx_charge_c
from .tx_current import (
    ConstantTxCurrentModel,
    LiandoTxCurrentModel,
    LinearTxCurrentModel,
    PiecewiseTxCurrentModel,
    TxCurrentModel,
    create_tx_current_model,
    dbm_to_w,
    get_tx_current_model_class,
    register_tx_current_model,
    w_to_dbm,
)

__all__ = [
    "ConstantTxCurrentConfig",
    "ConstantTxCurrentModel",
    "LiandoTxCurrentConfig",
    "LiandoTxCurrentModel",
    "LinearTxCurrentConfig",
    "LinearTxCurrentModel",
    "PiecewiseTxCurrentModel",
    "TxCurrentModel",
    "compare_models",
    "create_tx_current_model",
    "current_curve",
    "dbm_to_w",
    "get_tx_current_model_class",
    "load_tx_current_config",
    "power_grid",
    "register_tx_current_model",
    "tx_charge_c",
    "w_to_dbm",
]
