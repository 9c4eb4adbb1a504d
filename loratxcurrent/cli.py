"""Print or export the TX current of a model over a range of powers.

Usage::

    python -m loratxcurrent --model liando --min 0 --max 20 --step 2
    python -m loratxcurrent --config radio.ini --power 14 --output tx.csv
"""

from __future__ import annotations

import argparse
import logging
from dataclasses import replace
from pathlib import Path

from .config import config_class_for, load_tx_current_config
from .curves import compare_models, power_grid

logger = logging.getLogger(__name__)

_PARAM_OPTIONS = ("eta", "voltage", "standby_current", "tx_current")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Tabulate LoRa TX current models")
    parser.add_argument(
        "--model",
        default=None,
        help="Model kind (linear, constant, liando/piecewise). Overrides --config",
    )
    parser.add_argument("--config", type=Path, default=None, help="INI file with a [tx_current] section")
    parser.add_argument(
        "--power",
        type=float,
        action="append",
        default=[],
        metavar="DBM",
        help="TX power to evaluate (dBm). Can be repeated",
    )
    parser.add_argument("--min", dest="min_dbm", type=float, default=0.0, help="Lowest power (dBm)")
    parser.add_argument("--max", dest="max_dbm", type=float, default=20.0, help="Highest power (dBm)")
    parser.add_argument("--step", type=float, default=1.0, help="Power step (dB)")
    parser.add_argument("--eta", type=float, default=None, help="Amplifier efficiency")
    parser.add_argument("--voltage", type=float, default=None, help="Supply voltage (V)")
    parser.add_argument("--standby-current", type=float, default=None, help="Standby current (A)")
    parser.add_argument("--tx-current", type=float, default=None, help="Constant TX current (A)")
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Reject non-physical parameters instead of extrapolating",
    )
    parser.add_argument("--output", type=Path, default=None, help="CSV file to write")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logs")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")
    logging.getLogger("loratxcurrent").setLevel(level)

    try:
        config = load_tx_current_config(args.config)
        if args.model is not None:
            config_cls = config_class_for(args.model)
            if not isinstance(config, config_cls):
                config = config_cls()
    except (KeyError, ValueError) as exc:
        raise SystemExit(f"Invalid TX current configuration: {exc}") from exc

    overrides: dict[str, float] = {}
    accepted = set(config.to_dict())
    for param in _PARAM_OPTIONS:
        value = getattr(args, param)
        if value is None:
            continue
        if param not in accepted:
            raise SystemExit(f"--{param.replace('_', '-')} does not apply to the {config.kind} model")
        overrides[param] = value
    if overrides:
        config = replace(config, **overrides)

    try:
        model = config.build(strict=args.strict)
        powers = args.power or power_grid(args.min_dbm, args.max_dbm, args.step)
    except (TypeError, ValueError) as exc:
        raise SystemExit(str(exc)) from exc

    df = compare_models({config.kind: model}, powers)
    if args.output is not None:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        df.to_csv(args.output, index=False)
        logger.info("Wrote %d rows to %s", len(df), args.output)
    else:
        print(df.to_string(index=False))
    return 0
