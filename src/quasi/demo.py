"""Демонстрационный сценарий QUASI.

Внешний вызывающий код для DualState:
- создание состояния с фиксированными значениями
- измерение coherence
- observe (коллапс)
- invert (инверсия)

Запуск: python -m src.quasi [--id ID] [--label LABEL] [--primary X] [--secondary Y]
"""

import argparse
import json
import logging
from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from jsonschema import ValidationError

from src.core.contracts import validate_dual_state
from src.core.domain import DualState

logger = logging.getLogger(__name__)

BANNER = "=== QUASI :: Quantum Superpositional Infrastructure ==="


@dataclass(frozen=True)
class DemoConfig:
    """Параметры демонстрационного состояния."""
    state_id: str = "iceberg_01"
    label: str = "energy"
    primary: float = 42.0
    secondary: float = -41.8


def run_demo(
    config: Optional[DemoConfig] = None,
    out: Callable[[str], None] = print,
) -> DualState:
    """Прогон сценария create → coherence → observe → invert.

    Args:
        config: параметры состояния (default DemoConfig())
        out: приёмник строк отчёта (default print)

    Returns:
        DualState после инверсии (observed=True)
    """
    config = config or DemoConfig()
    state = DualState.create(config.state_id, config.label, config.primary, config.secondary)
    logger.info("Created state %s (coherence=%.3f)", state.id, state.measure_coherence())
    out(state.render())

    out(f"\n→ Measuring coherence: {state.measure_coherence():.3f}")
    out(f"→ Observing collapse: {state.observe():.3f}")
    out(f"→ State after observation:\n{state.render()}")

    out("\n→ Performing inversion...")
    state.invert()
    out(f"→ State after inversion:\n{state.render()}")
    return state


def build_parser() -> argparse.ArgumentParser:
    """Парсер аргументов CLI; значения по умолчанию берутся из DemoConfig."""
    defaults = DemoConfig()
    parser = argparse.ArgumentParser(description="QUASI dual state demo")
    parser.add_argument("--id", dest="state_id", default=defaults.state_id)
    parser.add_argument("--label", default=defaults.label)
    parser.add_argument("--primary", type=float, default=defaults.primary)
    parser.add_argument("--secondary", type=float, default=defaults.secondary)
    parser.add_argument("--snapshot", action="store_true", help="print the final JSON snapshot")
    parser.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Точка входа CLI (python -m src.quasi, quasi-demo).

    Args:
        argv: аргументы командной строки (default sys.argv[1:])

    Returns:
        Код возврата: 0 при успехе, 1 если снапшот нарушает контракт dual_state
    """
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(asctime)s %(levelname)s %(message)s")

    config = DemoConfig(
        state_id=args.state_id,
        label=args.label,
        primary=args.primary,
        secondary=args.secondary,
    )
    print(BANNER)
    state = run_demo(config)

    if args.snapshot:
        snapshot = state.to_snapshot()
        try:
            validate_dual_state(snapshot)
        except ValidationError as e:
            logger.error("Snapshot violates dual_state contract: %s", e.message)
            return 1
        print(json.dumps(snapshot, indent=2, ensure_ascii=False))
    return 0
