"""QUASI demo: внешний вызывающий код для DualState."""

from src.quasi.demo import BANNER, DemoConfig, build_parser, main, run_demo

__all__ = ["BANNER", "DemoConfig", "build_parser", "main", "run_demo"]
