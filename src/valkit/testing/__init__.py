"""Testing support – Hypothesis strategies for valkit containers."""

from valkit.testing.strategies import options, payloads, results

__all__ = ["options", "payloads", "results"]
