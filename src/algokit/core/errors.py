"""Error types raised by algokit."""

from __future__ import annotations

from typing import Any, Sequence


class AlgorithmError(Exception):
    """Base class for errors raised by the toolkit."""


# ============================================================================
#                           Range violations
# ============================================================================


class RankOutOfRangeError(AlgorithmError, IndexError):
    """Raised when an order-statistic rank falls outside ``[0, length)``."""

    def __init__(self, k: int, length: int) -> None:
        super().__init__(f"quick_select: k={k} out of range for {length} items")
        self.k = k
        self.length = length


# ============================================================================
#                           Structural violations
# ============================================================================


class CycleError(AlgorithmError, ValueError):
    """Raised when a topological order is requested for a cyclic graph."""

    def __init__(self, remaining: Sequence[Any]) -> None:
        super().__init__(
            f"topological_sort: graph has cycles ({len(remaining)} nodes could not be ordered)"
        )
        self.remaining = list(remaining)


class EmptyInputError(AlgorithmError, ValueError):
    """Raised when an aggregate is requested over an empty sequence."""


class GraphFormatError(AlgorithmError, ValueError):
    """Raised when a graph document fails validation."""
