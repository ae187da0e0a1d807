"""
Configuration for the shortest-path engine.
"""

from __future__ import annotations

from dataclasses import dataclass
import math
import numbers


@dataclass(frozen=True)
class DijkstraSettings:
    """Knobs for :class:`dijkstra_engine.SimpleDijkstraEngine`.

    Attributes
    ----------
    default_weight : float | None
        Cost used for unlabelled edges. ``None`` (the default) means an
        unlabelled edge is an error when encountered, so unweighted edges are
        never silently treated as free. Set it explicitly (e.g. ``1.0`` for
        hop counts) to opt in.
    """

    default_weight: float | None = None

    def validate(self) -> None:
        """Validate the configured default weight.

        Raises
        ------
        ValueError
            If ``default_weight`` is set but is not a non-negative, non-NaN
            ``numbers.Real`` (``Decimal`` is not one).
        """

        if self.default_weight is None:
            return
        w = self.default_weight
        if isinstance(w, bool) or not isinstance(w, numbers.Real):
            raise ValueError("default_weight must be a real number or None")
        if math.isnan(w) or w < 0:
            raise ValueError("default_weight must be non-negative")
