"""
Law Definition
==============
A physical law is a fixed, ordered list of quantities plus one rearrangement
per quantity that computes it from the others.

Why is this file needed?
------------------------
1. Selection: every law picks the quantity to solve for the same way, by
   scanning its declared order for the Unknown Sentinel.
2. Arithmetic: Python floats raise on division by zero, while a law must
   return `inf`/`nan` like IEEE-754 does. Rearrangements therefore run on
   `numpy.float64` values with floating-point warnings silenced.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Mapping, Optional, Tuple

import numpy as np

from physics_equations.config import SENTINEL

Values = Mapping[str, np.float64]
Rearrangement = Callable[[Values], np.float64]


@dataclass(frozen=True)
class Law:
    """
    One physical law and all of its algebraic directions.

    Attributes:
        name: Registry key, also the name of the public evaluator.
        title: Human readable name.
        quantities: Declared order in which quantities are tested.
        solvers: Rearrangement for each quantity, keyed by quantity name.
        complete: Evaluated when no quantity is unknown. `None` means the
            degenerate placeholder `0` is returned instead.
        description: One paragraph on the physics.
    """
    name: str
    title: str
    quantities: Tuple[str, ...]
    solvers: Mapping[str, Rearrangement] = field(repr=False)
    complete: Optional[Rearrangement] = field(default=None, repr=False)
    description: str = ""

    def __post_init__(self) -> None:
        missing = [q for q in self.quantities if q not in self.solvers]
        extra = [q for q in self.solvers if q not in self.quantities]
        if missing or extra:
            raise ValueError(
                f"Law '{self.name}' must define exactly one solver per quantity "
                f"(missing: {missing}, undeclared: {extra})"
            )

    def pivot(self, values: Mapping[str, float]) -> Optional[str]:
        """Return the first quantity in declared order equal to the sentinel."""
        for quantity in self.quantities:
            if values[quantity] == SENTINEL:
                return quantity
        return None

    def solve_for(self, quantity: str, values: Mapping[str, float]) -> float:
        """
        Solve the law for `quantity` using the other entries of `values`.

        Every declared quantity must be present in `values`; the entry for
        `quantity` itself is passed through but not read by a proper
        rearrangement.
        """
        return _run(self.solvers[quantity], values)

    def evaluate_complete(self, values: Mapping[str, float]) -> float:
        if self.complete is None:
            return float(SENTINEL)
        return _run(self.complete, values)

    def evaluate(self, **values: float) -> float:
        """
        Evaluate the law using the sentinel convention.

        Quantities not given default to the sentinel. The first sentinel in
        declared order is solved for; any later sentinel is read as a genuine
        zero.
        """
        values = {q: values.get(q, SENTINEL) for q in self.quantities}
        pivot = self.pivot(values)
        if pivot is None:
            return self.evaluate_complete(values)
        return self.solve_for(pivot, values)


def _run(rearrangement: Rearrangement, values: Mapping[str, float]) -> float:
    as_float64 = {name: np.float64(value) for name, value in values.items()}
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        return float(rearrangement(as_float64))
