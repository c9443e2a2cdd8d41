"""
Exceptions raised by the registry and the explicit-absence solver.

The sentinel evaluators in `physics_equations.laws` never raise: degenerate
inputs give `0` and bad arithmetic gives `inf` or `nan`.
"""
from __future__ import annotations

from typing import Iterable


class FormulaError(Exception):
    """Base class for every error raised by this package."""


class UnknownLawError(FormulaError, KeyError):
    """No law is registered under the requested name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"No law registered for key '{name}'")

    def __str__(self) -> str:
        return self.args[0]


class UnknownQuantityError(FormulaError, ValueError):
    """A quantity name is not declared by the law."""

    def __init__(self, law_name: str, names: Iterable[str]):
        self.law_name = law_name
        self.names = tuple(names)
        super().__init__(
            f"Law '{law_name}' has no quantity named {', '.join(repr(n) for n in self.names)}"
        )


class NothingToSolveError(FormulaError, ValueError):
    """Every quantity was supplied and the law has nothing to compute."""

    def __init__(self, law_name: str):
        self.law_name = law_name
        super().__init__(f"All quantities of '{law_name}' were supplied; nothing to solve for")


class AmbiguousUnknownError(FormulaError, ValueError):
    """More than one quantity was left absent."""

    def __init__(self, law_name: str, unknowns: Iterable[str]):
        self.law_name = law_name
        self.unknowns = tuple(unknowns)
        super().__init__(
            f"Law '{law_name}' can solve for one quantity at a time, "
            f"got {len(self.unknowns)} absent: {', '.join(self.unknowns)}"
        )
