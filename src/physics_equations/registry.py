"""
Formula Registry
================
Looks laws up by name and evaluates them from a mapping of quantities.

Two entry points are offered:

* `evaluate` follows the sentinel convention of the public evaluators: a
  missing key or a value of `0` marks the quantity to solve for.
* `solve` marks absence explicitly with a missing key or `None`, so `0` is an
  ordinary physical value. What happens when nothing, or more than one
  quantity, is absent is decided by an `UnknownPolicy`.
"""
from __future__ import annotations

import logging
from enum import StrEnum
from typing import Dict, List, Mapping, Optional

from physics_equations.config import SENTINEL
from physics_equations.errors import (
    AmbiguousUnknownError,
    NothingToSolveError,
    UnknownLawError,
    UnknownQuantityError,
)
from physics_equations.law import Law

logger = logging.getLogger(__name__)

_REGISTRY: Dict[str, Law] = {}


class UnknownPolicy(StrEnum):
    STRICT = "strict"
    FIRST_IN_ORDER = "first_in_order"


def register_law(law: Law) -> Law:
    """Register a law under its name."""
    if law.name in _REGISTRY:
        raise ValueError(f"A law named '{law.name}' is already registered")
    _REGISTRY[law.name] = law
    return law


def get_law(name: str) -> Law:
    law = _REGISTRY.get(name)
    if law is None:
        raise UnknownLawError(name)
    return law


def list_laws() -> List[str]:
    return list(_REGISTRY.keys())


def _check_names(law: Law, inputs: Mapping[str, Optional[float]]) -> None:
    unknown = [name for name in inputs if name not in law.quantities]
    if unknown:
        raise UnknownQuantityError(law.name, unknown)


def evaluate(law_name: str, inputs: Optional[Mapping[str, float]] = None) -> float:
    """
    Evaluate a law from a partial mapping, using the sentinel convention.

    Gives the same result as calling the law's evaluator with `**inputs`.

    Raises:
        UnknownLawError: If no law is registered under `law_name`.
        UnknownQuantityError: If `inputs` names a quantity the law does not have.
    """
    law = get_law(law_name)
    inputs = dict(inputs or {})
    _check_names(law, inputs)
    return law.evaluate(**inputs)


def solve(
    law_name: str,
    inputs: Mapping[str, Optional[float]],
    policy: UnknownPolicy = UnknownPolicy.STRICT,
) -> float:
    """
    Solve a law for the quantity that is explicitly absent.

    A quantity is absent when its key is missing from `inputs` or maps to
    `None`. Supplied zeros are used as zeros.

    Args:
        law_name: Registry key of the law.
        inputs: Known quantities.
        policy: STRICT raises when zero or several quantities are absent.
            FIRST_IN_ORDER solves for the first absent quantity in declared
            order, reading the other absent ones as zero, and returns `0` when
            nothing is absent.

    Raises:
        UnknownLawError: If no law is registered under `law_name`.
        UnknownQuantityError: If `inputs` names a quantity the law does not have.
        NothingToSolveError: STRICT only, every quantity supplied and the law
            has no complete evaluator.
        AmbiguousUnknownError: STRICT only, more than one quantity absent.

    Returns:
        The computed quantity, possibly `inf` or `nan`.
    """
    law = get_law(law_name)
    _check_names(law, inputs)
    policy = UnknownPolicy(policy)

    absent = [q for q in law.quantities if inputs.get(q) is None]
    values = {q: SENTINEL if inputs.get(q) is None else inputs[q] for q in law.quantities}

    if not absent:
        if law.complete is None and policy is UnknownPolicy.STRICT:
            raise NothingToSolveError(law.name)
        logger.debug("No quantity of '%s' is absent, evaluating the complete law", law.name)
        return law.evaluate_complete(values)

    if len(absent) > 1:
        if policy is UnknownPolicy.STRICT:
            raise AmbiguousUnknownError(law.name, absent)
        logger.warning(
            "Several quantities of '%s' are absent (%s); solving for '%s' and reading the rest as zero",
            law.name, ", ".join(absent), absent[0]
        )

    pivot = absent[0]
    logger.debug("Solving '%s' for '%s'", law.name, pivot)
    return law.solve_for(pivot, values)
