"""
Physics formula evaluators.

Each law relates a small fixed set of quantities and computes whichever one is
left out. The evaluators in `laws` mark the missing quantity with `0`; the
registry's `solve` marks it with `None` instead.
"""
from physics_equations.errors import (
    AmbiguousUnknownError,
    FormulaError,
    NothingToSolveError,
    UnknownLawError,
    UnknownQuantityError,
)
from physics_equations.law import Law
from physics_equations.laws import (
    coulombs_law,
    ideal_gas_law,
    mass_energy_equivalence,
    newton_second_law,
    ohms_law,
    projectile_motion,
    simple_harmonic_motion,
    work_energy_theorem,
)
from physics_equations.registry import (
    UnknownPolicy,
    evaluate,
    get_law,
    list_laws,
    register_law,
    solve,
)

__all__ = [
    "AmbiguousUnknownError",
    "FormulaError",
    "Law",
    "NothingToSolveError",
    "UnknownLawError",
    "UnknownPolicy",
    "UnknownQuantityError",
    "coulombs_law",
    "evaluate",
    "get_law",
    "ideal_gas_law",
    "list_laws",
    "mass_energy_equivalence",
    "newton_second_law",
    "ohms_law",
    "projectile_motion",
    "register_law",
    "simple_harmonic_motion",
    "solve",
    "work_energy_theorem",
]
