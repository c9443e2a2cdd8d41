from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Mapping, Optional, Sequence, Union

import numpy as np
import matplotlib.pyplot as plt

from physics_equations.errors import UnknownQuantityError
from physics_equations.registry import get_law, solve

if TYPE_CHECKING:
    import numpy.typing as npt
    from matplotlib.figure import Figure

logger = logging.getLogger(__name__)


def sweep(
    law_name: str,
    target: str,
    vary: str,
    values: Union[Sequence[float], npt.NDArray[np.float64]],
    fixed: Optional[Mapping[str, float]] = None,
) -> npt.NDArray[np.float64]:
    """
    Solve a law for `target` at every value of `vary`.

    Each point goes through `registry.solve` with the strict policy, so every
    quantity other than `target` and `vary` must be given in `fixed`.

    Args:
        law_name: Registry key of the law.
        target: Quantity to compute.
        vary: Quantity taking the values of `values`.
        values: Values of `vary`.
        fixed: Values of the remaining quantities.

    Raises:
        UnknownQuantityError: If `target` or `vary` is not a quantity of the law.
        ValueError: If `target` equals `vary`, or `fixed` sets either of them.

    Returns:
        Array of results with the shape of `np.atleast_1d(values)`.
    """
    law = get_law(law_name)
    unknown = [name for name in (target, vary) if name not in law.quantities]
    if unknown:
        raise UnknownQuantityError(law.name, unknown)
    if target == vary:
        raise ValueError(f"Cannot sweep '{vary}' while solving for it")

    fixed = dict(fixed or {})
    clashes = [name for name in (target, vary) if name in fixed]
    if clashes:
        raise ValueError(f"'fixed' must not set {', '.join(clashes)}")

    grid = np.atleast_1d(np.asarray(values, dtype=np.float64))
    results = np.empty_like(grid)
    for index, value in np.ndenumerate(grid):
        results[index] = solve(law.name, {**fixed, vary: float(value), target: None})

    logger.debug("Swept '%s' for '%s' over %d values of '%s'", law.name, target, grid.size, vary)
    return results


def plot_sweep(
    law_name: str,
    target: str,
    vary: str,
    values: Union[Sequence[float], npt.NDArray[np.float64]],
    fixed: Optional[Mapping[str, float]] = None,
    show: bool = True,
) -> Figure:
    """
    Plot `target` against `vary` for a law.

    Returns:
        The matplotlib figure.
    """
    law = get_law(law_name)
    grid = np.atleast_1d(np.asarray(values, dtype=np.float64))
    results = sweep(law_name, target, vary, grid, fixed)

    plt.rcParams["figure.constrained_layout.use"] = True
    fig = plt.figure(figsize=(7, 5))

    plt.plot(grid, results, 'r', lw=2)

    plt.grid(visible=True, which='major', axis='both', linestyle='-', color='gray', lw=0.5)
    plt.minorticks_on()
    plt.grid(visible=True, which='minor', axis='both', linestyle=':', color='gray', lw=0.5)

    subtitle = ", ".join(f"{name} = {value:g}" for name, value in (fixed or {}).items())
    plt.title(f"{law.title}\n{subtitle}" if subtitle else law.title)
    plt.xlabel(vary.replace("_", " "))
    plt.ylabel(target.replace("_", " "))

    if show:
        plt.show()
    return fig


if __name__ == "__main__":
    plot_sweep("ohms_law", "current", "resistance", np.linspace(1.0, 100.0, 200), {"voltage": 12.0})
    plot_sweep("coulombs_law", "electrostatic_force", "distance", np.linspace(0.5, 5.0, 200),
               {"charge_one": 2.0, "charge_two": 3.0})
