"""
Physical laws and their sentinel-convention evaluators.

Each evaluator takes every quantity of its law as an argument defaulting to
`0`. The first argument in signature order equal to `0` is the one computed;
if none is `0` the evaluator returns `0`. Results are plain floats and may be
`inf` or `nan` when the rearrangement divides by zero or takes the square root
of a negative number.

Example:
    >>> ohms_law(voltage=12, resistance=4)
    3.0
"""
from __future__ import annotations

import numpy as np

from physics_equations.law import Law
from physics_equations.registry import register_law


NEWTON_SECOND_LAW = register_law(Law(
    name="newton_second_law",
    title="Newton's Second Law",
    quantities=("force", "mass", "acceleration"),
    solvers={
        "force": lambda v: v["mass"] * v["acceleration"],
        "mass": lambda v: v["force"] / v["acceleration"],
        "acceleration": lambda v: v["force"] / v["mass"],
    },
    description="The net force on a body equals its mass times its acceleration, F = m·a.",
))

PROJECTILE_MOTION = register_law(Law(
    name="projectile_motion",
    title="Projectile Motion",
    quantities=("initial_velocity", "time", "acceleration"),
    solvers={
        "initial_velocity": lambda v: 0.5 * v["acceleration"] * v["time"] ** 2,
        # Displacement formula evaluated at the unknown time, i.e. at t = 0
        "time": lambda v: v["initial_velocity"] * v["time"] + 0.5 * v["acceleration"] * v["time"] ** 2,
        "acceleration": lambda v: v["initial_velocity"] * v["time"],
    },
    description="Displacement under constant acceleration, s = v0·t + a·t²/2.",
))

OHMS_LAW = register_law(Law(
    name="ohms_law",
    title="Ohm's Law",
    quantities=("voltage", "resistance", "current"),
    solvers={
        "voltage": lambda v: v["resistance"] * v["current"],
        "resistance": lambda v: v["voltage"] / v["current"],
        "current": lambda v: v["voltage"] / v["resistance"],
    },
    description="The voltage across a conductor equals its resistance times the current, V = R·I.",
))

MASS_ENERGY_EQUIVALENCE = register_law(Law(
    name="mass_energy_equivalence",
    title="Mass-Energy Equivalence",
    quantities=("mass", "speed_of_light"),
    solvers={
        "mass": lambda v: np.float64(0.0),
        "speed_of_light": lambda v: np.float64(0.0),
    },
    complete=lambda v: v["mass"] * v["speed_of_light"] ** 2,
    description="Rest energy of a mass, E = m·c². Energy is computed only when both inputs are given.",
))

SIMPLE_HARMONIC_MOTION = register_law(Law(
    name="simple_harmonic_motion",
    title="Simple Harmonic Motion",
    quantities=("amplitude", "angular_frequency", "time", "phase"),
    solvers={
        "amplitude": lambda v: np.float64(0.0),
        "angular_frequency": lambda v: np.float64(0.0),
        "time": lambda v: v["amplitude"] * np.sin(v["angular_frequency"] * v["time"] + v["phase"]),
        "phase": lambda v: v["amplitude"] * np.sin(v["angular_frequency"] * v["time"]),
    },
    description="Displacement of a harmonic oscillator, x = A·sin(ω·t + φ).",
))

COULOMBS_LAW = register_law(Law(
    name="coulombs_law",
    title="Coulomb's Law",
    quantities=("electrostatic_force", "charge_one", "charge_two", "distance"),
    solvers={
        "electrostatic_force": lambda v: (v["charge_one"] * v["charge_two"]) / v["distance"] ** 2,
        "charge_one": lambda v: v["electrostatic_force"] * v["distance"] ** 2 / v["charge_two"],
        "charge_two": lambda v: v["electrostatic_force"] * v["distance"] ** 2 / v["charge_one"],
        "distance": lambda v: np.sqrt((v["charge_one"] * v["charge_two"]) / v["electrostatic_force"]),
    },
    description=(
        "Force between two point charges, F = q1·q2/d². The Coulomb constant is "
        "taken as 1, so charges and force are in matching units."
    ),
))

WORK_ENERGY_THEOREM = register_law(Law(
    name="work_energy_theorem",
    title="Work-Energy Theorem",
    quantities=("work", "kinetic_energy", "potential_energy"),
    solvers={
        "work": lambda v: v["kinetic_energy"] + v["potential_energy"],
        "kinetic_energy": lambda v: v["work"] - v["potential_energy"],
        "potential_energy": lambda v: v["work"] - v["kinetic_energy"],
    },
    description="Work done on a particle equals the energy it gains, W = KE + PE.",
))

IDEAL_GAS_LAW = register_law(Law(
    name="ideal_gas_law",
    title="Ideal Gas Law",
    quantities=("pressure", "volume", "number_of_moles", "gas_constant", "temperature"),
    solvers={
        "pressure": lambda v: (v["number_of_moles"] * v["gas_constant"] * v["temperature"]) / v["volume"],
        "volume": lambda v: (v["number_of_moles"] * v["gas_constant"] * v["temperature"]) / v["pressure"],
        "number_of_moles": lambda v: (v["pressure"] * v["volume"]) / (v["gas_constant"] * v["temperature"]),
        "gas_constant": lambda v: (v["pressure"] * v["volume"]) / (v["number_of_moles"] * v["temperature"]),
        "temperature": lambda v: (v["pressure"] * v["volume"]) / (v["number_of_moles"] * v["gas_constant"]),
    },
    description="Equation of state of an ideal gas, P·V = n·R·T.",
))


def newton_second_law(force: float = 0, mass: float = 0, acceleration: float = 0) -> float:
    """
    Newton's Second Law, F = m·a.

    Args:
        force: Net force on the body.
        mass: Mass of the body.
        acceleration: Acceleration of the body.

    Returns:
        The first of force, mass, acceleration left at 0, or 0 if all were given.
    """
    return NEWTON_SECOND_LAW.evaluate(force=force, mass=mass, acceleration=acceleration)


def projectile_motion(initial_velocity: float = 0, time: float = 0, acceleration: float = 0) -> float:
    """
    Displacement of a projectile under constant acceleration.

    Leaving `initial_velocity` at 0 gives a·t²/2 and leaving `acceleration` at
    0 gives v0·t. Leaving `time` at 0 evaluates the full formula at t = 0.

    Args:
        initial_velocity: Launch velocity.
        time: Time of flight.
        acceleration: Constant acceleration.

    Returns:
        Displacement, or 0 if all three were given.
    """
    return PROJECTILE_MOTION.evaluate(initial_velocity=initial_velocity, time=time, acceleration=acceleration)


def ohms_law(voltage: float = 0, resistance: float = 0, current: float = 0) -> float:
    """
    Ohm's Law, V = R·I.

    Args:
        voltage: Voltage across the conductor.
        resistance: Resistance of the conductor.
        current: Current through the conductor.

    Returns:
        The first of voltage, resistance, current left at 0, or 0 if all were given.
    """
    return OHMS_LAW.evaluate(voltage=voltage, resistance=resistance, current=current)


def mass_energy_equivalence(mass: float = 0, speed_of_light: float = 0) -> float:
    """
    Rest energy E = m·c².

    Returns 0 when either argument is 0; the energy is only computed when both
    are given.
    """
    return MASS_ENERGY_EQUIVALENCE.evaluate(mass=mass, speed_of_light=speed_of_light)


def simple_harmonic_motion(
    amplitude: float = 0,
    angular_frequency: float = 0,
    time: float = 0,
    phase: float = 0,
) -> float:
    """
    Displacement of a simple harmonic oscillator, x = A·sin(ω·t + φ).

    Returns 0 when `amplitude` or `angular_frequency` is 0, or when all four
    arguments are given. With `time` at 0 this is A·sin(φ); with `phase` at 0
    it is A·sin(ω·t).

    Args:
        amplitude: Amplitude A.
        angular_frequency: Angular frequency ω in rad/s.
        time: Time t in s.
        phase: Phase φ in rad.
    """
    return SIMPLE_HARMONIC_MOTION.evaluate(
        amplitude=amplitude, angular_frequency=angular_frequency, time=time, phase=phase
    )


def coulombs_law(
    electrostatic_force: float = 0,
    charge_one: float = 0,
    charge_two: float = 0,
    distance: float = 0,
) -> float:
    """
    Coulomb's Law, F = q1·q2/d², with the Coulomb constant taken as 1.

    Solving for `distance` returns `nan` when q1·q2/F is negative.

    Args:
        electrostatic_force: Force between the charges.
        charge_one: First charge.
        charge_two: Second charge.
        distance: Separation of the charges.

    Returns:
        The first argument left at 0, or 0 if all were given.
    """
    return COULOMBS_LAW.evaluate(
        electrostatic_force=electrostatic_force,
        charge_one=charge_one,
        charge_two=charge_two,
        distance=distance,
    )


def work_energy_theorem(work: float = 0, kinetic_energy: float = 0, potential_energy: float = 0) -> float:
    """Work-Energy Theorem, W = KE + PE."""
    return WORK_ENERGY_THEOREM.evaluate(
        work=work, kinetic_energy=kinetic_energy, potential_energy=potential_energy
    )


def ideal_gas_law(
    pressure: float = 0,
    volume: float = 0,
    number_of_moles: float = 0,
    gas_constant: float = 0,
    temperature: float = 0,
) -> float:
    """
    Ideal Gas Law, P·V = n·R·T.

    The gas constant is an argument like any other; pass
    `physics_equations.config.GAS_CONSTANT` for SI units.

    Returns:
        The first argument left at 0, or 0 if all were given.
    """
    return IDEAL_GAS_LAW.evaluate(
        pressure=pressure,
        volume=volume,
        number_of_moles=number_of_moles,
        gas_constant=gas_constant,
        temperature=temperature,
    )
