"""
Configuration & Constants
=========================
This module serves as the central registry for global constants.

Why is this file needed?
------------------------
1. The Unknown Sentinel: every evaluator compares its arguments against the
   same value to decide which quantity to solve for.
2. Logging: the package logger namespace and the log line format are shared by
   `logging_config` and the command-line front end.

Exports:
    SENTINEL (float): Value meaning "not supplied, solve for it".
    SPEED_OF_LIGHT (float): Speed of light in vacuum, m/s.
    GAS_CONSTANT (float): Molar gas constant, J/(mol·K).
    NAMED_CONSTANTS (dict): Short names accepted on the command line.
"""
from typing import Dict


SENTINEL: float = 0.0

# Reference values (CODATA 2018)
SPEED_OF_LIGHT: float = 299_792_458.0  # m/s
GAS_CONSTANT: float = 8.314_462_618  # J/(mol·K)

NAMED_CONSTANTS: Dict[str, float] = {
    "c": SPEED_OF_LIGHT,
    "R": GAS_CONSTANT,
}

LOGGER_NAME: str = "physics_equations"
LOG_FORMAT: str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATE_FORMAT: str = '%H:%M:%S'
