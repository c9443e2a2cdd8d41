import logging
import math

import pytest

from physics_equations import (
    AmbiguousUnknownError,
    FormulaError,
    Law,
    NothingToSolveError,
    UnknownLawError,
    UnknownPolicy,
    UnknownQuantityError,
    coulombs_law,
    evaluate,
    get_law,
    list_laws,
    ohms_law,
    register_law,
    solve,
)
from physics_equations import laws as laws_module
from physics_equations.registry import _REGISTRY

ALL_LAWS = [
    "newton_second_law",
    "projectile_motion",
    "ohms_law",
    "mass_energy_equivalence",
    "simple_harmonic_motion",
    "coulombs_law",
    "work_energy_theorem",
    "ideal_gas_law",
]


@pytest.fixture
def scratch_law():
    law = Law(
        name="scratch_law",
        title="Scratch",
        quantities=("a", "b"),
        solvers={"a": lambda v: v["b"] * 2, "b": lambda v: v["a"] / 2},
    )
    register_law(law)
    yield law
    _REGISTRY.pop(law.name, None)


# ─────────────────────────────────────────────────────────────────────
# Lookup
# ─────────────────────────────────────────────────────────────────────

class TestLookup:

    def test_every_law_is_registered_in_order(self):
        assert list_laws()[:len(ALL_LAWS)] == ALL_LAWS

    @pytest.mark.parametrize("name", ALL_LAWS)
    def test_registry_name_matches_evaluator(self, name):
        assert callable(getattr(laws_module, name))
        assert get_law(name).name == name

    def test_unknown_law(self):
        with pytest.raises(UnknownLawError) as excinfo:
            get_law("hookes_law")
        assert isinstance(excinfo.value, KeyError)
        assert str(excinfo.value) == "No law registered for key 'hookes_law'"

    def test_duplicate_registration_rejected(self, scratch_law):
        with pytest.raises(ValueError):
            register_law(scratch_law)

    def test_law_requires_one_solver_per_quantity(self):
        with pytest.raises(ValueError, match="missing"):
            Law(name="broken", title="Broken", quantities=("a", "b"), solvers={"a": lambda v: v["b"]})


# ─────────────────────────────────────────────────────────────────────
# evaluate: sentinel convention over a mapping
# ─────────────────────────────────────────────────────────────────────

class TestEvaluate:

    def test_matches_evaluator(self):
        inputs = {"charge_one": 2, "charge_two": 3, "distance": 4}
        assert evaluate("coulombs_law", inputs) == coulombs_law(**inputs) == 0.375

    def test_zero_is_unknown(self):
        assert evaluate("ohms_law", {"voltage": 0, "resistance": 0, "current": 2}) == 0.0

    def test_empty_mapping(self):
        assert evaluate("newton_second_law") == 0.0

    def test_unknown_quantity(self):
        with pytest.raises(UnknownQuantityError) as excinfo:
            evaluate("ohms_law", {"voltage": 1, "power": 2})
        assert excinfo.value.names == ("power",)

    def test_non_finite_results_propagate(self):
        assert evaluate("ohms_law", {"voltage": 5}) == math.inf


# ─────────────────────────────────────────────────────────────────────
# solve: explicit absence
# ─────────────────────────────────────────────────────────────────────

class TestSolveStrict:

    def test_missing_key_is_solved_for(self):
        assert solve("newton_second_law", {"force": 10, "mass": 2}) == 5.0

    def test_none_is_solved_for(self):
        assert solve("ohms_law", {"voltage": None, "resistance": 4, "current": 3}) == 12.0

    def test_zero_is_a_value(self):
        # the sentinel API would solve for voltage here
        assert solve("ohms_law", {"voltage": 0, "resistance": 4}) == 0.0
        assert ohms_law(voltage=0, resistance=4) == 0.0
        assert solve("work_energy_theorem", {"work": 0, "kinetic_energy": 5}) == -5.0
        assert evaluate("work_energy_theorem", {"work": 0, "kinetic_energy": 5}) == 5.0

    def test_zero_denominator_gives_inf(self):
        assert solve("ohms_law", {"voltage": 5, "resistance": 0}) == math.inf

    def test_nothing_to_solve(self):
        with pytest.raises(NothingToSolveError):
            solve("newton_second_law", {"force": 10, "mass": 2, "acceleration": 5})

    def test_complete_law_is_evaluated(self):
        assert solve("mass_energy_equivalence", {"mass": 5, "speed_of_light": 3e8}) == pytest.approx(4.5e17)

    def test_degenerate_directions_are_kept(self):
        assert solve("mass_energy_equivalence", {"speed_of_light": 3e8}) == 0.0
        assert solve("simple_harmonic_motion", {"angular_frequency": 2, "time": 1, "phase": 0.5}) == 0.0

    def test_ambiguous(self):
        with pytest.raises(AmbiguousUnknownError) as excinfo:
            solve("ideal_gas_law", {"pressure": 1.0, "volume": 2.0, "number_of_moles": 1.0})
        assert excinfo.value.unknowns == ("gas_constant", "temperature")
        assert isinstance(excinfo.value, FormulaError)

    def test_unknown_quantity(self):
        with pytest.raises(UnknownQuantityError):
            solve("ohms_law", {"voltage": 1, "power": 2})

    def test_policy_accepts_string(self):
        assert solve("ohms_law", {"voltage": 12, "resistance": 4}, policy="strict") == 3.0

    def test_custom_law(self, scratch_law):
        assert solve("scratch_law", {"b": 4}) == 8.0


class TestSolveFirstInOrder:

    def test_first_absent_wins(self, caplog):
        with caplog.at_level(logging.WARNING, logger="physics_equations"):
            result = solve("ohms_law", {"current": 2}, policy=UnknownPolicy.FIRST_IN_ORDER)
        assert result == 0.0
        assert "solving for 'voltage'" in caplog.text

    def test_matches_sentinel_api_without_literal_zeros(self):
        inputs = {"charge_one": 2.0, "charge_two": 3.0}
        assert solve("coulombs_law", inputs, policy=UnknownPolicy.FIRST_IN_ORDER) == coulombs_law(**inputs)

    def test_nothing_absent_is_degenerate(self):
        assert solve("ohms_law", {"voltage": 12, "resistance": 4, "current": 3},
                     policy=UnknownPolicy.FIRST_IN_ORDER) == 0.0

    def test_pivot_is_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="physics_equations.registry"):
            solve("ohms_law", {"voltage": 12, "resistance": 4}, policy=UnknownPolicy.FIRST_IN_ORDER)
        assert "Solving 'ohms_law' for 'current'" in caplog.text


def test_evaluators_do_not_log(caplog):
    with caplog.at_level(logging.DEBUG, logger="physics_equations"):
        ohms_law(voltage=12, resistance=4)
        coulombs_law(10, 2, 3, 0)
    assert caplog.records == []
