from __future__ import annotations

import math

import pytest
from ortools.linear_solver import pywraplp

from lpmodel.core.errors import SolverError
from lpmodel.model.types import SolveStatus
from lpmodel.solvers.lp.build import build_standard_form
from lpmodel.solvers.lp.glop import GlopBackend
from tests.problem_scenario_factory import ProblemScenarioFactory


def _farm_model():
    form = build_standard_form(ProblemScenarioFactory.farm())
    return GlopBackend().build(form)


class TestGlopBackend:
    def test_build_mirrors_standard_form(self):
        model = _farm_model()

        assert model.solver.NumVariables() == 2
        assert model.solver.NumConstraints() == 3
        assert model.variables[0].Lb() == 0.0
        assert math.isinf(model.variables[0].Ub())
        assert model.constraints[1].ub() == 1200.0
        assert model.constraints[1].GetCoefficient(model.variables[0]) == 200.0

    def test_run_optimal(self):
        res = GlopBackend().run(_farm_model())

        assert res.status == SolveStatus.OPTIMAL
        assert res.objective_value == pytest.approx(3200.0)
        assert res.values == pytest.approx([4.0, 4.0])
        assert res.message is None

    def test_feasible_maps_to_optimal_with_message(self, monkeypatch):
        model = _farm_model()
        monkeypatch.setattr(model.solver, "Solve", lambda: pywraplp.Solver.FEASIBLE)

        res = GlopBackend().run(model)

        assert res.status == SolveStatus.OPTIMAL
        assert "feasible" in res.message.lower()

    @pytest.mark.parametrize(
        "status, expected, msg_substr",
        [
            (pywraplp.Solver.INFEASIBLE, "infeasible", None),
            (pywraplp.Solver.UNBOUNDED, "unbounded", None),
            (pywraplp.Solver.MODEL_INVALID, "error", "invalid"),
            (pywraplp.Solver.NOT_SOLVED, "error", "not solved"),
            (pywraplp.Solver.ABNORMAL, "error", "abnormally"),
            (999999, "error", "unknown solver status"),
        ],
    )
    def test_nonoptimal_status_mapping(self, monkeypatch, status, expected, msg_substr):
        model = _farm_model()
        monkeypatch.setattr(model.solver, "Solve", lambda: status)

        res = GlopBackend().run(model)

        assert res.status == expected
        assert res.objective_value is None
        assert res.values == []
        if msg_substr is None:
            assert res.message is None
        else:
            assert msg_substr in res.message.lower()

    def test_create_solver_none_raises(self, monkeypatch):
        import lpmodel.solvers.lp.glop as glop_mod

        def _fake_create_solver(*args, **kwargs):
            return None

        monkeypatch.setattr(
            glop_mod.pywraplp.Solver,
            "CreateSolver",
            staticmethod(_fake_create_solver),
        )

        with pytest.raises(SolverError, match="Failed to create OR-Tools GLOP solver"):
            ProblemScenarioFactory.farm().solve(GlopBackend())

    def test_time_limit_is_forwarded(self, monkeypatch):
        calls = {}
        original = pywraplp.Solver.SetTimeLimit

        def _spy(self, ms):
            calls["ms"] = ms
            return original(self, ms)

        monkeypatch.setattr(pywraplp.Solver, "SetTimeLimit", _spy)

        res = ProblemScenarioFactory.farm().solve(GlopBackend(time_limit=2.5))

        assert calls["ms"] == 2500
        assert res.status == SolveStatus.OPTIMAL
