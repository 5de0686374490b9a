import pytest

from lpmodel.core.errors import SolverError
from lpmodel.solvers.lp.glop import GlopBackend
from lpmodel.solvers.lp.highs import HighsBackend
from lpmodel.solvers.lp.registry import available_backends, default_backend, get_backend


class TestRegistry:
    def test_available_backends(self):
        assert available_backends() == ["glop", "highs"]

    def test_default_is_glop(self):
        backend = get_backend()
        assert isinstance(backend, GlopBackend)
        assert backend.time_limit is None

    def test_env_selects_backend_and_time_limit(self, monkeypatch):
        monkeypatch.setenv("LPMODEL_BACKEND", "HiGHS")
        monkeypatch.setenv("LPMODEL_TIME_LIMIT", "1.5")

        backend = get_backend()

        assert isinstance(backend, HighsBackend)
        assert backend.time_limit == 1.5

    def test_explicit_arguments_win_over_env(self, monkeypatch):
        monkeypatch.setenv("LPMODEL_BACKEND", "highs")
        monkeypatch.setenv("LPMODEL_TIME_LIMIT", "1.5")

        backend = get_backend("glop", time_limit=9)

        assert isinstance(backend, GlopBackend)
        assert backend.time_limit == 9

    def test_unknown_backend_raises(self):
        with pytest.raises(SolverError, match="Unknown LP backend 'gurobi'. Available: glop, highs"):
            get_backend("gurobi")

    @pytest.mark.parametrize("raw", ["abc", "-3"])
    def test_bad_env_time_limit_raises_solver_error(self, monkeypatch, raw):
        monkeypatch.setenv("LPMODEL_TIME_LIMIT", raw)

        with pytest.raises(SolverError, match="Invalid solver configuration"):
            get_backend("glop")

    def test_explicit_arguments_skip_env(self, monkeypatch):
        monkeypatch.setenv("LPMODEL_TIME_LIMIT", "abc")

        backend = get_backend("highs", time_limit=2)

        assert isinstance(backend, HighsBackend)
        assert backend.time_limit == 2

    def test_default_backend_reads_env(self, monkeypatch):
        monkeypatch.setenv("LPMODEL_BACKEND", "highs")
        assert default_backend() == "highs"
