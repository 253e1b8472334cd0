"""Integration tests for the fixed scenario runner."""

import pytest

from buildsim.core.exceptions import ScenarioFailure
from buildsim import verification


class TestScenarioRunner:
    """Tests for buildsim.verification."""

    def test_all_scenarios_pass(self, capsys):
        results = verification.run_scenarios()
        assert list(results) == list(verification.SCENARIOS)
        assert all(results.values())

        out = capsys.readouterr().out
        assert "[PASS] BuildingTest.EfficiencyCap" in out
        assert "[FAIL]" not in out

    def test_main_exit_code(self):
        assert verification.main() == 0

    def test_failure_reported(self, monkeypatch, capsys):
        def broken():
            verification.check_equal(1, 2, "value")

        monkeypatch.setitem(verification.SCENARIOS, "Broken", broken)
        results = verification.run_scenarios()

        assert results["Broken"] is False
        assert verification.main() == 1
        assert "[FAIL] BuildingTest.Broken: value: expected 2, got 1" in capsys.readouterr().out

    def test_check_true(self):
        with pytest.raises(ScenarioFailure, match="nope"):
            verification.check_true(False, "nope")
