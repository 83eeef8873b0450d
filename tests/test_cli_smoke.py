"""
Minimal smoke tests for the lift-planner CLI.

Tests basic functionality:
- App runs and shows help
- Calculator commands print resolved weights and plate loadings
- Profile is created and 1RMs are stored
- Templates apply and the plan follows 1RM changes
- Invalid input exits with code 1
"""

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from lift_planner.cli.main import app


runner = CliRunner()


@pytest.fixture
def profile_path(tmp_path, monkeypatch):
    """Profile path in a temporary home so user settings are never read."""
    monkeypatch.setenv("HOME", str(tmp_path))
    return tmp_path / "profile.json"


@pytest.fixture
def initialised(profile_path):
    """A profile created through the init command."""
    result = runner.invoke(app, ["init", "--profile-path", str(profile_path)])
    assert result.exit_code == 0
    return profile_path


def _read(path: Path) -> dict:
    return json.loads(path.read_text())


class TestCalculatorCommands:
    """weight, percent-for-reps, plates, warmup."""

    def test_app_help(self):
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "plates" in result.output

    def test_weight_from_percent(self, profile_path):
        result = runner.invoke(app, ["weight", "200", "--percent", "75"])
        assert result.exit_code == 0
        assert "150 lbs" in result.output

    def test_weight_from_reps(self, profile_path):
        # 200 × 0.86 = 172 → 172.5
        result = runner.invoke(app, ["weight", "200", "--reps", "5+"])
        assert result.exit_code == 0
        assert "172.5 lbs" in result.output

    def test_weight_needs_exactly_one_source(self, profile_path):
        result = runner.invoke(app, ["weight", "200", "--percent", "75", "--reps", "5"])
        assert result.exit_code == 1
        result = runner.invoke(app, ["weight", "200"])
        assert result.exit_code == 1

    def test_weight_verbose(self, profile_path):
        result = runner.invoke(app, ["-v", "weight", "100", "--percent", "50"])
        assert result.exit_code == 0
        assert "50 lbs" in result.output

    def test_percent_for_reps(self):
        result = runner.invoke(app, ["percent-for-reps", "20"])
        assert result.exit_code == 0
        assert "70%" in result.output

    def test_plates_default_inventory(self, profile_path):
        result = runner.invoke(app, ["plates", "225", "--profile-path", str(profile_path)])
        assert result.exit_code == 0
        assert "Success!" in result.output
        assert "2 × 45" in result.output
        assert "225.0 lbs" in result.output

    def test_plates_custom_inventory_short(self, profile_path):
        result = runner.invoke(app, [
            "plates", "60",
            "--plate", "2.5x4",
            "--profile-path", str(profile_path),
        ])
        assert result.exit_code == 0
        assert "Could not reach exact weight" in result.output
        assert "Short by: 5.00 lbs" in result.output

    def test_plates_below_bar_fails(self, profile_path):
        result = runner.invoke(app, ["plates", "40", "--profile-path", str(profile_path)])
        assert result.exit_code == 1
        assert "Error" in result.output

    def test_plates_bad_spec_fails(self, profile_path):
        result = runner.invoke(app, [
            "plates", "135", "--plate", "heavy", "--profile-path", str(profile_path),
        ])
        assert result.exit_code == 1

    def test_plates_uses_profile_bar(self, initialised):
        runner.invoke(app, ["set-bar", "35", "--profile-path", str(initialised)])
        result = runner.invoke(app, ["plates", "35", "--profile-path", str(initialised)])
        assert result.exit_code == 0
        assert "Success!" in result.output

    def test_warmup(self, profile_path):
        result = runner.invoke(app, ["warmup", "135"])
        assert result.exit_code == 0
        assert "115" in result.output


class TestProfileCommands:
    """init, set-max, feedback, maxes and inventory edits."""

    def test_init_creates_profile(self, initialised):
        data = _read(initialised)
        assert data["barbellWeight"] == 45
        assert data["availablePlates"][0] == {"weight": 45.0, "quantity": 8}
        assert data["oneRepMaxes"] == {}

    def test_init_force_overwrites(self, initialised):
        result = runner.invoke(app, ["init", "--force", "--bar", "35", "--profile-path", str(initialised)])
        assert result.exit_code == 0
        assert _read(initialised)["barbellWeight"] == 35

    def test_commands_need_profile(self, profile_path):
        result = runner.invoke(app, ["maxes", "--profile-path", str(profile_path)])
        assert result.exit_code == 1
        assert "Error" in result.output

    def test_undecodable_profile(self, profile_path):
        profile_path.write_bytes(b'{"oneRepMaxes": {"\xff\xfe": 100}}')
        result = runner.invoke(app, ["maxes", "--profile-path", str(profile_path)])
        assert result.exit_code == 1
        assert "Error" in result.output
        assert not isinstance(result.exception, UnicodeDecodeError)

    def test_set_max(self, initialised):
        result = runner.invoke(app, ["set-max", "Bench Press", "200", "--profile-path", str(initialised)])
        assert result.exit_code == 0
        assert _read(initialised)["oneRepMaxes"] == {"Bench Press": 200.0}

        result = runner.invoke(app, ["maxes", "--profile-path", str(initialised)])
        assert result.exit_code == 0
        assert "200" in result.output

    def test_set_max_step_from_default(self, initialised):
        result = runner.invoke(app, ["set-max", "Squat", "--up", "--profile-path", str(initialised)])
        assert result.exit_code == 0
        assert _read(initialised)["oneRepMaxes"] == {"Squat": 102.5}

    def test_set_max_needs_one_value(self, initialised):
        result = runner.invoke(app, ["set-max", "Squat", "--profile-path", str(initialised)])
        assert result.exit_code == 1
        result = runner.invoke(app, ["set-max", "Squat", "200", "--down", "--profile-path", str(initialised)])
        assert result.exit_code == 1

    def test_feedback_adjusts_max(self, initialised):
        runner.invoke(app, ["set-max", "Bench Press", "200", "--profile-path", str(initialised)])
        result = runner.invoke(app, ["feedback", "bench press", "easy", "--profile-path", str(initialised)])
        assert result.exit_code == 0
        assert _read(initialised)["oneRepMaxes"] == {"Bench Press": 210.0}

    def test_feedback_unknown_rating(self, initialised):
        result = runner.invoke(app, ["feedback", "Squat", "brutal", "--profile-path", str(initialised)])
        assert result.exit_code == 1

    def test_plate_add_and_remove(self, initialised):
        result = runner.invoke(app, ["plate-add", "1.25", "--count", "4", "--profile-path", str(initialised)])
        assert result.exit_code == 0
        assert {"weight": 1.25, "quantity": 4} in _read(initialised)["availablePlates"]

        result = runner.invoke(app, ["plate-remove", "35", "--profile-path", str(initialised)])
        assert result.exit_code == 0
        weights = [p["weight"] for p in _read(initialised)["availablePlates"]]
        assert 35 not in weights

        result = runner.invoke(app, ["plate-remove", "100", "--profile-path", str(initialised)])
        assert result.exit_code == 1

    def test_plate_remove_negative_count(self, initialised):
        result = runner.invoke(app, ["plate-remove", "45", "--count=-4", "--profile-path", str(initialised)])
        assert result.exit_code == 1
        assert "Error" in result.output
        assert _read(initialised)["availablePlates"][0] == {"weight": 45.0, "quantity": 8}

    def test_inventory(self, initialised):
        result = runner.invoke(app, ["inventory", "--profile-path", str(initialised)])
        assert result.exit_code == 0
        assert "Barbell: 45 lbs" in result.output


class TestProgramCommands:
    """templates, apply-template, plan, validate-templates."""

    def test_templates(self):
        result = runner.invoke(app, ["templates"])
        assert result.exit_code == 0
        assert "Program Templates" in result.output

    def test_template_show(self, profile_path):
        result = runner.invoke(app, ["template-show", "wendler_531", "--profile-path", str(profile_path)])
        assert result.exit_code == 0
        assert "5/3/1 (Week 1)" in result.output

    def test_unknown_template(self, initialised):
        result = runner.invoke(app, ["apply-template", "nope", "--profile-path", str(initialised)])
        assert result.exit_code == 1

    def test_apply_template_and_recalculate(self, initialised):
        runner.invoke(app, ["set-max", "Deadlift", "300", "--profile-path", str(initialised)])
        result = runner.invoke(app, ["apply-template", "wendler_531", "--profile-path", str(initialised)])
        assert result.exit_code == 0

        data = _read(initialised)
        assert data["programId"] == "wendler_531"
        plan = data["workoutPlan"]
        assert [s["weight"] for s in plan["day_2"]["exercises"][0]["sets"]] == [195.0, 225.0, 255.0]
        assert [s["weight"] for s in plan["day_3"]["exercises"][0]["sets"]] == [65.0, 75.0, 85.0]

        result = runner.invoke(app, ["set-max", "Bench Press", "200", "--profile-path", str(initialised)])
        assert result.exit_code == 0
        plan = _read(initialised)["workoutPlan"]
        bench = plan["day_3"]["exercises"][0]
        assert bench["oneRepMax"] == 200.0
        assert [s["weight"] for s in bench["sets"]] == [130.0, 150.0, 170.0]
        assert [s["reps"] for s in bench["sets"]] == [5, 5, "5+"]

    def test_plan(self, initialised):
        runner.invoke(app, ["apply-template", "strength_basics", "--profile-path", str(initialised)])
        result = runner.invoke(app, ["plan", "--profile-path", str(initialised)])
        assert result.exit_code == 0
        assert "Workout A" in result.output

    def test_plan_empty(self, initialised):
        result = runner.invoke(app, ["plan", "--profile-path", str(initialised)])
        assert result.exit_code == 0
        assert "No workout plan yet" in result.output

    def test_validate_bundled_templates(self):
        result = runner.invoke(app, ["validate-templates"])
        assert result.exit_code == 0
        assert "validated successfully" in result.output

    def test_validate_reports_unknown_lift(self, tmp_path):
        path = tmp_path / "catalog.json"
        path.write_text(json.dumps({
            "lifts": {"squat": {"name": "Squat"}},
            "programs": {"p": {"name": "P", "day_1": {"curls": {"reps": [10], "percentages": [50]}}}},
        }))
        result = runner.invoke(app, ["validate-templates", str(path)])
        assert result.exit_code == 1
        assert "curls" in result.output
