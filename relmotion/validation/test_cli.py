"""
Tests for the interactive demo (input() is scripted; EOF selects defaults).
"""
import math

import numpy as np
import pytest

from relmotion import cli, main as main_module
from relmotion.config import settings
from relmotion.physics.state import LVLH, RIC, OrbitalElements, RelativeState


def _feed(monkeypatch, answers):
    it = iter(answers)

    def fake_input(prompt=""):
        try:
            return next(it)
        except StopIteration:
            raise EOFError

    monkeypatch.setattr("builtins.input", fake_input)


@pytest.fixture(autouse=True)
def _restore_delta_t(monkeypatch):
    # ask_interval writes the chosen interval back into settings
    monkeypatch.setattr(settings, "DEFAULT_DELTA_T", settings.DEFAULT_DELTA_T)


class TestPrompts:

    def test_get_float_retries(self, monkeypatch, capsys):
        _feed(monkeypatch, ["abc", "2.5"])
        assert cli.get_float("x: ") == 2.5
        assert "valid number" in capsys.readouterr().out

    def test_get_float_blank_uses_default(self, monkeypatch):
        _feed(monkeypatch, [""])
        assert cli.get_float("x: ", default=7) == 7.0

    def test_get_vector(self, monkeypatch):
        _feed(monkeypatch, ["1 2", "1, 2 3"])
        np.testing.assert_array_equal(cli.get_vector("v: ", (0, 0, 0)), [1.0, 2.0, 3.0])

    def test_choose_frame(self, monkeypatch):
        _feed(monkeypatch, ["2"])
        assert cli.choose_frame() == LVLH

    def test_create_elements_rejects_bad_eccentricity(self, monkeypatch, capsys):
        _feed(monkeypatch, ["1.5", "0.2", "-1", "5e10"])
        elements = cli.create_elements()
        assert elements.eccentricity == 0.2
        assert elements.angular_momentum == 5e10
        # periapsis radius h^2 / (mu (1 + e)) is about 5200 km
        assert "below the surface" in capsys.readouterr().out

    def test_ask_interval_clamps(self, monkeypatch):
        _feed(monkeypatch, ["90", "1e9"])
        theta0, dt = cli.ask_interval()
        assert theta0 == pytest.approx(math.pi / 2)
        assert dt == settings.DELTA_T_MAX
        assert settings.DEFAULT_DELTA_T == settings.DELTA_T_MAX


class TestRunCli:

    def test_defaults_on_eof(self, monkeypatch):
        _feed(monkeypatch, [])
        elements, initial, frame, theta0, delta_t, make_plot = cli.run_cli()
        assert elements.eccentricity == settings.DEFAULT_ECCENTRICITY
        assert elements.angular_momentum == settings.DEFAULT_ANGULAR_MOMENTUM
        assert frame == RIC
        np.testing.assert_array_equal(initial.position, settings.DEFAULT_POSITION)
        np.testing.assert_array_equal(initial.velocity, settings.DEFAULT_VELOCITY)
        assert theta0 == 0.0
        assert delta_t == 1000.0
        assert make_plot is False


class TestMain:

    def test_demo_run(self, monkeypatch, capsys):
        _feed(monkeypatch, [])
        main_module.main()
        out = capsys.readouterr().out
        assert "FINAL STATE:" in out
        assert "Propagation complete!" in out

    def test_circular_run_with_plot(self, monkeypatch, tmp_path, capsys):
        from relmotion.visualization import plots

        monkeypatch.setattr(plots, "OUTPUT_DIR", str(tmp_path))
        elements = OrbitalElements(eccentricity=0.0, angular_momentum=5e10, gravitational_parameter=settings.GM)
        initial = RelativeState(position=[100.0, 0.0, 0.0], velocity=[0.0, 0.1, 0.0])
        monkeypatch.setattr(main_module, "run_cli", lambda: (elements, initial, RIC, 0.0, 600.0, True))

        main_module.main()
        assert "Propagation complete!" in capsys.readouterr().out
        assert (tmp_path / "relative_trajectory.png").exists()

    def test_invalid_orbit_exits(self, monkeypatch, caplog):
        elements = OrbitalElements(eccentricity=1.0, angular_momentum=5e10, gravitational_parameter=settings.GM)
        monkeypatch.setattr(
            main_module, "run_cli", lambda: (elements, RelativeState.zero(), RIC, 0.0, 100.0, False)
        )
        with pytest.raises(SystemExit) as exc:
            main_module.main()
        assert exc.value.code == 1
        assert "Eccentricity must be in range [0, 1)" in caplog.text
