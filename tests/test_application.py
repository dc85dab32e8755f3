import numpy as np

from boids import Flock
from config import boids as config
from core import Application


def test_runs_requested_frames(capsys):
    app = Application(settings={"count": 8}, seed=3)
    app.run(frames=5)

    assert app.frame == 5
    assert not app.running
    out = capsys.readouterr().out
    assert "[App] Initialized 8 boids" in out
    assert "[App] Shutdown complete" in out


def test_reports_status_lines(capsys):
    app = Application(settings={"count": 4}, seed=3)
    app.report_every = 2
    app.run(frames=4)
    out = capsys.readouterr().out
    assert out.count("Polarization:") == 2


def test_settings_reach_the_flock():
    app = Application(settings={"count": 3, "sphere_radius": 20.0, "separation_weight": 4.0}, seed=1)
    assert app.flock.num_boids == 3
    assert app.flock.radius == 20.0
    assert app.flock.separation_weight == 4.0


def test_dt_is_capped():
    app = Application(settings={"count": 6}, seed=9)
    reference = Flock.from_config({**config.BOIDS, "count": 6}, seed=9)

    app._update(10.0)
    reference.update(config.SIMULATION["max_dt"])

    np.testing.assert_array_equal(app.flock.positions, reference.positions)
