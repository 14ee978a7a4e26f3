import json

import pytest

from main import run
from simulation import ParticleField


class ScriptedVisualizer:
    """Stands in for the pygame window: fixed frame times, scripted clicks."""
    def __init__(self, frames_open, clicks=None):
        self.frames_open = frames_open
        self.clicks = clicks or {}
        self.calls = []
        self.frame = 0

    def tick(self):
        self.calls.append('tick')
        return 0.016

    def handle_input(self, field):
        self.calls.append('input')
        if self.frame >= self.frames_open:
            return False
        if self.frame in self.clicks:
            field.spawn(self.clicks[self.frame])
        return True

    def draw(self, field):
        self.calls.append('draw')
        self.frame += 1


def make_field():
    return ParticleField({'seed': 1, 'particles_per_click': 2}, 640, 480)


def test_loop_runs_until_closed():
    vis = ScriptedVisualizer(frames_open=3)
    frames = run(vis, make_field(), {})
    assert frames == 3
    assert vis.calls == ['tick', 'input', 'draw'] * 3 + ['tick', 'input']


def test_loop_stops_at_max_frames():
    vis = ScriptedVisualizer(frames_open=100)
    assert run(vis, make_field(), {'max_frames': 5}) == 5


def test_loop_spawns_and_expires_particles():
    field = ParticleField({'seed': 1, 'particles_per_click': 2, 'ttl': 0.05}, 640, 480)
    vis = ScriptedVisualizer(frames_open=10, clicks={0: (320, 240)})
    run(vis, field, {'log_throttle_steps': 2})
    assert field.total_spawned == 2
    assert len(field) == 0


def test_zero_log_throttle_disables_periodic_logging():
    vis = ScriptedVisualizer(frames_open=4)
    assert run(vis, make_field(), {'log_throttle_steps': 0}) == 4


class FailingVisualizer:
    instances = []

    def __init__(self, vis_params):
        self.width, self.height = 640, 480
        self.closed = False
        FailingVisualizer.instances.append(self)

    def tick(self):
        return 0.016

    def handle_input(self, field):
        raise RuntimeError("display lost")

    def close(self):
        self.closed = True


def test_window_closed_when_loop_raises(tmp_path, monkeypatch):
    import main
    import visualization

    (tmp_path / "config.json").write_text(json.dumps({"run_control": {"max_frames": 10}}))
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(main, "setup_logging", lambda config: None)
    monkeypatch.setattr(visualization, "Visualizer", FailingVisualizer)
    FailingVisualizer.instances.clear()

    with pytest.raises(RuntimeError):
        main.main()
    assert len(FailingVisualizer.instances) == 1
    assert FailingVisualizer.instances[0].closed
