import numpy as np
import pytest

from simulation import ParticleField

SIZE = (800, 600)


def make_field(**overrides):
    params = {'seed': 123, 'particles_per_click': 3, 'min_points': 4, 'max_points': 6}
    params.update(overrides)
    return ParticleField(params, *SIZE)


class CountingTarget:
    def __init__(self):
        self.count = 0

    def draw_triangle_fan(self, points, colors):
        self.count += 1


def test_spawn_creates_burst_at_click():
    field = make_field()
    born = field.spawn((400, 300))
    assert len(born) == 3
    assert len(field) == 3
    assert field.total_spawned == 3
    for p in born:
        assert p.center.tolist() == [0.0, 0.0]
        assert 4 <= p.num_points <= 6


def test_each_particle_gets_its_own_generator():
    field = make_field()
    a, b, c = field.spawn((100, 100))
    assert a.rng is not b.rng
    assert (a.vx, a.vy) != (b.vx, b.vy)


def test_same_seed_reproduces_particles():
    first = make_field().spawn((250, 120))
    second = make_field().spawn((250, 120))
    for a, b in zip(first, second):
        assert a.num_points == b.num_points
        assert np.array_equal(a.points.to_array(), b.points.to_array())
        assert a.outer_color == b.outer_color


def test_step_updates_and_removes_dead():
    field = make_field(ttl=0.1)
    field.spawn((400, 300))
    field.step(0.05)
    assert len(field) == 3
    field.step(0.06)
    assert len(field) == 0
    assert field.total_spawned == 3


def test_step_keeps_creation_order():
    field = make_field()
    first = field.spawn((10, 10))
    second = field.spawn((700, 500))
    field.step(0.01)
    assert field.particles == first + second


def test_negative_dt_rejected():
    field = make_field()
    with pytest.raises(ValueError):
        field.step(-0.1)


def test_zero_dt_leaves_particles_in_place():
    field = make_field()
    field.spawn((400, 300))
    before = [p.points.to_array() for p in field.particles]
    field.step(0.0)
    for p, points in zip(field.particles, before):
        # Only the per-frame shrink applies.
        assert np.allclose(p.points.to_array(), points * p.scale_factor)


@pytest.mark.parametrize("low, high", [(2, 5), (6, 4)])
def test_invalid_point_range(low, high):
    with pytest.raises(ValueError):
        make_field(min_points=low, max_points=high)


def test_draw_draws_every_particle():
    field = make_field()
    field.spawn((400, 300))
    field.spawn((200, 100))
    target = CountingTarget()
    field.draw(target)
    assert target.count == 6
