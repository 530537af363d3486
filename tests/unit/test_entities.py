"""Geometry, missile, explosion and installation behaviour."""

import pytest

from game.constants import DEFAULT_CONFIG
from game.explosion import Explosion, explosion_size, inside_any
from game.geometry import Position, direction, distance
from game.missile import MissileCategory, launch_nuke, launch_player_missile
from game.model import column_to_x
from game.structures import Base, base_caption


class TestGeometry:
    def test_distance(self):
        assert distance(Position(0, 0), Position(3, 4)) == pytest.approx(5.0)

    def test_direction_is_unit_length(self):
        d = direction(Position(30, -40))
        assert d.x == pytest.approx(0.6)
        assert d.y == pytest.approx(-0.8)

    def test_direction_of_zero_vector_is_zero(self):
        assert direction(Position(0, 0)) == Position(0.0, 0.0)


class TestMissile:
    def test_player_missile_velocity(self):
        m = launch_player_missile(Position(400, 330), Position(400, 100), 8.0)
        assert m.category == MissileCategory.PLAYER
        assert m.velocity.x == pytest.approx(0.0)
        assert m.velocity.y == pytest.approx(-8.0)

    def test_constant_velocity_motion(self):
        m = launch_player_missile(Position(0, 0), Position(300, 400), 5.0)
        m.update()
        m.update()
        assert m.position.x == pytest.approx(6.0)
        assert m.position.y == pytest.approx(8.0)
        assert m.launch_point == Position(0, 0)

    def test_nuke_starts_on_top_edge(self):
        nuke = launch_nuke(100, 0, 400, 330, 0.4)
        assert nuke.is_enemy
        assert nuke.position == Position(100.0, 0.0)
        assert nuke.velocity.length() == pytest.approx(0.4)

    def test_detonates_inside_distance(self):
        m = launch_player_missile(Position(0, 0), Position(0, 10), 1.0)
        assert not m.should_detonate(4.0)
        m.position = Position(0, 6.5)
        assert m.should_detonate(4.0)

    def test_detonates_once_past_target(self):
        m = launch_player_missile(Position(0, 0), Position(0, 10), 8.0)
        m.position = Position(0, 14)
        assert m.distance_to_target() == pytest.approx(4.0)
        assert m.should_detonate(4.0)

    def test_click_on_launch_point_detonates_immediately(self):
        m = launch_player_missile(Position(40, 330), Position(40, 330), 8.0)
        assert m.should_detonate(4.0)


class TestExplosion:
    @pytest.mark.parametrize("age,size", [(0.0, 0.0), (0.25, 0.5), (0.5, 1.0), (0.75, 0.5), (1.0, 0.0)])
    def test_triangular_size(self, age, size):
        assert explosion_size(age) == pytest.approx(size)

    def test_radius_peaks_at_half_life(self):
        e = Explosion(Position(0, 0), 30.0)
        assert e.radius == 0.0
        for _ in range(50):
            e.update(0.01)
        assert e.radius == pytest.approx(30.0)

    def test_expires_after_lifetime(self):
        e = Explosion(Position(0, 0), 30.0)
        for _ in range(99):
            e.update(0.01)
        assert not e.expired
        assert 0.0 <= e.age <= 1.0
        e.update(0.01)
        e.update(0.01)
        assert e.expired

    def test_contains_is_strict(self):
        e = Explosion(Position(100, 100), 30.0)
        e.radius = 20.0
        assert e.contains(Position(100, 119.9))
        assert not e.contains(Position(100, 120))
        assert inside_any(Position(110, 100), [e])
        assert not inside_any(Position(110, 100), [])


class TestInstallations:
    @pytest.mark.parametrize("count,caption", [(0, "OUT"), (1, "LOW"), (3, "LOW"), (4, None), (10, None)])
    def test_base_caption(self, count, caption):
        assert base_caption(count) == caption

    def test_take_missile_never_goes_negative(self):
        base = Base(id=0, position=Position(40, 330), missiles_remaining=1)
        assert base.take_missile()
        assert not base.take_missile()
        assert base.missiles_remaining == 0
        assert base.caption == "OUT"

    def test_destroyed_base_keeps_its_position(self):
        base = Base(id=0, position=Position(40, 330), missiles_remaining=7)
        base.destroy()
        assert base.missiles_remaining == 0
        assert base.position == Position(40, 330)


class TestTargetColumns:
    def test_columns_map_to_slot_table(self):
        assert column_to_x(1, DEFAULT_CONFIG) == 40.0
        assert column_to_x(5, DEFAULT_CONFIG) == 400.0
        assert column_to_x(9, DEFAULT_CONFIG) == 760.0

    def test_columns_outside_table_use_even_spacing(self):
        assert column_to_x(10, DEFAULT_CONFIG) == pytest.approx(800.0)
        assert column_to_x(0, DEFAULT_CONFIG) == pytest.approx(0.0)
