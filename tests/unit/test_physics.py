"""Per-frame physics: ordering, collisions, detonation and chain reactions."""

import pytest

from game import physics
from game.constants import DEFAULT_CONFIG
from game.events import FrameTick, ScheduleLaunch, ScheduleRandomDelay, TimerFired, TimerKind
from game.explosion import Explosion
from game.geometry import Position, distance
from game.missile import launch_nuke, launch_player_missile
from game.model import Model, UpdateReport, default_bases
from game.structures import City


def _explosion(x, y, radius):
    e = Explosion(Position(x, y), DEFAULT_CONFIG.explosion_max_radius)
    e.radius = radius
    return e


def _straight_nuke(x, y):
    """Nuke falling straight down, currently at (x, y)."""
    nuke = launch_nuke(x, 0, x, DEFAULT_CONFIG.ground_y, 0.4)
    nuke.position = Position(x, y)
    return nuke


class TestCityDestruction:
    def test_explosion_destroys_only_cities_inside_radius(self):
        """A radius-20 explosion spares cities at distance 20 or more."""
        model = Model(
            cities=[City(Position(100, 115)), City(Position(100, 120)), City(Position(130, 100))],
            explosions=[_explosion(100, 100, 20.0)],
        )
        report = UpdateReport()
        physics.destroy_cities(model, report)

        assert [c.position for c in model.cities] == [Position(100, 120), Position(130, 100)]
        assert report.cities_lost == 1


class TestBaseDestruction:
    def test_base_inside_explosion_is_emptied_not_removed(self):
        model = Model(bases=default_bases(DEFAULT_CONFIG), explosions=[_explosion(40, 325, 10.0)])
        physics.destroy_bases(model, UpdateReport())

        assert len(model.bases) == 3
        assert model.bases[0].missiles_remaining == 0
        assert model.bases[1].missiles_remaining == 10
        assert model.bases[2].missiles_remaining == 10


class TestDetonation:
    def test_nuke_reaching_target_becomes_one_explosion(self, playing_engine):
        """A missile closer than 4.0 to its target is replaced by an explosion where it stood."""
        model = playing_engine.model
        nuke = launch_nuke(400, 0, 400, 330, 0.4)
        nuke.position = Position(400, 325.7)
        model.nukes = [nuke]
        score_before = model.score

        playing_engine.update(FrameTick())

        assert model.nukes == []
        assert len(model.explosions) == 1
        explosion = model.explosions[0]
        assert explosion.age == 0.0
        assert explosion.radius == 0.0
        assert explosion.position.x == pytest.approx(400.0)
        assert explosion.position.y == pytest.approx(326.1)
        assert model.score == score_before + DEFAULT_CONFIG.points_nuke_destroyed

    def test_fresh_explosion_cannot_destroy_anything_in_its_own_frame(self, playing_engine):
        model = playing_engine.model
        nuke = launch_nuke(400, 0, 400, 330, 0.4)
        nuke.position = Position(400, 325.7)
        model.nukes = [nuke]

        playing_engine.update(FrameTick())
        assert model.bases[1].missiles_remaining == 10

        # It grows over later frames and reaches the base underneath
        for _ in range(10):
            playing_engine.update(FrameTick())
        assert model.bases[1].missiles_remaining == 0

    def test_player_missile_stepping_over_target_still_detonates(self, playing_engine):
        model = playing_engine.model
        model.missiles = [launch_player_missile(Position(400, 330), Position(400, 310), 8.0)]

        playing_engine.update(FrameTick())
        playing_engine.update(FrameTick())
        assert len(model.missiles) == 1

        playing_engine.update(FrameTick())
        assert model.missiles == []
        assert len(model.explosions) == 1
        assert model.explosions[0].position == Position(400.0, 306.0)

    def test_player_detonation_scores_nothing(self, playing_engine):
        model = playing_engine.model
        missile = launch_player_missile(Position(400, 330), Position(400, 100), 8.0)
        missile.position = Position(400, 105)
        model.missiles = [missile]

        playing_engine.update(FrameTick())

        assert model.missiles == []
        assert model.score == 0


class TestChainReaction:
    def test_nuke_caught_by_explosion_scores_and_explodes(self, playing_engine):
        model = playing_engine.model
        model.explosions = [_explosion(300, 200, 0.0)]
        model.explosions[0].age = 0.3
        model.nukes = [_straight_nuke(305, 200)]

        playing_engine.update(FrameTick())

        assert model.nukes == []
        assert len(model.explosions) == 2
        assert model.score == DEFAULT_CONFIG.points_nuke_destroyed
        assert playing_engine.last_report.nukes_destroyed == 1

    def test_cascade_advances_one_generation_per_frame(self, playing_engine):
        """A nuke next to a freshly created explosion survives the frame that created it."""
        model = playing_engine.model
        seed = _explosion(200, 200, 0.0)
        seed.age = 0.1  # aged to 0.11 this frame: radius 6.6
        model.explosions = [seed]
        caught = _straight_nuke(206, 200)
        nearby = _straight_nuke(207.5, 200)
        model.nukes = [caught, nearby]

        playing_engine.update(FrameTick())

        assert model.nukes == [nearby]
        assert len(model.explosions) == 2
        new_explosion = model.explosions[1]
        assert distance(new_explosion.position, nearby.position) < 2.0
        assert model.score == DEFAULT_CONFIG.points_nuke_destroyed


class TestIdleStep:
    def test_empty_field_only_ticks_countdown(self):
        model = Model(
            bases=default_bases(DEFAULT_CONFIG),
            cities=[City(Position(130, 335))],
            launch_countdown=5,
        )
        launch = physics.step(model, DEFAULT_CONFIG, UpdateReport())

        assert launch is False
        assert model.launch_countdown == 4
        assert model.missiles == [] and model.nukes == [] and model.explosions == []
        assert [b.missiles_remaining for b in model.bases] == [10, 10, 10]
        assert len(model.cities) == 1
        assert model.score == 0


class TestLaunchCountdown:
    def test_expiry_requests_launch_and_new_delay(self, playing_engine):
        playing_engine.update(TimerFired(TimerKind.NEXT_LAUNCH_COUNTDOWN, 3))

        assert playing_engine.update(FrameTick()) == []
        assert playing_engine.update(FrameTick()) == []
        commands = playing_engine.update(FrameTick())

        assert len(commands) == 2
        launch, delay = commands
        assert isinstance(launch, ScheduleLaunch)
        assert 0 <= launch.from_x <= 800
        assert 1 <= launch.to_column <= 9
        assert delay == ScheduleRandomDelay(10, 100)
        assert playing_engine.model.launch_countdown == 0

    def test_no_requests_once_all_nukes_launched(self, playing_engine):
        model = playing_engine.model
        model.nukes = [_straight_nuke(500, 10)]  # keeps the level running
        model.nukes_left_to_launch = 0
        playing_engine.update(TimerFired(TimerKind.NEXT_LAUNCH_COUNTDOWN, 1))

        assert playing_engine.update(FrameTick()) == []

    def test_zero_countdown_fires_next_frame(self, playing_engine):
        playing_engine.update(TimerFired(TimerKind.NEXT_LAUNCH_COUNTDOWN, 0))
        assert len(playing_engine.update(FrameTick())) == 2
