"""Tests for antsvsbees.world - Place and Hive."""

import pytest
from numpy.random import Generator

from antsvsbees.colony.ants import GrowerAnt, GuardAnt, ScubaAnt, ThrowerAnt
from antsvsbees.colony.colony import AntColony
from antsvsbees.colony.insect import Bee
from antsvsbees.simulation.config import GameConfig, WaveConfig
from antsvsbees.simulation.engine import AntGame
from antsvsbees.world.hive import Hive
from antsvsbees.world.place import Place


def _chain(length: int) -> list[Place]:
    """Places linked queen-side first: chain[0].entrance is chain[1]."""
    places = [Place(f"p{i}") for i in range(length)]
    for near, far in zip(places, places[1:]):
        near.entrance = far
        far.exit = near
    return places


class TestPlaceSlots:
    """Tests for ant slots on a place."""

    def test_add_ant_sets_place(self) -> None:
        place = Place("p")
        ant = ThrowerAnt()
        assert place.add_ant(ant)
        assert place.ant is ant
        assert ant.place is place

    def test_second_regular_ant_rejected(self) -> None:
        place = Place("p")
        place.add_ant(ThrowerAnt())
        assert not place.add_ant(GrowerAnt())

    def test_guard_stacks_on_regular_ant(self) -> None:
        place = Place("p")
        thrower, guard = ThrowerAnt(), GuardAnt()
        assert place.add_ant(thrower)
        assert place.add_ant(guard)
        assert place.ant is guard
        assert place.guarded_ant is thrower
        assert guard.guarded is thrower

    def test_guard_first_then_regular(self) -> None:
        place = Place("p")
        guard, thrower = GuardAnt(), ThrowerAnt()
        assert place.add_ant(guard)
        assert place.add_ant(thrower)
        assert place.ant is guard
        assert not place.add_ant(GuardAnt())

    def test_remove_ant_takes_guard_first(self) -> None:
        place = Place("p")
        thrower, guard = ThrowerAnt(), GuardAnt()
        place.add_ant(thrower)
        place.add_ant(guard)
        assert place.remove_ant() is guard
        assert guard.place is None
        assert place.ant is thrower
        assert place.remove_ant() is thrower
        assert place.ant is None
        assert place.remove_ant() is None

    def test_remove_insect_spares_guard(self) -> None:
        place = Place("p")
        thrower, guard = ThrowerAnt(), GuardAnt()
        place.add_ant(thrower)
        place.add_ant(guard)
        place.remove_insect(thrower)
        assert place.guard is guard
        assert place.guarded_ant is None


class TestPlaceBees:
    """Tests for bee movement and lookup."""

    def test_remove_bee_by_identity(self) -> None:
        place = Place("p")
        a, b = Bee(armor=3), Bee(armor=3)
        place.add_bee(a)
        place.add_bee(b)
        place.remove_bee(a)
        assert place.bees == [b]
        assert a.place is None

    def test_remove_all_bees(self) -> None:
        place = Place("p")
        bees = [Bee(armor=1) for _ in range(3)]
        for bee in bees:
            place.add_bee(bee)
        place.remove_all_bees()
        assert place.bees == []
        assert all(bee.place is None for bee in bees)

    def test_exit_bee_moves_toward_queen(self) -> None:
        near, far = _chain(2)
        bee = Bee(armor=1)
        far.add_bee(bee)
        far.exit_bee(bee)
        assert bee in near.bees
        assert bee.place is near
        assert far.bees == []

    def test_exit_bee_without_exit_stays(self) -> None:
        place = Place("p")
        bee = Bee(armor=1)
        place.add_bee(bee)
        place.exit_bee(bee)
        assert bee.place is place

    def test_closest_bee_prefers_oldest_arrival(self) -> None:
        place = Place("p")
        first, second = Bee(armor=1), Bee(armor=1)
        place.add_bee(first)
        place.add_bee(second)
        assert place.closest_bee(0) is first

    def test_closest_bee_walks_entrances(self) -> None:
        chain = _chain(5)
        bee = Bee(armor=1)
        chain[3].add_bee(bee)
        assert chain[0].closest_bee(3) is bee
        assert chain[0].closest_bee(2) is None

    def test_closest_bee_respects_min_distance(self) -> None:
        chain = _chain(4)
        near_bee, far_bee = Bee(armor=1), Bee(armor=1)
        chain[0].add_bee(near_bee)
        chain[2].add_bee(far_bee)
        assert chain[0].closest_bee(3, min_distance=1) is far_bee

    def test_closest_bee_stops_at_chain_end(self) -> None:
        chain = _chain(2)
        assert chain[0].closest_bee(10) is None


class TestPlaceWater:
    """Tests for flooding."""

    def test_dry_place_keeps_ants(self) -> None:
        place = Place("p")
        thrower = ThrowerAnt()
        place.add_ant(thrower)
        place.act()
        assert place.ant is thrower

    def test_water_removes_non_swimmer(self) -> None:
        place = Place("w", water=True)
        thrower = ThrowerAnt()
        place.add_ant(thrower)
        place.act()
        assert place.ant is None
        assert thrower.place is None

    def test_water_keeps_scuba(self) -> None:
        place = Place("w", water=True)
        scuba = ScubaAnt()
        place.add_ant(scuba)
        place.act()
        assert place.ant is scuba

    def test_water_always_removes_guard(self) -> None:
        place = Place("w", water=True)
        scuba, guard = ScubaAnt(), GuardAnt()
        place.add_ant(scuba)
        place.add_ant(guard)
        place.act()
        assert place.guard is None
        assert place.ant is scuba

    def test_water_removes_guard_and_non_swimmer(self) -> None:
        place = Place("w", water=True)
        place.add_ant(GrowerAnt())
        place.add_ant(GuardAnt())
        place.act()
        assert place.ant is None
        assert place.guarded_ant is None


class TestHive:
    """Tests for wave scheduling and release."""

    def test_add_wave_holds_bees(self) -> None:
        hive = Hive(bee_armor=2, bee_damage=3).add_wave(1, 4)
        assert len(hive.bees) == 4
        assert all(b.armor == 2 and b.damage == 3 for b in hive.bees)
        assert all(b.place is hive for b in hive.bees)

    def test_add_wave_same_turn_extends(self) -> None:
        hive = Hive().add_wave(2, 1).add_wave(2, 2)
        assert len(hive.waves[2]) == 3

    def test_invade_releases_only_scheduled_turn(
        self,
        wide_colony: AntColony,
        rng: Generator,
    ) -> None:
        hive = Hive().add_wave(0, 3).add_wave(4, 2)
        released = hive.invade(wide_colony, 0, rng)
        assert len(released) == 3
        assert len(hive.bees) == 2
        for bee in released:
            assert bee.place in wide_colony.bee_entrances

    def test_invade_with_no_wave(self, colony: AntColony, rng: Generator) -> None:
        hive = Hive().add_wave(3, 1)
        assert hive.invade(colony, 0, rng) == []
        assert len(hive.bees) == 1

    def test_invade_is_seed_deterministic(self) -> None:
        import numpy as np

        picks = []
        for _ in range(2):
            colony = AntColony(food=0, num_tunnels=4, tunnel_length=2)
            hive = Hive().add_wave(0, 6)
            hive.invade(colony, 0, np.random.default_rng(7))
            picks.append([len(p.bees) for p in colony.bee_entrances])
        assert picks[0] == picks[1]
        assert sum(picks[0]) == 6

    def test_wave_released_once(self, colony: AntColony, rng: Generator) -> None:
        hive = Hive().add_wave(0, 1)
        hive.invade(colony, 0, rng)
        assert hive.invade(colony, 0, rng) == []
        assert len(colony.get_all_bees()) == 1

    def test_invade_without_entrances_keeps_wave(self, rng: Generator) -> None:
        colony = AntColony(food=0, num_tunnels=2, tunnel_length=0)
        hive = Hive().add_wave(0, 2)
        assert colony.bee_entrances == []
        assert hive.invade(colony, 0, rng) == []
        assert len(hive.bees) == 2
        assert len(hive.waves[0]) == 2

    def test_turn_on_empty_board_does_not_raise(self) -> None:
        cfg = GameConfig(tunnel_length=0, waves=[WaveConfig(turn=0, bees=1)])
        game = AntGame.from_config(cfg)
        game.take_turn()
        assert game.turn == 1
        assert game.get_hive_bees_count() == 1
        assert game.game_is_won() is None

    @pytest.mark.parametrize("turn", [0, 5])
    def test_hive_bees_are_removed_on_release(
        self,
        colony: AntColony,
        rng: Generator,
        turn: int,
    ) -> None:
        hive = Hive().add_wave(turn, 2)
        hive.invade(colony, turn, rng)
        assert hive.bees == []
