"""Tests for ranger_rotation.domain.configuration module."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from ranger_rotation.domain.configuration import Configuration
from ranger_rotation.domain.errors import InvariantViolationError
from ranger_rotation.domain.moves import build_move_catalog
from ranger_rotation.domain.ranger import Station

CD_SOLUTION = (("A", "C"), ("B", "D"), ("A", "D"), ("C", "D"), ("A", "B"), ("B", "C"))


def _seed() -> Configuration:
    return Configuration.seed("ABCD", ("A", "B"))


def _reachable(config: Configuration, depth: int) -> Iterator[Configuration]:
    """Yield every configuration reachable in at most *depth* legal swaps."""
    yield config
    if depth == 0:
        return
    for id1, id2 in build_move_catalog(config.rangers):
        child = config.clone()
        if child.attempt_swap(id1, id2):
            yield from _reachable(child, depth - 1)


class TestSeeding:
    def test_seed_places_rangers(self) -> None:
        config = _seed()
        assert [r.ranger_id for r in config.residents(Station.NORTH)] == ["A", "B"]
        assert [r.ranger_id for r in config.residents(Station.SOUTH)] == ["C", "D"]
        assert config.swap_history == ()

    def test_every_pair_registered_at_zero(self) -> None:
        config = _seed()
        for ranger in config.rangers.values():
            expected = {rid: 0 for rid in "ABCD" if rid != ranger.ranger_id}
            assert ranger.co_location == expected

    @pytest.mark.parametrize("initial_north", [("A", "Z"), ("A",), ("A", "B", "C"), ("A", "A")])
    def test_seed_rejects_bad_north_pair(self, initial_north: tuple[str, ...]) -> None:
        with pytest.raises(InvariantViolationError):
            Configuration.seed("ABCD", initial_north)

    def test_duplicate_ranger_raises(self) -> None:
        config = _seed()
        with pytest.raises(InvariantViolationError):
            config.add_ranger("A", Station.SOUTH)

    def test_opening_swap_is_legal_and_not_a_goal(self) -> None:
        config = _seed()
        assert config.attempt_swap("A", "C")
        assert not config.is_goal_state(("A", "B"))
        assert config.swap_history == (("A", "C"),)


class TestAttemptSwap:
    def test_counters_credit_pre_swap_stations(self) -> None:
        config = _seed()
        assert config.attempt_swap("A", "C")
        a, b, c, d = (config.rangers[rid] for rid in "ABCD")
        assert (a.north_visits, a.south_visits) == (1, 0)
        assert (b.north_visits, b.south_visits) == (1, 0)
        assert (c.north_visits, c.south_visits) == (0, 1)
        assert (d.north_visits, d.south_visits) == (0, 1)
        assert a.co_location == {"B": 1, "C": 0, "D": 0}
        assert c.co_location == {"A": 0, "B": 0, "D": 1}
        assert a.station is Station.SOUTH and c.station is Station.NORTH
        assert (a.moved_count, b.moved_count, c.moved_count, d.moved_count) == (1, 0, 1, 0)

    @pytest.mark.parametrize("pair", [("A", "B"), ("C", "D"), ("A", "A"), ("D", "D")])
    def test_same_station_swap_from_seed_fails_without_mutation(
        self, pair: tuple[str, str]
    ) -> None:
        config = _seed()
        before = config.clone()
        assert not config.attempt_swap(*pair)
        assert config == before

    # After the opening, B and C share North and A and D share South.
    @pytest.mark.parametrize("pair", [("B", "C"), ("A", "D"), ("A", "A"), ("C", "C")])
    def test_same_station_swap_fails_without_mutation(self, pair: tuple[str, str]) -> None:
        config = _seed()
        config.attempt_swap("A", "C")
        before = config.clone()
        assert not config.attempt_swap(*pair)
        assert config == before

    def test_unknown_ranger_raises(self) -> None:
        with pytest.raises(InvariantViolationError):
            _seed().attempt_swap("A", "Z")

    def test_clone_branches_do_not_share_state(self) -> None:
        parent = _seed()
        child = parent.clone()
        child.attempt_swap("A", "C")
        assert parent.swap_history == ()
        assert parent.rangers["A"].station is Station.NORTH
        assert parent.rangers["A"].co_location["B"] == 0


class TestReachableInvariants:
    def test_station_balance(self) -> None:
        for config in _reachable(_seed(), 4):
            assert len(config.residents(Station.NORTH)) == 2
            assert len(config.residents(Station.SOUTH)) == 2

    def test_co_location_symmetry(self) -> None:
        for config in _reachable(_seed(), 4):
            for a in config.rangers.values():
                for b in config.rangers.values():
                    if a.ranger_id != b.ranger_id:
                        assert a.co_location[b.ranger_id] == b.co_location[a.ranger_id]

    def test_history_length_matches_total_moves(self) -> None:
        for config in _reachable(_seed(), 4):
            total_moves = sum(r.moved_count for r in config.rangers.values())
            assert total_moves == 2 * len(config.swap_history)


class TestIsGoalState:
    def test_known_solution_is_goal(self) -> None:
        config = _seed()
        for id1, id2 in CD_SOLUTION:
            assert config.attempt_swap(id1, id2)
        assert config.is_goal_state(("C", "D"))
        for ranger in config.rangers.values():
            assert ranger.north_visits == ranger.south_visits == 3
            assert ranger.moved_count == 3
            assert set(ranger.co_location.values()) == {2}

    def test_required_pair_must_be_north(self) -> None:
        config = _seed()
        for id1, id2 in CD_SOLUTION:
            config.attempt_swap(id1, id2)
        assert not config.is_goal_state(("A", "B"))

    def test_prefix_of_solution_is_not_goal(self) -> None:
        config = _seed()
        for id1, id2 in CD_SOLUTION[:-1]:
            config.attempt_swap(id1, id2)
            assert not config.is_goal_state(("C", "D"))

    def test_seed_is_not_goal_despite_vacuous_fairness(self) -> None:
        # All counters are zero, but C and D are South.
        assert not _seed().is_goal_state(("C", "D"))

    def test_evaluation_is_deterministic(self) -> None:
        for config in _reachable(_seed(), 3):
            assert config.is_goal_state(("A", "B")) == config.is_goal_state(("A", "B"))

    @pytest.mark.parametrize("required", [("A",), ("A", "A"), ("A", "B", "C"), ("A", "Z")])
    def test_malformed_required_pair_raises(self, required: tuple[str, ...]) -> None:
        with pytest.raises(InvariantViolationError):
            _seed().is_goal_state(required)
