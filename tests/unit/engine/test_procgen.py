"""Tests for procedural level generation."""

from __future__ import annotations

import random
from itertools import combinations

import numpy as np
import pytest

from dungeon_core.core.exceptions import LevelGenerationError
from dungeon_core.engine import procgen
from dungeon_core.engine.procgen import GeneratedLevel, connect_rooms, generate_level, place_items, place_monsters
from dungeon_core.models.entities import create_orc
from dungeon_core.models.map import GameMap, Rect


def _generate(seed: int, **overrides) -> GeneratedLevel:
    params = {
        "max_rooms": 30,
        "room_min_size": 6,
        "room_max_size": 10,
        "max_room_monsters": 3,
        "max_room_items": 2,
    }
    params.update(overrides)
    return generate_level(80, 43, rng=random.Random(seed), **params)


class TestGenerateLevel:
    """Tests for generate_level."""

    @pytest.mark.parametrize("seed", [0, 1, 7, 42, 1234])
    def test_accepted_rooms_never_intersect(self, seed: int) -> None:
        level = _generate(seed)

        assert level.rooms
        for a, b in combinations(level.rooms, 2):
            assert not a.intersects(b)

    @pytest.mark.parametrize("seed", [3, 99])
    def test_rooms_inside_map(self, seed: int) -> None:
        level = _generate(seed)

        for room in level.rooms:
            assert room.x1 >= 0 and room.y1 >= 0
            assert room.x2 < 80 and room.y2 < 43

    def test_room_interiors_are_floor(self) -> None:
        level = _generate(5)

        for room in level.rooms:
            xs, ys = room.interior()
            assert not level.game_map.blocked[xs, ys].any()

    def test_map_border_stays_wall(self) -> None:
        """Cells never touched by carving remain wall."""
        level = _generate(11)
        blocked = level.game_map.blocked

        assert blocked[0, :].all()
        assert blocked[:, 0].all()
        assert blocked[79, :].all()
        assert blocked[:, 42].all()

    @pytest.mark.parametrize("seed", [11, 2024])
    def test_only_rooms_and_corridors_are_carved(self, seed: int, monkeypatch: pytest.MonkeyPatch) -> None:
        """Rebuild the carved set from rooms and corridor coin flips; everything else is wall."""
        corridors: list[tuple[Rect, Rect, tuple]] = []
        real_connect = procgen.connect_rooms

        def recording_connect(game_map: GameMap, previous: Rect, new: Rect, rng: random.Random) -> None:
            corridors.append((previous, new, rng.getstate()))
            real_connect(game_map, previous, new, rng)

        monkeypatch.setattr(procgen, "connect_rooms", recording_connect)
        level = _generate(seed)

        mask = np.zeros((80, 43), dtype=bool)
        for room in level.rooms:
            mask[room.interior()] = True
        for previous, new, state in corridors:
            coin = random.Random()
            coin.setstate(state)
            (px, py), (nx, ny) = previous.center(), new.center()
            xs = slice(min(px, nx), max(px, nx) + 1)
            ys = slice(min(py, ny), max(py, ny) + 1)
            if coin.random() < 0.5:
                mask[xs, py] = True
                mask[nx, ys] = True
            else:
                mask[px, ys] = True
                mask[xs, ny] = True

        assert len(corridors) == len(level.rooms) - 1
        assert np.array_equal(level.game_map.blocked, ~mask)
        assert np.array_equal(level.game_map.block_sight, ~mask)

    def test_player_start_is_first_room_center(self) -> None:
        level = _generate(8)

        assert level.player_start == level.rooms[0].center()
        assert not level.game_map.is_wall(*level.player_start)

    def test_rooms_are_connected(self) -> None:
        """Every floor cell is reachable from the player start."""
        level = _generate(21)
        game_map = level.game_map

        seen = {level.player_start}
        frontier = [level.player_start]
        while frontier:
            x, y = frontier.pop()
            for nx, ny in ((x + 1, y), (x - 1, y), (x, y + 1), (x, y - 1)):
                if (nx, ny) not in seen and not game_map.is_wall(nx, ny):
                    seen.add((nx, ny))
                    frontier.append((nx, ny))

        assert len(seen) == game_map.floor_count()

    def test_same_seed_same_level(self) -> None:
        first = _generate(77)
        second = _generate(77)

        assert first.rooms == second.rooms
        assert (first.game_map.blocked == second.game_map.blocked).all()
        assert [(e.name, e.position) for e in first.entities] == [(e.name, e.position) for e in second.entities]

    def test_population_respects_rules(self) -> None:
        """Entities sit on room interiors and blockers never share a cell."""
        level = _generate(13)

        blocker_cells = [e.position for e in level.entities if e.blocks]
        assert len(blocker_cells) == len(set(blocker_cells))
        for entity in level.entities:
            assert any(room.contains_interior(entity.x, entity.y) for room in level.rooms)
            if entity.item is not None:
                assert entity.blocks is False

    def test_no_population_when_limits_are_zero(self) -> None:
        level = _generate(2, max_room_monsters=0, max_room_items=0)
        assert level.entities == []

    def test_room_too_large_for_map(self) -> None:
        with pytest.raises(LevelGenerationError):
            generate_level(
                10,
                10,
                max_rooms=5,
                room_min_size=6,
                room_max_size=10,
                max_room_monsters=0,
                max_room_items=0,
                rng=random.Random(0),
            )

    def test_inverted_sizes(self) -> None:
        with pytest.raises(LevelGenerationError):
            _generate(0, room_min_size=9, room_max_size=6)

    def test_zero_attempts(self) -> None:
        with pytest.raises(LevelGenerationError):
            _generate(0, max_rooms=0)


class TestPopulation:
    """Tests for room population helpers."""

    def test_monsters_skip_blocked_cells(self) -> None:
        """A draw landing on an occupied cell places nothing."""
        game_map = GameMap(10, 10)
        room = Rect.from_size(0, 0, 2, 2)
        game_map.carve_room(room)
        entities = [create_orc(1, 1)]

        placed = place_monsters(room, game_map, entities, random.Random(0), 3)

        assert placed == 0
        assert len(entities) == 1

    def test_items_share_cells_with_nothing_blocking(self) -> None:
        game_map = GameMap(10, 10)
        room = Rect.from_size(0, 0, 2, 2)
        game_map.carve_room(room)
        entities: list = []

        placed = 0
        rng = random.Random(4)
        for _ in range(10):
            placed += place_items(room, game_map, entities, rng, 2)

        assert placed == len(entities)
        assert all(e.position == (1, 1) for e in entities)


class TestConnectRooms:
    """Tests for corridor carving."""

    @pytest.mark.parametrize("seed", range(6))
    def test_corridor_joins_centers(self, seed: int) -> None:
        game_map = GameMap(30, 30)
        a = Rect.from_size(1, 1, 4, 4)
        b = Rect.from_size(20, 18, 5, 5)

        connect_rooms(game_map, a, b, random.Random(seed))

        assert not game_map.is_wall(*a.center())
        assert not game_map.is_wall(*b.center())
        ax, ay = a.center()
        bx, by = b.center()
        corner_h = not game_map.is_wall(bx, ay)
        corner_v = not game_map.is_wall(ax, by)
        assert corner_h or corner_v
        assert game_map.floor_count() == abs(bx - ax) + abs(by - ay) + 1
