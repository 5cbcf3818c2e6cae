from __future__ import annotations

import random

import numpy as np
import pytest

import core.terrain as terrain
from core.landing_sites import (
    LandingSite,
    interior_sites,
    landing_safety,
    recommend_landing_site,
)


def _terrain_with(overrides: dict[int, float] | None = None) -> terrain.TerrainMap:
    heights = [0.0] * 21
    for index, height in (overrides or {}).items():
        heights[index] = height
    return terrain.TerrainMap(heights)


@pytest.mark.parametrize("seed", [0, 1, 7, 123, 9999])
def test_generated_terrain_has_fixed_grid(seed: int) -> None:
    tmap = terrain.generate_terrain(random.Random(seed))

    assert len(tmap) == 21
    assert tmap.heights.shape == (21,)
    for i, x in enumerate(tmap.xs):
        assert x == pytest.approx(-100.0 + 10.0 * i)
        assert terrain.index_to_world(i) == pytest.approx(x)
        assert terrain.world_to_index(x) == i


def test_generated_terrain_is_seed_deterministic() -> None:
    a = terrain.generate_terrain(random.Random(5))
    b = terrain.generate_terrain(random.Random(5))
    assert np.array_equal(a.heights, b.heights)


def test_generated_terrain_stays_near_base_profile() -> None:
    tmap = terrain.generate_terrain(random.Random(42))
    for i, x in enumerate(tmap.xs):
        hazard = tmap[i] - terrain.base_profile(float(x))
        assert -5.0 - 1e-9 <= hazard <= 4.5 + 1e-9


def test_terrain_map_rejects_wrong_sample_count() -> None:
    with pytest.raises(ValueError):
        terrain.TerrainMap([0.0] * 20)


def test_terrain_map_is_read_only() -> None:
    tmap = _terrain_with()
    with pytest.raises(ValueError):
        tmap.heights[3] = 1.0
    with pytest.raises(IndexError):
        _ = tmap[21]


def test_world_to_index_truncates_toward_zero() -> None:
    assert terrain.world_to_index(-100.0) == 0
    assert terrain.world_to_index(-91.0) == 0
    assert terrain.world_to_index(-90.0) == 1
    assert terrain.world_to_index(4.9) == 10
    assert terrain.world_to_index(100.0) == 20
    assert terrain.world_to_index(109.9) == 20
    # Truncation, not floor: just below the grid still lands on index 0
    assert terrain.world_to_index(-105.0) == 0
    assert terrain.world_to_index(-115.0) == -1
    assert terrain.world_to_index(110.0) == 21


def test_interpolated_height_blends_neighbours_and_clamps() -> None:
    tmap = _terrain_with({0: 2.0, 1: 4.0, 20: -3.0})
    assert tmap.interpolated_height(-100.0) == pytest.approx(2.0)
    assert tmap.interpolated_height(-95.0) == pytest.approx(3.0)
    assert tmap.interpolated_height(-92.5) == pytest.approx(3.5)
    assert tmap.interpolated_height(100.0) == pytest.approx(-3.0)
    assert tmap.interpolated_height(250.0) == pytest.approx(-3.0)
    assert tmap.interpolated_height(-250.0) == pytest.approx(2.0)


def test_height_at_uses_covering_sample() -> None:
    tmap = _terrain_with({10: 1.5})
    assert tmap.height_at(5.0) == pytest.approx(1.5)
    assert tmap.height_at(-5.0) == pytest.approx(0.0)
    assert tmap.height_at(150.0) is None


def test_landing_safety_penalises_height_and_slope() -> None:
    tmap = _terrain_with({10: 2.0})
    # 100 - 2*10 - (2 + 2)*5
    assert landing_safety(tmap, 0.0) == pytest.approx(60.0)
    # Neighbour only sees one slope
    assert landing_safety(tmap, 10.0) == pytest.approx(90.0)
    assert landing_safety(tmap, 50.0) == pytest.approx(100.0)


def test_landing_safety_endpoints_skip_slope_term() -> None:
    tmap = _terrain_with({19: 5.0, 20: 1.0})
    assert landing_safety(tmap, 100.0) == pytest.approx(90.0)
    assert landing_safety(tmap, -100.0) == pytest.approx(100.0)


def test_landing_safety_off_grid_is_zero() -> None:
    tmap = _terrain_with()
    assert landing_safety(tmap, 110.0) == 0.0
    assert landing_safety(tmap, -115.0) == 0.0
    assert landing_safety(tmap, 1e6) == 0.0


def test_landing_safety_floors_at_zero() -> None:
    tmap = _terrain_with({10: 12.0})
    assert landing_safety(tmap, 0.0) == 0.0


@pytest.mark.parametrize("seed", [3, 11, 2024])
def test_landing_safety_always_within_bounds(seed: int) -> None:
    tmap = terrain.generate_terrain(random.Random(seed))
    for x in np.linspace(-150.0, 150.0, 301):
        score = landing_safety(tmap, float(x))
        assert 0.0 <= score <= 100.0


def test_recommendation_prefers_leftmost_on_ties() -> None:
    tmap = _terrain_with({10: 2.0})
    site = recommend_landing_site(tmap)
    assert site == LandingSite(x=-90.0, score=100.0)


def test_recommendation_ignores_endpoints() -> None:
    heights = [3.0] * 21
    heights[0] = 0.0
    heights[20] = 0.0
    tmap = terrain.TerrainMap(heights)
    site = recommend_landing_site(tmap)
    assert -90.0 <= site.x <= 90.0


@pytest.mark.parametrize("seed", [1, 17, 404])
def test_seeded_recommendation_matches_rescored_interior(seed: int) -> None:
    tmap = terrain.generate_terrain(random.Random(seed))
    site = recommend_landing_site(tmap)

    best_x, best_score = 0.0, -1.0
    for i in range(1, 20):
        x = terrain.index_to_world(i)
        score = landing_safety(tmap, x)
        if score > best_score:
            best_x, best_score = x, score

    assert site.x == best_x
    assert site.score == best_score
    assert len(interior_sites(tmap)) == 19
