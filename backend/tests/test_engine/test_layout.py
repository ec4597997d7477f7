"""Tests for ornament placement and light scattering."""

from __future__ import annotations

from collections import defaultdict

import numpy as np
import pytest

from wishtree.engine.layout import (
    LIGHT_PALETTE,
    ORNAMENT_PALETTE,
    LayoutConfig,
    LightConfig,
    ornament_slots,
    place_ornament,
    place_ornaments,
    plan_rows,
    scatter_lights,
)
from wishtree.engine.silhouette import Tier, TieredSilhouette
from wishtree.engine.snowfall import snowfall

EPS = 1e-9
CONFIG = LayoutConfig()


def _in_bounds(silhouette, item, margin):
    lo, hi = silhouette.bounds(item.y)
    return lo + margin - EPS <= item.x <= hi - margin + EPS


class TestRows:
    def test_uniform_rows_without_taper(self, tree):
        rows = plan_rows(tree, LayoutConfig(taper_weight=0.0))
        ys = [r.y for r in rows]
        assert ys[0] == pytest.approx(85)
        assert ys[-1] == pytest.approx(445)
        assert np.allclose(np.diff(ys), 45)

    def test_taper_crowds_rows_toward_the_wide_base(self, tree):
        ys = [r.y for r in plan_rows(tree, CONFIG)]
        gaps = np.diff(ys)
        assert np.all(gaps > 0)
        assert gaps[-1] < gaps[0]

    def test_narrow_top_row_holds_one_centred_slot(self, tree):
        top = plan_rows(tree, CONFIG)[0]
        assert top.capacity == 1
        first = ornament_slots(tree, CONFIG)[0]
        assert first.x == pytest.approx(210)
        assert first.jitter == 0.0

    def test_capacity_leaves_room_for_jitter(self, any_silhouette):
        for row in plan_rows(any_silhouette, CONFIG):
            assert 0 <= row.capacity <= CONFIG.max_per_row
            if row.capacity >= 2:
                jitter = min(row.step * CONFIG.jitter_fraction, CONFIG.max_x_jitter)
                assert row.step - jitter >= CONFIG.min_spacing - EPS

    def test_rows_are_memoized(self, tree):
        assert plan_rows(tree, CONFIG) is plan_rows(tree, CONFIG)


class TestOrnaments:
    def test_deterministic(self, tree):
        first = place_ornaments(tree, 20)
        plan_rows.cache_clear()
        ornament_slots.cache_clear()
        second = place_ornaments(tree, 20)
        assert first == second
        assert place_ornament(tree, 7) == first[7]

    def test_position_independent_of_count(self, tree):
        assert place_ornaments(tree, 5)[3] == place_ornaments(tree, 30)[3]

    def test_twelve_ornaments_on_six_tiers(self, tree):
        slots = ornament_slots(tree, CONFIG)
        assert len(slots) >= 12

        items = place_ornaments(tree, 12, CONFIG)
        assert len(items) == 12
        assert [it.index for it in items] == list(range(12))

        by_row = defaultdict(list)
        for item in items:
            assert _in_bounds(tree, item, CONFIG.edge_margin)
            by_row[slots[item.index].row].append(item.x)
        for xs in by_row.values():
            xs.sort()
            for a, b in zip(xs, xs[1:]):
                assert b - a >= CONFIG.min_spacing - EPS

    def test_in_bounds_everywhere(self, any_silhouette):
        n = 3 * len(ornament_slots(any_silhouette, CONFIG))
        for item in place_ornaments(any_silhouette, n, CONFIG):
            assert _in_bounds(any_silhouette, item, CONFIG.edge_margin)

    def test_perturbation_under_half_step(self, any_silhouette):
        rows = plan_rows(any_silhouette, CONFIG)
        slots = ornament_slots(any_silhouette, CONFIG)
        for i, slot in enumerate(slots):
            row = rows[slot.row]
            if row.capacity < 2:
                continue
            item = place_ornament(any_silhouette, i, CONFIG)
            assert abs(item.x - slot.x) < row.step / 2

    def test_row_order_preserved(self, tree):
        slots = ornament_slots(tree, CONFIG)
        items = place_ornaments(tree, len(slots), CONFIG)
        by_row = defaultdict(list)
        for slot, item in zip(slots, items):
            by_row[slot.row].append((slot.column, item.x))
        for entries in by_row.values():
            xs = [x for _, x in sorted(entries)]
            assert xs == sorted(xs)

    def test_y_jitter_is_bounded(self, tree):
        slots = ornament_slots(tree, CONFIG)
        for i, slot in enumerate(slots):
            item = place_ornament(tree, i, CONFIG)
            assert abs(item.y - slot.y) <= CONFIG.y_jitter / 2

    def test_color_cycles_through_palette(self, tree):
        for i in range(40):
            assert place_ornament(tree, i).color == ORNAMENT_PALETTE[i % len(ORNAMENT_PALETTE)]

    def test_extra_ornaments_wrap_onto_slots(self, tree):
        slots = ornament_slots(tree, CONFIG)
        n = len(slots)
        items = place_ornaments(tree, n + 3, CONFIG)
        assert len(items) == n + 3
        wrapped = items[n]
        assert abs(wrapped.y - slots[0].y) <= CONFIG.y_jitter / 2
        assert wrapped.color == ORNAMENT_PALETTE[n % len(ORNAMENT_PALETTE)]

    def test_no_ornaments(self, tree):
        assert place_ornaments(tree, 0) == []
        assert place_ornaments(tree, -3) == []

    def test_too_narrow_silhouette_falls_back_to_centre(self):
        sliver = TieredSilhouette(tiers=(Tier.cone(210, 100, 120, 200, 220),))
        assert ornament_slots(sliver, CONFIG) == ()
        items = place_ornaments(sliver, 3, CONFIG)
        assert len(items) == 3
        assert all(item.x == pytest.approx(210) for item in items)

    def test_empty_silhouette_does_not_raise(self):
        items = place_ornaments(TieredSilhouette(tiers=()), 2)
        assert len(items) == 2


class TestConfig:
    def test_jitter_must_stay_below_step(self):
        with pytest.raises(ValueError):
            LayoutConfig(jitter_fraction=1.0)

    def test_rejects_empty_palette(self):
        with pytest.raises(ValueError):
            LayoutConfig(palette=())

    def test_seed_changes_jitter_not_slots(self, tree):
        a = LayoutConfig(seed=1)
        b = LayoutConfig(seed=2)
        assert ornament_slots(tree, a) == ornament_slots(tree, b)
        xs_a = [it.x for it in place_ornaments(tree, 12, a)]
        xs_b = [it.x for it in place_ornaments(tree, 12, b)]
        assert xs_a != xs_b


class TestLights:
    def test_deterministic(self, tree):
        assert scatter_lights(tree, 28) == scatter_lights(tree, 28)

    def test_light_independent_of_count(self, tree):
        assert scatter_lights(tree, 10)[3] == scatter_lights(tree, 28)[3]

    def test_inside_silhouette(self, any_silhouette):
        for light in scatter_lights(any_silhouette, 200):
            assert any_silhouette.y_min <= light.y <= any_silhouette.y_max
            lo, hi = any_silhouette.bounds(light.y)
            assert lo - EPS <= light.x <= hi + EPS

    def test_edge_margin_where_wide(self, tree):
        cfg = LightConfig()
        for light in scatter_lights(tree, 200, cfg):
            lo, hi = tree.bounds(light.y)
            if hi - lo > cfg.edge_margin * 2:
                assert lo + cfg.edge_margin - EPS <= light.x <= hi - cfg.edge_margin + EPS

    def test_blink_parameters(self, tree):
        for light in scatter_lights(tree, 50):
            assert light.color == LIGHT_PALETTE[light.index % len(LIGHT_PALETTE)]
            assert 1.5 <= light.blink_duration < 2.5
            assert 0.0 <= light.blink_delay < 2.0
            # Duration and delay come from the same draw
            assert light.blink_delay == pytest.approx((light.blink_duration - 1.5) * 2)

    def test_no_lights(self, tree):
        assert scatter_lights(tree, 0) == []


class TestSnowfall:
    def test_ranges(self):
        flakes = snowfall(100)
        assert len(flakes) == 100
        for f in flakes:
            assert 0 <= f.left_pct < 100
            assert 5 <= f.duration < 15
            assert 0 <= f.delay < 5
            assert 0.5 <= f.scale < 1.5

    def test_deterministic(self):
        assert snowfall(30) == snowfall(30)
        assert snowfall(30, seed=1) != snowfall(30, seed=2)

    def test_negative_count(self):
        assert snowfall(-1) == []
