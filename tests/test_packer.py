"""Tests for the shelf packer and its layout invariants."""
import pytest

from storage_calculator.model import (
    DEFAULT_CATALOG,
    Container,
    CustomItem,
    FlatItemInstance,
    ItemTooLargeError,
    PackedItem,
    PackingResult,
    SelectionState,
    ShelfPacker,
    estimate_volume,
    flatten,
    pack,
    verify_packing,
)


def unit(item_id, w, d, h, index=0):
    return FlatItemInstance(item_id=item_id, instance_index=index, width=w, depth=d, height=h)


class TestScenarios:

    def test_single_item(self, catalog, container):
        result = pack(flatten(SelectionState.from_mapping({"crate": 1}), catalog), container)
        assert result.container_count == 1
        placed = result.packed_items[0]
        assert (placed.x, placed.y, placed.z) == (0, 0, 0)
        assert placed.container_index == 0
        assert result.last_container_fill_percent == pytest.approx(8 / 384 * 100)
        assert result.last_container_fill_percent == pytest.approx(2.08, abs=0.01)

    def test_overflow_into_second_container(self, catalog, container):
        # 10 x 48 cu ft + 20 cu ft custom = 500 cu ft
        selection = SelectionState.from_mapping(
            {"big": 10}, [CustomItem("rack", "Rack", 24, 24, 60)]
        )
        assert estimate_volume(selection, catalog).cubic_feet == pytest.approx(500)

        result = pack(flatten(selection, catalog), container)
        assert result.container_count == 2
        indices = [p.container_index for p in result.packed_items]
        assert indices == sorted(indices)
        assert indices.count(0) == 8
        assert result.last_container_fill_percent == pytest.approx((2 * 48 + 20) / 384 * 100)

    def test_empty_input(self, container):
        result = pack([], container)
        assert result == PackingResult(packed_items=(), container_count=0, last_container_fill_percent=0.0)

    def test_oversized_custom_item(self, catalog, container):
        selection = SelectionState.from_mapping(
            {"crate": 2}, [CustomItem("shed", "Garden Shed", 120, 120, 120)]
        )
        with pytest.raises(ItemTooLargeError) as exc_info:
            pack(flatten(selection, catalog), container)
        err = exc_info.value
        assert err.instance.item_id == "shed"
        assert err.instance.is_custom
        assert err.axes == ["width", "depth", "height"]
        assert "custom:shed" in str(err)


class TestShelfLayout:

    def test_rows_then_layers(self, container):
        items = [unit("big", 48, 36, 48, i) for i in range(8)]
        result = pack(items, container)
        positions = [(p.x, p.y, p.z) for p in result.packed_items]
        assert positions == [
            (0, 0, 0), (48, 0, 0), (0, 36, 0), (48, 36, 0),
            (0, 0, 48), (48, 0, 48), (0, 36, 48), (48, 36, 48),
        ]
        assert result.container_count == 1
        assert result.last_container_fill_percent == pytest.approx(100)

    def test_new_row_starts_after_deepest_item(self):
        container = Container(50, 50, 50)
        items = [unit("a", 30, 20, 10), unit("b", 15, 5, 10), unit("c", 30, 10, 10)]
        result = pack(items, container)
        assert [(p.x, p.y, p.z) for p in result.packed_items] == [(0, 0, 0), (30, 0, 0), (0, 20, 0)]

    def test_new_layer_starts_above_tallest_item(self):
        container = Container(40, 20, 100)
        items = [unit("a", 20, 20, 30), unit("b", 20, 20, 10), unit("c", 40, 20, 5)]
        result = pack(items, container)
        assert [(p.x, p.y, p.z) for p in result.packed_items] == [(0, 0, 0), (20, 0, 0), (0, 0, 30)]

    def test_closes_container_when_height_is_exhausted(self, container):
        items = [unit("floor", 96, 72, 60), unit("post", 10, 10, 40)]
        result = pack(items, container)
        assert [p.container_index for p in result.packed_items] == [0, 1]
        assert (result.packed_items[1].x, result.packed_items[1].y, result.packed_items[1].z) == (0, 0, 0)
        assert result.container_count == 2

    def test_item_gap(self):
        container = Container(100, 50, 50)
        items = [unit("a", 30, 20, 10, i) for i in range(4)]
        result = pack(items, container, item_gap=1)
        assert [(p.x, p.y, p.z) for p in result.packed_items] == [
            (0, 0, 0), (31, 0, 0), (62, 0, 0), (0, 21, 0),
        ]

    def test_negative_gap_rejected(self, container):
        with pytest.raises(ValueError):
            ShelfPacker(container, item_gap=-1)

    def test_item_exactly_filling_container(self, container):
        result = pack([unit("full", 96, 72, 96)], container)
        assert result.container_count == 1
        assert result.last_container_fill_percent == pytest.approx(100)

    def test_error_raised_before_any_later_item(self, container):
        packer = ShelfPacker(container)
        items = [unit("ok", 10, 10, 10), unit("wide", 97, 10, 10), unit("ok2", 10, 10, 10)]
        with pytest.raises(ItemTooLargeError) as exc_info:
            packer.pack(items)
        assert exc_info.value.axes == ["width"]
        assert [p.item.item_id for p in packer.placements] == ["ok"]


class TestInvariants:

    @pytest.fixture
    def household(self):
        return SelectionState.from_mapping(
            {
                "king-bed": 1,
                "king-mattress": 1,
                "sofa-3-seat": 1,
                "refrigerator": 1,
                "dresser": 2,
                "nightstand": 2,
                "dining-chair": 6,
                "box-medium": 25,
                "box-small": 30,
                "tv-65": 1,
                "bicycle": 2,
                "lawn-mower": 1,
            },
            [CustomItem("piano", "Upright Piano", 58, 25, 50, "#000000")],
        )

    @pytest.fixture
    def unit_container(self):
        return Container(95, 56, 83.5)

    def test_no_overlap_and_containment(self, household, unit_container):
        result = pack(flatten(household, DEFAULT_CATALOG), unit_container)
        assert result.container_count > 1
        assert verify_packing(result, unit_container) == []

    def test_no_overlap_with_gap(self, household, unit_container):
        result = pack(flatten(household, DEFAULT_CATALOG), unit_container, item_gap=1)
        assert verify_packing(result, unit_container) == []

    def test_conservation(self, household, unit_container):
        result = pack(flatten(household, DEFAULT_CATALOG), unit_container)
        expected = estimate_volume(household, DEFAULT_CATALOG).cubic_feet
        assert result.total_cubic_feet == pytest.approx(expected)
        assert len(result.packed_items) == household.total_quantity

    def test_container_count_matches_highest_index(self, household, unit_container):
        result = pack(flatten(household, DEFAULT_CATALOG), unit_container)
        assert result.container_count == max(p.container_index for p in result.packed_items) + 1

    def test_deterministic(self, household, unit_container):
        first = pack(flatten(household, DEFAULT_CATALOG), unit_container)
        second = pack(flatten(household, DEFAULT_CATALOG), unit_container)
        assert first == second

    def test_units_sorting_last_never_reduce_container_count(self, catalog, container):
        # Mixed base; cube then slab units have the smallest volume (cube < slab on id)
        # so each addition lands at the end of the flattened order.
        state = SelectionState.from_mapping({"big": 7, "tall": 3, "crate": 6, "box-large": 9})
        previous = pack(flatten(state, catalog), container)
        counts = [previous.container_count]
        steps = [("cube", 40)] * 6 + [("slab", 60)] * 6
        for item_id, count in steps:
            state = state.add_item(item_id, count)
            result = pack(flatten(state, catalog), container)
            n = len(previous.packed_items)
            assert result.packed_items[:n] == previous.packed_items
            counts.append(result.container_count)
            previous = result
        for n in range(3):
            state = state.add_custom_item(CustomItem(f"c{n}", "Chest", 40, 30, 30))
            counts.append(pack(flatten(state, catalog), container).container_count)
        assert counts == sorted(counts)
        # ~880 cu ft cannot fit two 384 cu ft units
        assert counts[-1] >= 3

    def test_mixed_selection_growth_keeps_layout_sound(self, unit_container):
        # Units inserted mid-order reshuffle later wraps; layout invariants still hold.
        state = SelectionState()
        for item_id in ("refrigerator", "box-medium", "patio-chair", "queen-bed", "nightstand", "box-medium"):
            state = state.add_item(item_id, 3)
            result = pack(flatten(state, DEFAULT_CATALOG), unit_container)
            assert verify_packing(result, unit_container) == []
            assert result.total_cubic_feet == pytest.approx(
                estimate_volume(state, DEFAULT_CATALOG).cubic_feet
            )
            assert len(result.packed_items) == state.total_quantity


class TestVerifyPacking:

    def test_reports_overlap(self, container):
        a = PackedItem(unit("a", 10, 10, 10), 0, 0, 0, 0)
        b = PackedItem(unit("b", 10, 10, 10), 0, 5, 5, 5)
        result = PackingResult(packed_items=(a, b), container_count=1)
        violations = verify_packing(result, container)
        assert len(violations) == 1
        assert "a#0 overlaps b#0" in violations[0]

    def test_touching_faces_are_not_overlap(self, container):
        a = PackedItem(unit("a", 10, 10, 10), 0, 0, 0, 0)
        b = PackedItem(unit("b", 10, 10, 10), 0, 10, 0, 0)
        c = PackedItem(unit("c", 10, 10, 10), 1, 0, 0, 0)
        result = PackingResult(packed_items=(a, b, c), container_count=2)
        assert verify_packing(result, container) == []

    def test_reports_out_of_bounds_and_bad_count(self, container):
        a = PackedItem(unit("a", 10, 10, 10), 0, 90, 0, 0)
        result = PackingResult(packed_items=(a,), container_count=3)
        violations = verify_packing(result, container)
        assert any("exceeds container bounds" in v for v in violations)
        assert any("container_count 3" in v for v in violations)
