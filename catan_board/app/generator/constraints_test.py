"""Unit tests for the placement rules."""

from __future__ import annotations

import unittest

from catan_board.app.generator import constraints, sample_board
from catan_board.app.models.board import ClumpingMode, RuleConfig

_ALL_RULES = RuleConfig(prevent_clumping=True)


def _swap_numbers(first: int, second: int) -> list[int | None]:
    numbers = list(sample_board.NUMBERS)
    numbers[first], numbers[second] = numbers[second], numbers[first]
    return numbers


def _swap_terrains(first: int, second: int) -> list[str]:
    terrains = list(sample_board.TERRAINS)
    terrains[first], terrains[second] = terrains[second], terrains[first]
    return terrains


class TestHighAdjacency(unittest.TestCase):
    """Tests for violates_high_adjacency()."""

    def test_valid_board(self) -> None:
        self.assertFalse(constraints.violates_high_adjacency(sample_board.cells()))

    def test_six_next_to_eight(self) -> None:
        # Move the 8 on cell 2 to cell 1, next to the 6 on cell 0.
        cells = sample_board.cells(numbers=_swap_numbers(1, 2))
        self.assertTrue(constraints.violates_high_adjacency(cells))

    def test_six_next_to_six(self) -> None:
        # Cell 10 touches the 6 on cell 11.
        cells = sample_board.cells(numbers=_swap_numbers(0, 10))
        self.assertTrue(constraints.violates_high_adjacency(cells))

    def test_unnumbered_candidate(self) -> None:
        """A candidate without numbers cannot break a number rule."""
        cells = sample_board.cells(numbers=[None] * 19)
        self.assertFalse(constraints.violates_high_adjacency(cells))


class TestExtremeAdjacency(unittest.TestCase):
    """Tests for violates_extreme_adjacency()."""

    def test_valid_board(self) -> None:
        self.assertFalse(constraints.violates_extreme_adjacency(sample_board.cells()))

    def test_two_next_to_twelve(self) -> None:
        # Move the 12 on cell 18 to cell 12, next to the 2 on cell 7.
        cells = sample_board.cells(numbers=_swap_numbers(12, 18))
        self.assertTrue(constraints.violates_extreme_adjacency(cells))

    def test_high_numbers_ignored(self) -> None:
        cells = sample_board.cells(numbers=_swap_numbers(1, 2))
        self.assertFalse(constraints.violates_extreme_adjacency(cells))


class TestClumping(unittest.TestCase):
    """Tests for violates_clumping() and same_terrain_regions()."""

    def test_valid_board_adjacent_mode(self) -> None:
        self.assertFalse(constraints.violates_clumping(sample_board.cells()))

    def test_pair_rejected_in_adjacent_mode(self) -> None:
        # Wood moves to cell 0, where it touches the wood on cell 3.
        cells = sample_board.cells(terrains=_swap_terrains(0, 1))
        self.assertTrue(constraints.violates_clumping(cells, ClumpingMode.ADJACENT))

    def test_pair_allowed_in_cluster_mode(self) -> None:
        terrains = list(sample_board.TERRAINS)
        # Sheep on 0 and 1 form a pair, as do wood on 3 and 7.
        terrains[0], terrains[2] = 'sheep', 'ore'
        terrains[1], terrains[7] = 'sheep', 'wood'
        cells = sample_board.cells(terrains=terrains)
        regions = constraints.same_terrain_regions(cells)
        self.assertIn(frozenset({0, 1}), regions)
        self.assertTrue(constraints.violates_clumping(cells, ClumpingMode.ADJACENT))
        self.assertFalse(constraints.violates_clumping(cells, ClumpingMode.CLUSTER))

    def test_triple_rejected_in_cluster_mode(self) -> None:
        terrains = list(sample_board.TERRAINS)
        # Wood on 0, 1 and 3 forms a connected group of three.
        terrains[0], terrains[9] = 'wood', 'ore'
        cells = sample_board.cells(terrains=terrains)
        self.assertIn(frozenset({0, 1, 3}), constraints.same_terrain_regions(cells))
        self.assertTrue(constraints.violates_clumping(cells, ClumpingMode.CLUSTER))

    def test_desert_never_clumps(self) -> None:
        """Regions never include the desert."""
        regions = constraints.same_terrain_regions(sample_board.cells())
        self.assertEqual(len(regions), 18)
        self.assertFalse(any(4 in region for region in regions))

    def test_regions_partition_producing_cells(self) -> None:
        terrains = list(sample_board.TERRAINS)
        terrains[0], terrains[9] = 'wood', 'ore'
        cells = sample_board.cells(terrains=terrains)
        regions = constraints.same_terrain_regions(cells)
        covered = sorted(cell_id for region in regions for cell_id in region)
        self.assertEqual(covered, [i for i in range(19) if i != 4])


class TestRuleSets(unittest.TestCase):
    """Tests for violations() and is_valid()."""

    def test_valid_board_passes_all_rules(self) -> None:
        self.assertEqual(constraints.violations(sample_board.cells(), _ALL_RULES), [])
        self.assertTrue(constraints.is_valid(sample_board.cells(), _ALL_RULES))

    def test_validation_is_repeatable(self) -> None:
        """Checking the same board again gives the same answer."""
        cells = sample_board.cells()
        for _ in range(20):
            self.assertTrue(constraints.is_valid(cells, _ALL_RULES))

    def test_reports_every_broken_rule(self) -> None:
        numbers = _swap_numbers(1, 2)
        numbers[12], numbers[18] = numbers[18], numbers[12]
        cells = sample_board.cells(terrains=_swap_terrains(0, 1), numbers=numbers)
        self.assertEqual(
            constraints.violations(cells, _ALL_RULES),
            [
                constraints.CLUMPING,
                constraints.HIGH_ADJACENCY,
                constraints.EXTREME_ADJACENCY,
            ],
        )

    def test_disabled_rules_are_ignored(self) -> None:
        cells = sample_board.cells(numbers=_swap_numbers(1, 2))
        rules = RuleConfig(prevent_high_adjacency=False)
        self.assertTrue(constraints.is_valid(cells, rules))
        self.assertEqual(
            constraints.number_violations(cells, RuleConfig()),
            [constraints.HIGH_ADJACENCY],
        )

    def test_terrain_violations_only_when_enabled(self) -> None:
        cells = sample_board.cells(terrains=_swap_terrains(0, 1))
        self.assertEqual(constraints.terrain_violations(cells, RuleConfig()), [])
        self.assertEqual(
            constraints.terrain_violations(cells, _ALL_RULES), [constraints.CLUMPING]
        )


if __name__ == '__main__':
    unittest.main()
