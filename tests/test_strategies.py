"""Tests for bitevo.evolution.strategies."""

from __future__ import annotations

import random

import pytest

from bitevo.evolution.strategies import (
    RouletteWheelSelector,
    SingleBitFlipMutation,
    UniformCrossover,
)
from bitevo.exceptions import EmptyBreedingPoolError, EvolutionError, SelectionError
from bitevo.genes import BitVector


# ---------------------------------------------------------------------------
# TestRouletteWheelSelector
# ---------------------------------------------------------------------------

class TestRouletteWheelSelector:
    def test_pick_first_crossing(self, scripted):
        selector = RouletteWheelSelector()
        # cumulative shares: 0.1, 0.4, 1.0
        assert selector.pick([1, 3, 6], scripted([0.05])) == 0
        assert selector.pick([1, 3, 6], scripted([0.2])) == 1
        assert selector.pick([1, 3, 6], scripted([0.5])) == 2

    def test_pick_falls_back_to_last(self, scripted):
        selector = RouletteWheelSelector()
        # r stays >= 0 only through drift; simulate with a value of 1.0
        assert selector.pick([1, 1, 1], scripted([1.0])) == 2

    def test_zero_weight_never_picked(self, scripted):
        selector = RouletteWheelSelector()
        assert selector.pick([0, 5, 0, 5], scripted([0.0])) == 1

    def test_zero_sum_raises(self, rng):
        with pytest.raises(SelectionError):
            RouletteWheelSelector().pick([0, 0, 0], rng)

    def test_selection_error_is_evolution_error(self):
        assert issubclass(SelectionError, EvolutionError)

    def test_without_replacement(self, rng):
        selected = RouletteWheelSelector()([5, 1, 1, 1, 1], 5, rng)
        assert sorted(selected) == [0, 1, 2, 3, 4]

    def test_indices_refer_to_input_positions(self, scripted):
        # first draw takes index 1, second draw walks [10, 30] -> 30 is input index 2
        selected = RouletteWheelSelector()([10, 60, 30], 2, scripted([0.5, 0.9]))
        assert selected == [1, 2]

    def test_exhausts_when_remaining_scores_are_zero(self, rng):
        with pytest.raises(SelectionError):
            RouletteWheelSelector()([3, 0, 0], 2, rng)

    def test_proportional_frequencies(self):
        rng = random.Random(42)
        selector = RouletteWheelSelector()
        counts = [0, 0]
        for _ in range(4000):
            counts[selector.pick([1, 3], rng)] += 1
        assert 0.7 < counts[1] / 4000 < 0.8

    def test_zero_total(self, rng):
        assert RouletteWheelSelector()([1, 2], 0, rng) == []


# ---------------------------------------------------------------------------
# TestUniformCrossover
# ---------------------------------------------------------------------------

class TestUniformCrossover:
    def test_identical_parents_copy(self, rng):
        parent = BitVector.from_bytes(bytes([0b10110000]))
        child = UniformCrossover()([parent], 4, rng)
        assert child.to_number(4) == 0b1011
        assert child is not parent

    def test_bits_past_bit_size_stay_clear(self, rng):
        parent = BitVector.from_bytes(b"\xff")
        child = UniformCrossover()([parent], 5, rng)
        assert child.to_bytes() == bytes([0b11111000])

    def test_mix_takes_each_bit_from_one_parent(self, scripted):
        a = BitVector.from_bytes(b"\xff")
        b = BitVector.from_bytes(b"\x00")
        child = UniformCrossover.mix(a, b, 4, scripted([0.1, 0.9, 0.1, 0.9]))
        assert child.get_binary(4) == "1010"

    def test_parent_draws(self, scripted):
        ones = BitVector.from_bytes(b"\xff")
        zeros = BitVector.from_bytes(b"\x00")
        # parents: pool[int(2*0.1)] = ones, pool[int(2*0.9)] = zeros
        child = UniformCrossover()([ones, zeros], 2, scripted([0.1, 0.9, 0.0, 0.7]))
        assert child.get_binary(2) == "10"

    def test_short_parent_reads_as_zero(self, rng):
        short = BitVector(1)
        short.edit(0, 1)
        child = UniformCrossover.mix(short, short, 12, rng)
        assert len(child) == 2
        assert child.get_binary(12) == "100000000000"

    def test_empty_pool(self, rng):
        with pytest.raises(EmptyBreedingPoolError):
            UniformCrossover()([], 5, rng)


# ---------------------------------------------------------------------------
# TestSingleBitFlipMutation
# ---------------------------------------------------------------------------

class TestSingleBitFlipMutation:
    def test_flips_exactly_one_bit(self, scripted):
        gene = BitVector(1)
        # 0.0 < p, then position int(5 * 0.5) = 2
        assert SingleBitFlipMutation()(gene, 5, 0.5, scripted([0.0, 0.5]))
        assert gene.get_binary(8) == "00100000"

    def test_flip_clears_set_bit(self, scripted):
        gene = BitVector.from_bytes(b"\xff")
        SingleBitFlipMutation()(gene, 8, 1.0, scripted([0.3, 0.0]))
        assert gene.get_binary(8) == "01111111"

    def test_skipped_when_draw_above_probability(self, scripted):
        gene = BitVector(1)
        assert not SingleBitFlipMutation()(gene, 5, 0.4, scripted([0.4]))
        assert gene.to_bytes() == b"\x00"

    def test_zero_probability_never_mutates(self, rng):
        gene = BitVector(2)
        mutation = SingleBitFlipMutation()
        assert not any(mutation(gene, 16, 0.0, rng) for _ in range(100))
        assert gene.to_bytes() == bytes(2)

    def test_position_within_bit_size(self, rng):
        mutation = SingleBitFlipMutation()
        for _ in range(200):
            gene = BitVector(1)
            mutation(gene, 3, 1.0, rng)
            assert gene.to_number(8) & 0b00011111 == 0
            assert gene.to_number(3) != 0
