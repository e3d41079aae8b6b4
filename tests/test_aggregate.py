# Copyright (c) 2026 Colorsense
# SPDX-License-Identifier: MIT

"""Tests for perception aggregation (weighted main category, sequences)."""

import numpy as np
import pytest

from colorsense.errors import AggregationClosedError
from colorsense.schema import Category, ClassificationResult
from colorsense.measure.aggregate import PerceptionAggregator

# Exact reference anchors, so classification is unambiguous
GREY = (0x9E, 0x9E, 0x9E)
MAGENTA = (0xFF, 0x00, 0xFF)
GREEN = (0x4C, 0xAF, 0x50)
BLUE = (0x21, 0x96, 0xF3)
RED = (0xF4, 0x43, 0x36)


class TestAddSample:

    def test_returns_category(self):
        agg = PerceptionAggregator()
        assert agg.add_sample(MAGENTA, 200) is Category.MAGENTA

    def test_sequences_follow_sample_order(self):
        agg = PerceptionAggregator()
        agg.add_sample(RED, 10)
        agg.add_sample(GREY, 20)
        agg.add_sample(RED, 30)
        result = agg.finalize()
        assert result.categories == (Category.RED, Category.GREY, Category.RED)
        assert result.luminance == (10, 20, 30)

    def test_tally_uses_weights(self):
        agg = PerceptionAggregator()
        agg.add_sample(GREY, 0)
        agg.add_sample(GREY, 0)
        agg.add_sample(RED, 0)
        assert agg.tally == {Category.GREY: 2, Category.RED: 4}

    def test_sample_count(self):
        agg = PerceptionAggregator()
        assert agg.sample_count == 0
        agg.add_sample(GREY, 0)
        assert agg.sample_count == 1

    @pytest.mark.parametrize("brightness", [-1, 256, 1.5, "80", True])
    def test_rejects_bad_brightness(self, brightness):
        agg = PerceptionAggregator()
        with pytest.raises(ValueError):
            agg.add_sample(GREY, brightness)
        assert agg.sample_count == 0

    def test_accepts_numpy_brightness(self):
        agg = PerceptionAggregator()
        agg.add_sample(GREY, np.uint8(77))
        assert agg.finalize().luminance == (77,)


class TestMainCategory:

    def test_salience_beats_frequency(self):
        """3 x grey (weight 1) = 3 < 1 x magenta (weight 5) = 5."""
        agg = PerceptionAggregator()
        for _ in range(3):
            agg.add_sample(GREY, 128)
        agg.add_sample(MAGENTA, 128)
        assert agg.main_category() is Category.MAGENTA

    def test_frequency_wins_when_enough(self):
        agg = PerceptionAggregator()
        for _ in range(6):
            agg.add_sample(GREY, 128)
        agg.add_sample(MAGENTA, 128)
        assert agg.main_category() is Category.GREY

    def test_tie_goes_to_lowest_ordinal(self):
        # Green and blue both weigh 3; BLUE (6) < GREEN (9)
        agg = PerceptionAggregator()
        agg.add_sample(GREEN, 0)
        agg.add_sample(BLUE, 0)
        assert agg.main_category() is Category.BLUE

    def test_tie_independent_of_order(self):
        agg = PerceptionAggregator()
        agg.add_sample(BLUE, 0)
        agg.add_sample(GREEN, 0)
        assert agg.main_category() is Category.BLUE

    def test_empty_defaults_to_black(self):
        agg = PerceptionAggregator()
        assert agg.main_category() is Category.BLACK
        assert agg.sample_count == 0


class TestBatch:

    def test_matches_sequential(self):
        pixels = np.random.RandomState(11).randint(0, 256, (64, 3))
        levels = np.random.RandomState(12).randint(0, 256, 64)

        one = PerceptionAggregator()
        for rgb, level in zip(pixels, levels):
            one.add_sample(tuple(rgb), level)

        batch = PerceptionAggregator()
        batch.add_samples(pixels, levels)

        assert batch.tally == one.tally
        assert batch.finalize() == one.finalize()

    def test_length_mismatch(self):
        agg = PerceptionAggregator()
        with pytest.raises(ValueError, match="brightness"):
            agg.add_samples([GREY, RED], [1])
        assert agg.sample_count == 0

    def test_empty_batch(self):
        agg = PerceptionAggregator()
        assert agg.add_samples([], []) == ()
        assert agg.sample_count == 0


class TestMerge:

    def test_merge_equals_sequential(self):
        left = PerceptionAggregator()
        left.add_sample(GREY, 1)
        left.add_sample(RED, 2)
        right = PerceptionAggregator()
        right.add_sample(MAGENTA, 3)

        whole = PerceptionAggregator()
        for rgb, level in [(GREY, 1), (RED, 2), (MAGENTA, 3)]:
            whole.add_sample(rgb, level)

        left.merge(right)
        assert left.tally == whole.tally
        assert left.finalize() == whole.finalize()

    def test_merge_leaves_other_untouched(self):
        left = PerceptionAggregator()
        right = PerceptionAggregator()
        right.add_sample(RED, 9)
        left.merge(right)
        assert right.sample_count == 1
        assert right.tally == {Category.RED: 4}


class TestFinalize:

    def test_result_type(self):
        agg = PerceptionAggregator()
        agg.add_sample(RED, 99)
        result = agg.finalize(chroma=42)
        assert isinstance(result, ClassificationResult)
        assert result.main_category is Category.RED
        assert result.chroma == 42

    def test_empty_result(self):
        result = PerceptionAggregator().finalize()
        assert result.is_empty
        assert result.main_category is Category.BLACK
        assert result.categories == ()
        assert result.luminance == ()

    def test_closed_after_finalize(self):
        agg = PerceptionAggregator()
        agg.add_sample(RED, 1)
        agg.finalize()
        assert agg.closed
        with pytest.raises(AggregationClosedError):
            agg.add_sample(RED, 1)
        with pytest.raises(AggregationClosedError):
            agg.add_samples([RED], [1])
        with pytest.raises(AggregationClosedError):
            agg.merge(PerceptionAggregator())
        with pytest.raises(AggregationClosedError):
            agg.finalize()

    def test_bad_chroma_keeps_aggregator_open(self):
        agg = PerceptionAggregator()
        with pytest.raises(ValueError, match="Chroma"):
            agg.finalize(chroma=300)
        assert not agg.closed

    def test_early_finalize_on_partial_data(self):
        agg = PerceptionAggregator()
        agg.add_sample(GREEN, 5)
        result = agg.finalize()
        assert result.sample_count == 1
        assert result.main_category is Category.GREEN
