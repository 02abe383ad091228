"""Tests for the seeded Lehmer generator and named draw stream."""

import pytest

from src.simulator.errors import InvalidConfigError
from src.simulator.rng import (
    MODULUS,
    Draw,
    DrawStream,
    LehmerState,
    next_value,
    seed_state,
)


def _states(seed: int, n: int) -> list[int]:
    state = seed_state(seed)
    out = []
    for _ in range(n):
        _, state = next_value(state)
        out.append(state.state)
    return out


class TestLehmerGenerator:
    def test_minimal_standard_sequence_from_seed_one(self):
        assert _states(1, 5) == [16807, 282475249, 1622650073, 984943658, 1144108930]

    def test_ten_thousandth_state_from_seed_one(self):
        """Classic Park-Miller check value."""
        assert _states(1, 10000)[-1] == 1043618065

    def test_demo_seed_sequence(self):
        assert _states(2025, 4) == [34034175, 781729123, 216417915, 1646083034]

    def test_value_is_state_over_modulus(self):
        value, state = next_value(LehmerState(2025))
        assert state == LehmerState(34034175)
        assert value == 34034175 / MODULUS

    def test_next_value_does_not_mutate(self):
        start = seed_state(7)
        a = next_value(start)
        b = next_value(start)
        assert a == b
        assert start.state == 7

    def test_values_in_unit_interval(self):
        for seed in (1, 2, 42, 2025, 123456789, MODULUS - 1, -5):
            state = seed_state(seed)
            for _ in range(500):
                value, state = next_value(state)
                assert 0.0 <= value < 1.0

    def test_seed_reduced_modulo(self):
        assert seed_state(MODULUS + 3) == LehmerState(3)

    def test_degenerate_seed_rejected(self):
        with pytest.raises(InvalidConfigError, match="degenerate"):
            seed_state(0)
        with pytest.raises(InvalidConfigError):
            seed_state(MODULUS * 2)


class TestDrawStream:
    def test_same_seed_same_sequence(self):
        a = DrawStream(2025)
        b = DrawStream(2025)
        seq_a = [a.draw(Draw.HOUR_PICK) for _ in range(100)]
        seq_b = [b.draw(Draw.HOUR_PICK) for _ in range(100)]
        assert seq_a == seq_b

    def test_different_seed_different_sequence(self):
        a = DrawStream(2025)
        b = DrawStream(2026)
        assert [a.draw(Draw.VIEWS_JITTER) for _ in range(10)] != [
            b.draw(Draw.VIEWS_JITTER) for _ in range(10)
        ]

    def test_streams_are_independent(self):
        a = DrawStream(2025)
        b = DrawStream(2025)
        for _ in range(5):
            a.draw(Draw.HOUR_PICK)
        assert b.draw(Draw.HOUR_PICK) == 34034175 / MODULUS
        assert b.count == 1
        assert a.count == 5

    def test_draw_name_does_not_affect_value(self):
        a = DrawStream(99)
        b = DrawStream(99)
        assert a.draw(Draw.VIEWS_JITTER) == b.draw(Draw.PREPAID_JITTER)

    def test_trace_records_names_in_order(self):
        stream = DrawStream(2025, record=True)
        v1 = stream.draw(Draw.VIEWS_JITTER)
        v2 = stream.draw(Draw.VISITOR_RATE)
        assert stream.trace == [(Draw.VIEWS_JITTER, v1), (Draw.VISITOR_RATE, v2)]

    def test_no_trace_by_default(self):
        stream = DrawStream(2025)
        stream.draw(Draw.HOUR_PICK)
        assert stream.trace is None

    def test_draw_names(self):
        assert Draw.HOUR_OVERRIDE_CHECK.value == "hour-override-check"
        assert Draw.VIEWS_JITTER.value == "views-jitter"

    def test_stream_keeps_its_seed(self):
        stream = DrawStream(2025)
        stream.draw(Draw.HOUR_PICK)
        assert stream.seed == 2025
