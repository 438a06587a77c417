"""Tests for escalation schedules."""

import itertools

import pytest

from lease_tracker.schemas.domain import ManualEscalationRow
from lease_tracker.services.escalation import (
    EscalationMode,
    automatic_schedule,
    compute_schedule,
    manual_schedule,
    schedule_for_contract,
)


def as_pairs(rows):
    return [(r.month, r.amount) for r in rows]


class TestAutomaticSchedule:
    def test_stops_when_regime_is_reached(self):
        rows = automatic_schedule(100, 50, 5, 220)
        assert as_pairs(rows) == [(1, 100), (2, 150), (3, 200), (4, 220)]

    @pytest.mark.parametrize(
        "monthly, increment, max_months, regime",
        [
            (0, 50, 5, 220),
            (100, 50, 5, 0),
            (100, 50, 0, 220),
            (None, 50, 5, 220),
            ("", "", "", ""),
        ],
    )
    def test_missing_inputs_give_empty_schedule(self, monthly, increment, max_months, regime):
        assert automatic_schedule(monthly, increment, max_months, regime) == []

    def test_capped_by_max_months(self):
        rows = automatic_schedule(100, 10, 3, 1000)
        assert as_pairs(rows) == [(1, 100), (2, 110), (3, 120), (4, 130)]

    def test_amounts_rounded_to_cents_without_drift(self):
        rows = automatic_schedule(100, 0.333, 2, 1000)
        assert [r.amount for r in rows] == [100, 100.33, 100.67]

    def test_zero_increment_holds_the_payment(self):
        rows = automatic_schedule(100, 0, 3, 200)
        assert [r.amount for r in rows] == [100, 100, 100, 100]

    def test_start_above_regime_is_held_at_regime(self):
        assert as_pairs(automatic_schedule(300, 10, 5, 220)) == [(1, 220)]

    def test_start_equal_to_regime(self):
        assert as_pairs(automatic_schedule(220, 10, 5, 220)) == [(1, 220), (2, 220)]

    def test_exact_hit_on_regime(self):
        rows = automatic_schedule(100, 50, 10, 200)
        assert as_pairs(rows) == [(1, 100), (2, 150), (3, 200)]

    def test_schedule_shape_over_input_grid(self):
        starts = [1, 99.5, 100, 500, 2600, 5000]
        increments = [0, 0.01, 7.5, 50, 1000]
        caps = [1, 2, 12, 60]
        regimes = [500, 1000, 2500.75]
        for start, step, cap, regime in itertools.product(starts, increments, caps, regimes):
            rows = automatic_schedule(start, step, cap, regime)
            amounts = [r.amount for r in rows]
            assert 1 <= len(rows) <= cap + 1
            assert amounts == sorted(amounts)
            assert amounts[-1] <= regime
            assert [r.month for r in rows] == list(range(1, len(rows) + 1))
            if regime in amounts:
                # once the regime is reached nothing follows it
                assert amounts[-1] == regime
                assert amounts.count(regime) <= 2


class TestManualSchedule:
    def test_blank_rows_dropped_and_values_coerced(self):
        rows = [
            ManualEscalationRow(month=1, amount="100"),
            ManualEscalationRow(month="", amount=50),
            ManualEscalationRow(month=3, amount=""),
            ManualEscalationRow(month="2", amount="80.5"),
            ManualEscalationRow(month="abc", amount=1),
        ]
        assert as_pairs(manual_schedule(rows)) == [(1, 100), (2, 80.5)]

    def test_duplicates_and_order_are_kept(self):
        rows = [
            ManualEscalationRow(month=3, amount=300),
            ManualEscalationRow(month=1, amount=100),
            ManualEscalationRow(month=3, amount=310),
        ]
        assert as_pairs(manual_schedule(rows)) == [(3, 300), (1, 100), (3, 310)]

    def test_months_below_one_are_dropped(self):
        rows = [ManualEscalationRow(month=0, amount=10), ManualEscalationRow(month=1, amount=10)]
        assert as_pairs(manual_schedule(rows)) == [(1, 10)]


def test_compute_schedule_dispatches_on_mode():
    manual = [ManualEscalationRow(month=1, amount=5)]
    assert as_pairs(compute_schedule(EscalationMode.manual, manual_rows=manual)) == [(1, 5)]
    auto = compute_schedule(
        EscalationMode.auto,
        monthly_amount=100,
        increment=50,
        max_months=5,
        regime_amount=220,
        manual_rows=manual,
    )
    assert len(auto) == 4


def test_schedule_for_contract(make_contract):
    contract = make_contract(
        monthly_amount=100,
        escalation_fixed_increment=50,
        escalation_max_months=5,
        regime_amount=220,
    )
    assert as_pairs(schedule_for_contract(contract))[-1] == (4, 220)
