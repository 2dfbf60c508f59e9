from __future__ import annotations

import pytest

from extras_control.core.enums import ValueType
from extras_control.payroll import engine
from extras_control.requests.model import TimeRecord, WorkDay


@pytest.mark.parametrize(
    "value, expected",
    [
        (100.56, 102),
        (100.54, 100),
        (100.55, 100),
        (127.05, 128),
        (123.50, 124),
        (110.0, 110),
        (0, 0),
    ],
)
def test_round_money_table(value, expected):
    assert engine.round_money(value) == expected


@pytest.mark.parametrize("value", [0.01, 1.0, 3.3, 99.99, 100.55, 101.0, 127.05, 1234.567, -0.3, -7.8])
def test_round_money_is_even_and_idempotent(value):
    once = engine.round_money(value)
    assert once % 2 == 0
    assert engine.round_money(once) == once


def test_minutes_worked_subtracts_break():
    record = TimeRecord(arrival="08:00", departure="17:00", break_start="12:00", break_end="13:00")
    assert engine.minutes_worked_in_day(record) == 8 * 60


def test_minutes_worked_crosses_midnight():
    assert engine.minutes_worked_in_day(TimeRecord(arrival="23:00", departure="01:00")) == 120


def test_inverted_break_is_ignored():
    record = TimeRecord(arrival="08:00", departure="17:00", break_start="13:00", break_end="12:00")
    assert engine.minutes_worked_in_day(record) == 540


def test_missing_departure_is_zero():
    assert engine.minutes_worked_in_day(TimeRecord(arrival="08:00")) == 0
    assert engine.minutes_worked_in_day(None) == 0


@pytest.mark.parametrize("bad", ["8h00", "08:0", "08:00:00", " 08:00", "", "abc"])
def test_malformed_times_count_as_absent(bad):
    assert engine.minutes_worked_in_day(TimeRecord(arrival=bad, departure="17:00")) == 0


def test_malformed_break_is_ignored():
    record = TimeRecord(arrival="8:00", departure="16:00", break_start="12h", break_end="13:00")
    assert engine.minutes_worked_in_day(record) == 480


def test_break_longer_than_shift_never_goes_negative():
    record = TimeRecord(arrival="10:00", departure="11:00", break_start="09:00", break_end="15:00")
    assert engine.minutes_worked_in_day(record) == 0


def test_minutes_to_hhmm():
    assert engine.minutes_to_hhmm(0) == ""
    assert engine.minutes_to_hhmm(-5) == ""
    assert engine.minutes_to_hhmm(426) == "07:06"
    assert engine.minutes_to_hhmm(1500) == "25:00"


def test_minutes_to_hhmm_rounds_remainder_without_carry():
    assert engine.minutes_to_hhmm(59.6) == "00:60"


def test_total_hours_worked_sums_days(make_day):
    days = [
        make_day("2026-02-01", "08:00", "16:20"),
        make_day("2026-02-02", "22:00", "02:00"),
        WorkDay(date="2026-02-03", shift="Tarde"),
    ]
    assert engine.total_hours_worked(days) == "12:20"
    assert engine.total_hours_worked([]) == ""


def test_round_hours():
    assert engine.round_hours_to_integer(7.4) == 7
    assert engine.round_hours_to_integer(7.5) == 8
    assert engine.round_hours_to_one_decimal(7.34) == 7.3
    assert engine.round_hours_to_one_decimal(7.35) == 7.4


def test_hours_worked_label():
    assert engine.hours_worked_label(TimeRecord(arrival="08:00", departure="15:20")) == "7,3h"
    assert engine.hours_worked_label(TimeRecord(arrival="08:00")) == ""


def test_hourly_day_of_standard_shift_pays_value(make_request, make_day):
    d = make_day("2026-02-02", "08:00", "15:20")
    req = make_request(value=110, work_days=(d,))
    assert engine.daily_value(req, d) == engine.round_money(110)
    assert engine.total_value(req) == 110


def test_hourly_total_sums_rounded_days(make_request, make_day):
    # 3h40 at 15/h = 55.00 per day, rounded to 56 before summing
    days = (
        make_day("2026-02-02", "08:00", "11:40"),
        make_day("2026-02-03", "08:00", "11:40"),
    )
    req = make_request(value=110, work_days=days)
    per_day = engine.daily_value(req, days[0])
    assert per_day == engine.round_money(55)
    assert engine.total_value(req) == engine.round_money(per_day * 2)


def test_hourly_day_without_departure_is_worth_zero(make_request, make_day):
    d = make_day("2026-02-02", "08:00")
    req = make_request(work_days=(d,))
    assert engine.daily_value(req, d) == 0
    assert engine.total_value(req) == 0


def test_combinado_scales_with_days(make_request, make_day):
    days = tuple(make_day(f"2026-02-0{i}") for i in (1, 2, 3))
    req = make_request(value_type=ValueType.COMBINADO, value=50, work_days=days)
    assert engine.total_value(req) == engine.round_money(150)
    assert all(engine.daily_value(req, d) == 50 for d in days)


def test_combinado_without_days_counts_one(make_request):
    req = make_request(value_type=ValueType.COMBINADO, value=51, work_days=())
    assert engine.total_value(req) == 52


@pytest.mark.parametrize("value_type", [ValueType.HOURLY, ValueType.COMBINADO])
def test_consolidated_total_overrides(make_request, make_day, value_type):
    d = make_day("2026-02-02", "08:00", "17:00")
    req = make_request(value_type=value_type, consolidated_total=300.56, work_days=(d,))
    assert engine.daily_value(req, d) == 0
    assert engine.total_value(req) == engine.round_money(300.56)


def test_consolidated_zero_is_still_an_override(make_request, make_day):
    d = make_day("2026-02-02", "08:00", "17:00")
    req = make_request(consolidated_total=0, work_days=(d,))
    assert engine.total_value(req) == 0
