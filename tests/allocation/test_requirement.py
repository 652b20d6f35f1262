"""Tests for the flat daily requirement."""

from datetime import timedelta

import pytest

from goalpace.allocation.requirement import (
    SessionGoalType,
    calculate_daily_requirement,
    calculate_session_requirement,
)


def test_even_split(today):
    result = calculate_daily_requirement(300, today, today + timedelta(days=10))
    assert result.remaining_days == 10
    assert result.per_day == 30
    assert not result.is_expired


def test_rounds_up(today):
    assert calculate_daily_requirement(301, today, today + timedelta(days=10)).per_day == 31


def test_expired(today):
    result = calculate_daily_requirement(300, today, today)
    assert result.is_expired
    assert result.remaining_days == 0
    assert result.per_day == 0


def test_completed(today):
    result = calculate_daily_requirement(-5, today, today + timedelta(days=4))
    assert not result.is_expired
    assert result.remaining_days == 4
    assert result.per_day == 0


def test_pomodoro_goal(today):
    result = calculate_session_requirement(SessionGoalType.POMODOROS, 20, 8, today, today + timedelta(days=4))
    assert result.pomodoros_per_day == 3
    assert result.hours_per_day == pytest.approx(1.25)


def test_minutes_goal(today):
    result = calculate_session_requirement("MINUTES", 600, 0, today, today + timedelta(days=5))
    assert result.remaining_days == 5
    assert result.pomodoros_per_day == 5
    assert result.hours_per_day == pytest.approx(2.0)


def test_session_expired(today):
    result = calculate_session_requirement("MINUTES", 600, 0, today, today - timedelta(days=1))
    assert result.is_expired
    assert result.pomodoros_per_day == 0
    assert result.hours_per_day == 0.0
