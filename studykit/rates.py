"""Freelancer rate calculations: daily and monthly rates and budgets."""

from __future__ import annotations

import math

HOURS_PER_DAY = 8.0
BILLABLE_DAYS_PER_MONTH = 22


def daily_rate(hourly_rate: float) -> float:
    """Return the rate for one eight-hour working day."""
    return hourly_rate * HOURS_PER_DAY


def apply_discount(before_discount: float, discount: float) -> float:
    """Return the price after taking a percentage discount off."""
    return before_discount - (discount / 100) * before_discount


def monthly_rate(hourly_rate: float, discount: float) -> int:
    """Return the discounted rate for a month of work, rounded up."""
    return math.ceil(
        apply_discount(daily_rate(hourly_rate) * BILLABLE_DAYS_PER_MONTH, discount)
    )


def days_in_budget(budget: int, hourly_rate: float, discount: float) -> int:
    """Return how many complete discounted working days a budget covers."""
    return math.floor(budget / apply_discount(daily_rate(hourly_rate), discount))