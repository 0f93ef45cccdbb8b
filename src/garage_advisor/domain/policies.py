# File: src/garage_advisor/domain/policies.py
"""
Rate and duration policies

Pure functions used by both evaluators:
1. Time-of-day classifiers
2. Stay duration estimators
3. Hourly rate estimators

All monetary values are Decimal.
"""

from datetime import datetime
from decimal import Decimal

from .models import GarageLevel, GarageSection, TimeOfDay


DISCOUNT_FACTOR = Decimal('0.85')
MINIMUM_STAY_HOURS = 2


# ============================================================================
# TIME-OF-DAY CLASSIFIERS
# ============================================================================

def time_of_day_legacy(timestamp: datetime) -> TimeOfDay:
    """Classify an entry time. The timestamp is ignored: always MORNING."""
    return TimeOfDay.MORNING


def time_of_day_by_hour(timestamp: datetime) -> TimeOfDay:
    """
    Classify an entry time by its hour on a 24-hour clock

    hour < 12 -> MORNING, 12 <= hour < 18 -> AFTERNOON,
    18 <= hour <= 24 -> EVENING, anything else -> ANY
    """
    hour = timestamp.hour
    if hour < 12:
        return TimeOfDay.MORNING
    elif 12 <= hour < 18:
        return TimeOfDay.AFTERNOON
    elif 18 <= hour <= 24:
        return TimeOfDay.EVENING
    else:
        return TimeOfDay.ANY


# ============================================================================
# DURATION ESTIMATORS
# ============================================================================

def base_duration_hours(time_of_day: TimeOfDay) -> int:
    """Expected stay in whole hours for a time-of-day bucket"""
    durations = {
        TimeOfDay.AFTERNOON: 2,
        TimeOfDay.MORNING: 8,
        TimeOfDay.EVENING: 12,
    }
    return durations.get(time_of_day, 1)


def min_duration(time_of_day: TimeOfDay) -> int:
    """Expected stay, never shorter than the minimum billable stay"""
    return max(base_duration_hours(time_of_day), MINIMUM_STAY_HOURS)


# ============================================================================
# RATE ESTIMATORS
# ============================================================================

def base_hourly_rate(level: GarageLevel, section: GarageSection) -> Decimal:
    """Hourly price for a garage placement"""
    if level == GarageLevel.LEVEL1:
        if section == GarageSection.SECTION1:
            return Decimal('5.00')
        return Decimal('7.00')
    elif level == GarageLevel.LEVEL2:
        if section == GarageSection.SECTION3:
            return Decimal('10.00')
        return Decimal('5.00')
    elif level == GarageLevel.LEVEL3:
        return Decimal('10.00')
    return Decimal('5.00')


def discounted_rate(level: GarageLevel, section: GarageSection) -> Decimal:
    """Hourly price with the 15% discount applied"""
    return base_hourly_rate(level, section) * DISCOUNT_FACTOR
