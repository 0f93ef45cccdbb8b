# File: src/garage_advisor/domain/strategies.py
"""
Strategy Pattern Implementation for the Garage Advisor

Each car class is evaluated with three interchangeable algorithms:
1. Time-of-day Strategies - How an entry timestamp is bucketed
2. Duration Strategies - How long the car is expected to stay
3. Rate Strategies - What a placement costs per hour

A BusinessRule bundles one strategy of each kind. Strategies are stateless,
so two instances of the same strategy class compare equal.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum

from .models import GarageLevelSection, HourlyEstimate, TimeOfDay
from .policies import (
    base_duration_hours, base_hourly_rate, discounted_rate,
    min_duration, time_of_day_by_hour, time_of_day_legacy
)


# ============================================================================
# STRATEGY TYPES
# ============================================================================

class TimeOfDayStrategyType(Enum):
    LEGACY = "legacy"
    BY_HOUR = "by_hour"


class DurationStrategyType(Enum):
    BASE = "base"
    MINIMUM = "minimum"


class RateStrategyType(Enum):
    BASE = "base"
    DISCOUNTED = "discounted"


# ============================================================================
# STRATEGY INTERFACES
# ============================================================================

class Strategy(ABC):
    """Common behaviour for stateless strategies"""

    def get_strategy_name(self) -> str:
        """Get human-readable strategy name"""
        return self.__class__.__name__.replace("Strategy", "")

    def __eq__(self, other) -> bool:
        return type(self) is type(other)

    def __hash__(self) -> int:
        return hash(type(self))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"

    def __str__(self) -> str:
        return f"{self.get_strategy_name()} Strategy"


class TimeOfDayStrategy(Strategy):
    """
    Abstract base class for time-of-day classification
    """

    @abstractmethod
    def classify(self, timestamp: datetime) -> TimeOfDay:
        """
        Bucket an entry timestamp
        Returns: TimeOfDay bucket
        """
        pass


class DurationStrategy(Strategy):
    """
    Abstract base class for stay duration estimation
    """

    @abstractmethod
    def estimate_hours(self, time_of_day: TimeOfDay) -> int:
        """
        Estimate the stay for a time-of-day bucket
        Returns: Whole hours
        """
        pass


class RateStrategy(Strategy):
    """
    Abstract base class for hourly rate estimation
    """

    @abstractmethod
    def hourly_rate(self, placement: GarageLevelSection) -> Decimal:
        """
        Price a placement per hour
        Returns: Hourly rate
        """
        pass


# ============================================================================
# TIME-OF-DAY STRATEGIES
# ============================================================================

class LegacyTimeOfDayStrategy(TimeOfDayStrategy):
    """Always MORNING, whatever the timestamp"""

    def classify(self, timestamp: datetime) -> TimeOfDay:
        return time_of_day_legacy(timestamp)


class HourlyTimeOfDayStrategy(TimeOfDayStrategy):
    """Buckets by the hour of the entry timestamp"""

    def classify(self, timestamp: datetime) -> TimeOfDay:
        return time_of_day_by_hour(timestamp)


# ============================================================================
# DURATION STRATEGIES
# ============================================================================

class BaseDurationStrategy(DurationStrategy):

    def estimate_hours(self, time_of_day: TimeOfDay) -> int:
        return base_duration_hours(time_of_day)


class MinimumStayDurationStrategy(DurationStrategy):
    """Base duration, raised to the minimum billable stay"""

    def estimate_hours(self, time_of_day: TimeOfDay) -> int:
        return min_duration(time_of_day)


# ============================================================================
# RATE STRATEGIES
# ============================================================================

class BaseRateStrategy(RateStrategy):

    def hourly_rate(self, placement: GarageLevelSection) -> Decimal:
        return base_hourly_rate(placement.level, placement.section)


class DiscountedRateStrategy(RateStrategy):
    """Base rate with the 15% discount"""

    def hourly_rate(self, placement: GarageLevelSection) -> Decimal:
        return discounted_rate(placement.level, placement.section)


# ============================================================================
# BUSINESS RULE
# ============================================================================

@dataclass(frozen=True)
class BusinessRule:
    """
    Per-car-class bundle of strategies used by the rule table evaluator
    """
    time_of_day: TimeOfDayStrategy
    duration: DurationStrategy
    rate: RateStrategy

    def classify(self, timestamp: datetime) -> TimeOfDay:
        return self.time_of_day.classify(timestamp)

    def estimate(self, placement: GarageLevelSection, time_of_day: TimeOfDay) -> HourlyEstimate:
        """Stay estimate for one placement"""
        return HourlyEstimate(
            hours=self.duration.estimate_hours(time_of_day),
            hourly_rate=self.rate.hourly_rate(placement)
        )

    def describe(self) -> str:
        return (
            f"{self.time_of_day.get_strategy_name()} / "
            f"{self.duration.get_strategy_name()} / "
            f"{self.rate.get_strategy_name()}"
        )
