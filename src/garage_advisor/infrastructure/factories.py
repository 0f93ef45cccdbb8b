# File: src/garage_advisor/infrastructure/factories.py
"""
Factory Pattern Implementation for the Garage Advisor

This module builds the objects the table-driven evaluator depends on:
1. Strategy Factories - Create time-of-day, duration and rate strategies
2. Rule Factories - Assemble the reference recommendation table and the
   business rule registry
3. initialize() - Produce the immutable GarageRules snapshot

initialize() has no side effects, so it can be called any number of times
and always yields equal snapshots.
"""

import logging
from abc import ABC, abstractmethod
from typing import Dict, Generic, Tuple, TypeVar, Union

from ..domain.models import CarClass, GarageLevel, GarageLevelSection, GarageSection, TimeOfDay
from ..domain.rule_tables import (
    BusinessRuleRegistry, GarageRules, RecommendationTable, RecommendationTableBuilder
)
from ..domain.strategies import (
    BaseDurationStrategy, BaseRateStrategy, BusinessRule,
    DiscountedRateStrategy, DurationStrategy, DurationStrategyType,
    HourlyTimeOfDayStrategy, LegacyTimeOfDayStrategy, MinimumStayDurationStrategy,
    RateStrategy, RateStrategyType, TimeOfDayStrategy, TimeOfDayStrategyType
)

T = TypeVar('T')

logger = logging.getLogger(__name__)


# ============================================================================
# REFERENCE DATA
# ============================================================================

L1, L2, L3 = GarageLevel.LEVEL1, GarageLevel.LEVEL2, GarageLevel.LEVEL3
S1, S2, S3 = GarageSection.SECTION1, GarageSection.SECTION2, GarageSection.SECTION3

REFERENCE_RECOMMENDATIONS: Tuple[Tuple[CarClass, TimeOfDay, int, GarageLevel, GarageSection], ...] = (
    (CarClass.CLASSIC, TimeOfDay.MORNING, 1, L1, S1),
    (CarClass.CLASSIC, TimeOfDay.MORNING, 2, L2, S1),
    (CarClass.CLASSIC, TimeOfDay.ANY, 1, L1, S2),
    (CarClass.CLASSIC, TimeOfDay.ANY, 2, L2, S2),
    (CarClass.LUXURY, TimeOfDay.MORNING, 1, L3, S1),
    (CarClass.LUXURY, TimeOfDay.MORNING, 2, L2, S1),
    (CarClass.LUXURY, TimeOfDay.AFTERNOON, 1, L3, S2),
    (CarClass.LUXURY, TimeOfDay.AFTERNOON, 2, L2, S2),
    (CarClass.LUXURY, TimeOfDay.EVENING, 1, L3, S3),
    (CarClass.LUXURY, TimeOfDay.EVENING, 2, L2, S3),
    (CarClass.SPORT, TimeOfDay.EVENING, 1, L3, S3),
    (CarClass.SPORT, TimeOfDay.EVENING, 2, L2, S3),
    (CarClass.SPORT, TimeOfDay.ANY, 1, L2, S2),
    (CarClass.SPORT, TimeOfDay.ANY, 2, L3, S2),
)

REFERENCE_RULES: Dict[CarClass, Tuple[TimeOfDayStrategyType, DurationStrategyType, RateStrategyType]] = {
    CarClass.CLASSIC: (TimeOfDayStrategyType.BY_HOUR, DurationStrategyType.BASE, RateStrategyType.BASE),
    CarClass.LUXURY: (TimeOfDayStrategyType.BY_HOUR, DurationStrategyType.MINIMUM, RateStrategyType.DISCOUNTED),
    CarClass.SPORT: (TimeOfDayStrategyType.LEGACY, DurationStrategyType.BASE, RateStrategyType.DISCOUNTED),
}


# ============================================================================
# FACTORY INTERFACES
# ============================================================================

class Factory(ABC, Generic[T]):
    """Base factory interface"""

    @abstractmethod
    def create(self, **kwargs) -> T:
        """Create an instance of T"""
        pass


class StrategyFactory(ABC, Generic[T]):
    """Factory for strategy objects, selected by strategy type"""

    @abstractmethod
    def create_by_type(self, strategy_type) -> T:
        """Create strategy by type name"""
        pass

    @staticmethod
    def _resolve_type(strategy_type, enum_class):
        # Accept either the enum or its string value
        if isinstance(strategy_type, enum_class):
            return strategy_type
        try:
            return enum_class(strategy_type)
        except ValueError:
            raise ValueError(f"Unknown {enum_class.__name__}: {strategy_type}") from None


# ============================================================================
# STRATEGY FACTORIES
# ============================================================================

class TimeOfDayStrategyFactory(StrategyFactory[TimeOfDayStrategy]):
    """Factory for creating TimeOfDayStrategy instances"""

    def create_by_type(self, strategy_type: Union[str, TimeOfDayStrategyType]) -> TimeOfDayStrategy:
        strategy_type = self._resolve_type(strategy_type, TimeOfDayStrategyType)
        strategy_map = {
            TimeOfDayStrategyType.LEGACY: LegacyTimeOfDayStrategy,
            TimeOfDayStrategyType.BY_HOUR: HourlyTimeOfDayStrategy,
        }
        return strategy_map[strategy_type]()


class DurationStrategyFactory(StrategyFactory[DurationStrategy]):
    """Factory for creating DurationStrategy instances"""

    def create_by_type(self, strategy_type: Union[str, DurationStrategyType]) -> DurationStrategy:
        strategy_type = self._resolve_type(strategy_type, DurationStrategyType)
        strategy_map = {
            DurationStrategyType.BASE: BaseDurationStrategy,
            DurationStrategyType.MINIMUM: MinimumStayDurationStrategy,
        }
        return strategy_map[strategy_type]()


class RateStrategyFactory(StrategyFactory[RateStrategy]):
    """Factory for creating RateStrategy instances"""

    def create_by_type(self, strategy_type: Union[str, RateStrategyType]) -> RateStrategy:
        strategy_type = self._resolve_type(strategy_type, RateStrategyType)
        strategy_map = {
            RateStrategyType.BASE: BaseRateStrategy,
            RateStrategyType.DISCOUNTED: DiscountedRateStrategy,
        }
        return strategy_map[strategy_type]()


# ============================================================================
# RULE FACTORIES
# ============================================================================

class BusinessRuleFactory(Factory[BusinessRule]):
    """Factory for creating BusinessRule bundles"""

    def __init__(self):
        self.time_of_day_factory = TimeOfDayStrategyFactory()
        self.duration_factory = DurationStrategyFactory()
        self.rate_factory = RateStrategyFactory()

    def create(
        self,
        time_of_day: Union[str, TimeOfDayStrategyType] = TimeOfDayStrategyType.LEGACY,
        duration: Union[str, DurationStrategyType] = DurationStrategyType.BASE,
        rate: Union[str, RateStrategyType] = RateStrategyType.BASE,
        **kwargs
    ) -> BusinessRule:
        return BusinessRule(
            time_of_day=self.time_of_day_factory.create_by_type(time_of_day),
            duration=self.duration_factory.create_by_type(duration),
            rate=self.rate_factory.create_by_type(rate)
        )

    def create_registry(self, rule_types=None) -> BusinessRuleRegistry:
        """Create the registry from strategy type triples, reference rules by default"""
        rule_types = REFERENCE_RULES if rule_types is None else rule_types
        rules = {
            car_class: self.create(time_of_day=tod, duration=duration, rate=rate)
            for car_class, (tod, duration, rate) in rule_types.items()
        }
        return BusinessRuleRegistry(rules)


class RecommendationTableFactory(Factory[RecommendationTable]):
    """Factory for creating RecommendationTable instances"""

    def create(self, rows=None, **kwargs) -> RecommendationTable:
        """Create a table from (class, time of day, slot, level, section) rows, reference rows by default"""
        rows = REFERENCE_RECOMMENDATIONS if rows is None else rows
        builder = RecommendationTableBuilder()
        for car_class, time_of_day, slot, level, section in rows:
            builder.put(car_class, time_of_day, slot, GarageLevelSection(level, section))
        return builder.build()


# ============================================================================
# INITIALIZATION
# ============================================================================

def initialize() -> GarageRules:
    """
    Build the reference rule snapshot for the table-driven evaluator

    Each call builds a fresh, read-only snapshot from the reference data;
    repeated calls produce equal snapshots.
    """
    rules = GarageRules(
        recommendations=RecommendationTableFactory().create(),
        business_rules=BusinessRuleFactory().create_registry()
    )
    logger.debug(
        f"Initialized {len(rules.recommendations)} recommendations "
        f"and {len(rules.business_rules)} business rules"
    )
    return rules
