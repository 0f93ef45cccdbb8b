# File: src/garage_advisor/domain/rule_tables.py
"""
Rule tables for the table-driven evaluator

1. RecommendationTable - (car class, time of day, slot) -> placement, with a
   fallback to the ANY time-of-day bucket
2. BusinessRuleRegistry - car class -> BusinessRule
3. GarageRules - the snapshot handed to the evaluator

Tables are assembled with builders and are read-only once built.
"""

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Tuple

from .exceptions import MissingRecommendationError, MissingRuleError
from .models import Car, CarClass, GarageLevelSection, RecommendationKey, TimeOfDay
from .strategies import BusinessRule


logger = logging.getLogger(__name__)


# ============================================================================
# RECOMMENDATION TABLE
# ============================================================================

class RecommendationTable:
    """
    Read-only composite-key lookup of ranked placements
    """

    def __init__(self, entries: Mapping[RecommendationKey, GarageLevelSection]):
        self._entries = MappingProxyType(dict(entries))

    def get(self, car_class: CarClass, time_of_day: TimeOfDay, slot: int) -> GarageLevelSection:
        """
        Look up a placement

        The exact key wins; otherwise the same car class and slot are tried
        with TimeOfDay.ANY.

        Raises: MissingRecommendationError if both lookups miss
        """
        key = RecommendationKey(car_class, time_of_day, slot)
        placement = self._entries.get(key)
        if placement is not None:
            return placement

        fallback = key.with_any_time()
        placement = self._entries.get(fallback)
        if placement is not None:
            logger.debug(f"No entry for {key}, using fallback {fallback}")
            return placement

        raise MissingRecommendationError(key)

    def find(self, car_class: CarClass, time_of_day: TimeOfDay, slot: int) -> Optional[GarageLevelSection]:
        """Exact-key lookup without fallback"""
        return self._entries.get(RecommendationKey(car_class, time_of_day, slot))

    def __len__(self) -> int:
        return len(self._entries)

    def __eq__(self, other) -> bool:
        if not isinstance(other, RecommendationTable):
            return NotImplemented
        return dict(self._entries) == dict(other._entries)

    __hash__ = None

    def __repr__(self) -> str:
        return f"RecommendationTable({len(self)} entries)"


class RecommendationTableBuilder:
    """
    Collects table entries during initialization
    """

    def __init__(self):
        self._entries: Dict[RecommendationKey, GarageLevelSection] = {}

    def put(
        self,
        car_class: CarClass,
        time_of_day: TimeOfDay,
        slot: int,
        placement: GarageLevelSection
    ) -> 'RecommendationTableBuilder':
        """Register a placement; a repeated key is overwritten"""
        self._entries[RecommendationKey(car_class, time_of_day, slot)] = placement
        return self

    def build(self) -> RecommendationTable:
        return RecommendationTable(self._entries)


# ============================================================================
# BUSINESS RULE REGISTRY
# ============================================================================

class BusinessRuleRegistry:
    """
    Read-only mapping of car class to business rule
    """

    def __init__(self, rules: Mapping[CarClass, BusinessRule]):
        self._rules = MappingProxyType(dict(rules))

    def lookup_rule(self, car: Car) -> BusinessRule:
        """
        Get the rule for a car's class

        Raises: MissingRuleError if the class has no rule
        """
        return self.rule_for(car.car_class)

    def rule_for(self, car_class: CarClass) -> BusinessRule:
        rule = self._rules.get(car_class)
        if rule is None:
            raise MissingRuleError(car_class)
        return rule

    def car_classes(self) -> Tuple[CarClass, ...]:
        return tuple(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __eq__(self, other) -> bool:
        if not isinstance(other, BusinessRuleRegistry):
            return NotImplemented
        return dict(self._rules) == dict(other._rules)

    __hash__ = None

    def __repr__(self) -> str:
        return f"BusinessRuleRegistry({len(self)} rules)"


# ============================================================================
# SNAPSHOT
# ============================================================================

@dataclass(frozen=True)
class GarageRules:
    """
    Everything the table-driven evaluator reads, built once
    """
    recommendations: RecommendationTable
    business_rules: BusinessRuleRegistry

    # compared by value like its tables, so unhashable
    __hash__ = None
