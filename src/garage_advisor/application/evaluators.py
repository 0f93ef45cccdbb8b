# File: src/garage_advisor/application/evaluators.py
"""
Ticket evaluators

Two ways of expressing the same placement and pricing decision:
1. DecisionTreeEvaluator - hardcoded branches, legacy time-of-day bucketing,
   base duration and base rate for every car class
2. RuleTableEvaluator - recommendation table lookups and per-class business
   rules from an initialized GarageRules snapshot

Both run the same single pass:
resolve car type -> car class -> time of day -> two placements -> estimates.

The two agree only where the rule table's strategies happen to behave like
the decision tree (e.g. a CLASSIC car entering in the morning).
"""

import logging
from abc import ABC, abstractmethod
from typing import Tuple

from ..domain.exceptions import MissingRecommendationError, UnsupportedCarClassError
from ..domain.models import (
    Car, CarClass, GarageLevel, GarageLevelSection, GarageSection, HourlyEstimate,
    Recommendation, RecommendationKey, TimeOfDay, resolve_car_type
)
from ..domain.policies import base_duration_hours, base_hourly_rate, time_of_day_legacy
from ..domain.rule_tables import GarageRules
from ..domain.strategies import BusinessRule
from .dtos import TicketRequest, TicketResponse


# ============================================================================
# EVALUATOR INTERFACE
# ============================================================================

class TicketEvaluator(ABC):
    """
    Abstract base class for ticket evaluators
    """

    name = "evaluator"

    def __init__(self):
        self.logger = logging.getLogger(self.__class__.__name__)

    def evaluate(self, request: TicketRequest) -> TicketResponse:
        """
        Recommend two ranked placements for a request

        Raises: GarageAdvisorError subclasses for unknown models or missing rules
        """
        self.logger.info(
            f"Evaluating {request.model_name!r} ({request.make_year}) entering at "
            f"{request.entry_timestamp.isoformat()}"
        )
        car = Car(resolve_car_type(request.model_name), request.make_year)
        first, second = self._recommend(car, request)
        response = TicketResponse(
            entry_timestamp=request.entry_timestamp,
            car=car,
            recommendation1=first,
            recommendation2=second
        )
        self.logger.info(f"{car}: 1) {first}  2) {second}")
        return response

    @abstractmethod
    def _recommend(self, car: Car, request: TicketRequest) -> Tuple[Recommendation, Recommendation]:
        """
        Produce the first and second recommendation for a resolved car
        """
        pass


# ============================================================================
# DECISION TREE
# ============================================================================

class DecisionTreeEvaluator(TicketEvaluator):
    """
    Hardcoded decision tree

    Uses the legacy time-of-day classifier for every class, and base
    duration and base rate for both placements. Needs no initialization.
    """

    name = "tree"

    def _recommend(self, car: Car, request: TicketRequest) -> Tuple[Recommendation, Recommendation]:
        time_of_day = time_of_day_legacy(request.entry_timestamp)
        first, second = self._placements(car.car_class, time_of_day)
        return (
            self._estimate(first, time_of_day),
            self._estimate(second, time_of_day)
        )

    def _placements(
        self,
        car_class: CarClass,
        time_of_day: TimeOfDay
    ) -> Tuple[GarageLevelSection, GarageLevelSection]:
        if car_class == CarClass.CLASSIC:
            if time_of_day == TimeOfDay.MORNING:
                return (
                    GarageLevelSection(GarageLevel.LEVEL1, GarageSection.SECTION1),
                    GarageLevelSection(GarageLevel.LEVEL2, GarageSection.SECTION1)
                )
            return (
                GarageLevelSection(GarageLevel.LEVEL1, GarageSection.SECTION2),
                GarageLevelSection(GarageLevel.LEVEL2, GarageSection.SECTION2)
            )

        elif car_class == CarClass.LUXURY:
            if time_of_day == TimeOfDay.MORNING:
                return (
                    GarageLevelSection(GarageLevel.LEVEL3, GarageSection.SECTION1),
                    GarageLevelSection(GarageLevel.LEVEL2, GarageSection.SECTION1)
                )
            elif time_of_day == TimeOfDay.AFTERNOON:
                return (
                    GarageLevelSection(GarageLevel.LEVEL3, GarageSection.SECTION2),
                    GarageLevelSection(GarageLevel.LEVEL2, GarageSection.SECTION2)
                )
            elif time_of_day == TimeOfDay.EVENING:
                return (
                    GarageLevelSection(GarageLevel.LEVEL3, GarageSection.SECTION3),
                    GarageLevelSection(GarageLevel.LEVEL2, GarageSection.SECTION3)
                )
            # LUXURY has no ANY placements
            raise MissingRecommendationError(RecommendationKey(car_class, time_of_day, 1))

        elif car_class == CarClass.SPORT:
            if time_of_day == TimeOfDay.EVENING:
                return (
                    GarageLevelSection(GarageLevel.LEVEL3, GarageSection.SECTION3),
                    GarageLevelSection(GarageLevel.LEVEL2, GarageSection.SECTION3)
                )
            return (
                GarageLevelSection(GarageLevel.LEVEL2, GarageSection.SECTION2),
                GarageLevelSection(GarageLevel.LEVEL3, GarageSection.SECTION2)
            )

        raise UnsupportedCarClassError(car_class)

    @staticmethod
    def _estimate(placement: GarageLevelSection, time_of_day: TimeOfDay) -> Recommendation:
        return Recommendation(
            placement=placement,
            estimate=HourlyEstimate(
                hours=base_duration_hours(time_of_day),
                hourly_rate=base_hourly_rate(placement.level, placement.section)
            )
        )


# ============================================================================
# RULE TABLE
# ============================================================================

class RuleTableEvaluator(TicketEvaluator):
    """
    Table and strategy driven evaluator

    Takes an initialized GarageRules snapshot, so it cannot run before the
    tables exist.
    """

    name = "table"

    def __init__(self, rules: GarageRules):
        super().__init__()
        self.rules = rules

    def _recommend(self, car: Car, request: TicketRequest) -> Tuple[Recommendation, Recommendation]:
        rule = self.rules.business_rules.lookup_rule(car)
        time_of_day = rule.classify(request.entry_timestamp)
        self.logger.debug(f"{car.car_class.name} uses {rule.describe()}; time of day {time_of_day.name}")
        return (
            self._recommend_slot(rule, car.car_class, time_of_day, 1),
            self._recommend_slot(rule, car.car_class, time_of_day, 2)
        )

    def _recommend_slot(
        self,
        rule: BusinessRule,
        car_class: CarClass,
        time_of_day: TimeOfDay,
        slot: int
    ) -> Recommendation:
        placement = self.rules.recommendations.get(car_class, time_of_day, slot)
        return Recommendation(placement=placement, estimate=rule.estimate(placement, time_of_day))
