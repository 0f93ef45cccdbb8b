# File: src/garage_advisor/domain/models.py
"""
Domain Models for the Garage Advisor

This module contains:
1. Enums: Car classes, car types (the model catalog), time-of-day buckets,
   garage levels and sections
2. Value Objects: Immutable, value-equal objects used by the evaluators
3. Catalog lookup: Resolving a model name to the car type that declares it

All value objects are frozen dataclasses and validate themselves on creation.
"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Dict, FrozenSet, List

from .exceptions import UnknownModelError


# ============================================================================
# ENUMS
# ============================================================================

class CarClass(Enum):
    """
    Coarse car category driving placement and pricing rules
    """
    LUXURY = "luxury"
    SPORT = "sport"
    CLASSIC = "classic"


class CarType(Enum):
    """
    Enumeration of known car makes
    Declaration order is the catalog lookup order
    """
    OLDSMOBILE = "oldsmobile"
    CADILLAC = "cadillac"
    ROLLS_ROYCE = "rolls_royce"
    BENTLEY = "bentley"
    MAYBACH = "maybach"
    FERRARI = "ferrari"
    PORSCHE = "porsche"
    LAMBORGHINI = "lamborghini"

    @property
    def car_class(self) -> CarClass:
        """Get the car class this type belongs to"""
        return _CAR_TYPE_CLASSES[self]

    @property
    def models(self) -> FrozenSet[str]:
        """Get the lowercase model names declared by this type"""
        return _CAR_TYPE_MODELS[self]


class TimeOfDay(Enum):
    """
    Time-of-day buckets used as rule keys
    ANY is the wildcard bucket for fallback lookups
    """
    MORNING = "morning"
    AFTERNOON = "afternoon"
    EVENING = "evening"
    ANY = "any"


class GarageLevel(Enum):
    """Garage floor"""
    LEVEL1 = "level1"
    LEVEL2 = "level2"
    LEVEL3 = "level3"

    @property
    def short_label(self) -> str:
        return f"L{self.name[-1]}"


class GarageSection(Enum):
    """Section within a garage floor"""
    SECTION1 = "section1"
    SECTION2 = "section2"
    SECTION3 = "section3"

    @property
    def short_label(self) -> str:
        return f"S{self.name[-1]}"


_CAR_TYPE_CLASSES: Dict[CarType, CarClass] = {
    CarType.OLDSMOBILE: CarClass.CLASSIC,
    CarType.CADILLAC: CarClass.CLASSIC,
    CarType.ROLLS_ROYCE: CarClass.LUXURY,
    CarType.BENTLEY: CarClass.LUXURY,
    CarType.MAYBACH: CarClass.LUXURY,
    CarType.FERRARI: CarClass.SPORT,
    CarType.PORSCHE: CarClass.SPORT,
    CarType.LAMBORGHINI: CarClass.SPORT,
}

_CAR_TYPE_MODELS: Dict[CarType, FrozenSet[str]] = {
    CarType.OLDSMOBILE: frozenset({"pirate", "cutlass", "delta 88", "toronado"}),
    CarType.CADILLAC: frozenset({"eldorado", "de ville", "fleetwood"}),
    CarType.ROLLS_ROYCE: frozenset({"phantom", "ghost", "wraith"}),
    CarType.BENTLEY: frozenset({"continental", "flying spur", "mulsanne"}),
    CarType.MAYBACH: frozenset({"exelero", "zeppelin", "landaulet"}),
    CarType.FERRARI: frozenset({"enzo", "testarossa", "f40"}),
    CarType.PORSCHE: frozenset({"911", "boxster", "cayman"}),
    CarType.LAMBORGHINI: frozenset({"countach", "diablo", "huracan"}),
}


def resolve_car_type(model_name: str) -> CarType:
    """
    Find the car type that declares a model name

    Types are scanned in declaration order and the first match wins.
    Matching is exact and case-sensitive.

    Raises: UnknownModelError if no type declares the model
    """
    for car_type in CarType:
        if model_name in car_type.models:
            return car_type
    raise UnknownModelError(model_name)


def catalog() -> Dict[CarType, List[str]]:
    """Get the model catalog as sorted model lists per car type"""
    return {car_type: sorted(car_type.models) for car_type in CarType}


# ============================================================================
# VALUE OBJECTS
# ============================================================================

@dataclass(frozen=True)
class Car:
    """
    Value Object: A car entering the garage
    The car class is derived from the car type
    """
    car_type: CarType
    make_year: int

    def __post_init__(self):
        if not isinstance(self.car_type, CarType):
            raise ValueError(f"car_type must be a CarType, got: {self.car_type!r}")
        if self.make_year <= 0:
            raise ValueError(f"Make year must be positive, got: {self.make_year}")

    @property
    def car_class(self) -> CarClass:
        return self.car_type.car_class

    def __str__(self) -> str:
        return f"{self.make_year} {self.car_type.name} ({self.car_class.name})"


@dataclass(frozen=True)
class HourlyEstimate:
    """
    Value Object: Estimated stay in whole hours and the average hourly price
    """
    hours: int
    hourly_rate: Decimal

    def __post_init__(self):
        if self.hours < 0:
            raise ValueError("Estimated hours cannot be negative")
        if not isinstance(self.hourly_rate, Decimal):
            raise ValueError("Hourly rate must be a Decimal")
        if self.hourly_rate < Decimal('0'):
            raise ValueError("Hourly rate cannot be negative")

    @property
    def estimated_total(self) -> Decimal:
        """Total price for the whole estimated stay"""
        return self.hourly_rate * self.hours

    def __str__(self) -> str:
        return f"{self.hours}h @ ${self.hourly_rate:.2f}/h"


@dataclass(frozen=True)
class GarageLevelSection:
    """
    Value Object: Physical placement in the garage
    """
    level: GarageLevel
    section: GarageSection

    @property
    def label(self) -> str:
        """Short label, e.g. L1/S1"""
        return f"{self.level.short_label}/{self.section.short_label}"

    def __str__(self) -> str:
        return self.label


@dataclass(frozen=True)
class Recommendation:
    """
    Value Object: A ranked placement together with its stay estimate
    """
    placement: GarageLevelSection
    estimate: HourlyEstimate

    def __str__(self) -> str:
        return f"{self.placement} for {self.estimate}"


@dataclass(frozen=True)
class RecommendationKey:
    """
    Value Object: Composite lookup key for the recommendation table
    """
    car_class: CarClass
    time_of_day: TimeOfDay
    slot: int

    def with_any_time(self) -> 'RecommendationKey':
        """Same key with the wildcard time-of-day bucket"""
        return RecommendationKey(self.car_class, TimeOfDay.ANY, self.slot)

    def __str__(self) -> str:
        return f"({self.car_class.name}, {self.time_of_day.name}, slot {self.slot})"
