# File: src/garage_advisor/domain/exceptions.py
"""
Domain exceptions for the Garage Advisor

All errors are local validation failures raised while evaluating a ticket.
None of them is retriable: evaluation is deterministic, so repeating the call
reproduces the same error.
"""

from typing import Any


# ============================================================================
# EXCEPTIONS
# ============================================================================

class GarageAdvisorError(Exception):
    """Base exception for garage advisor errors"""
    pass


class UnknownModelError(GarageAdvisorError):
    """Raised when no car type claims a model name"""

    def __init__(self, model_name: str):
        self.model_name = model_name
        super().__init__(f"Unknown car model: {model_name!r}")


class MissingRecommendationError(GarageAdvisorError):
    """Raised when neither the exact key nor its ANY fallback is in the table"""

    def __init__(self, key: Any):
        self.key = key
        super().__init__(f"No recommendation registered for {key}")


class MissingRuleError(GarageAdvisorError):
    """Raised when no business rule is registered for a car class"""

    def __init__(self, car_class: Any):
        self.car_class = car_class
        super().__init__(f"No business rule registered for car class {car_class}")


class UnsupportedCarClassError(GarageAdvisorError):
    """Raised by the decision tree for a car class it has no branch for"""

    def __init__(self, car_class: Any):
        self.car_class = car_class
        super().__init__(f"Unsupported car class: {car_class}")
