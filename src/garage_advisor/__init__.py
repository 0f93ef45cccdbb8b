# File: src/garage_advisor/__init__.py
"""
Garage Advisor

Recommends a garage placement (level and section) and a stay/price estimate
for a car entering the garage, using either a hardcoded decision tree or a
table-driven rule lookup.
"""

from .application.dtos import EvaluationComparison, TicketRequest, TicketResponse
from .application.evaluators import DecisionTreeEvaluator, RuleTableEvaluator
from .application.ticket_service import TicketService
from .config import AppConfig
from .infrastructure.factories import initialize

__version__ = AppConfig.VERSION

__all__ = [
    "DecisionTreeEvaluator",
    "EvaluationComparison",
    "RuleTableEvaluator",
    "TicketRequest",
    "TicketResponse",
    "TicketService",
    "initialize",
]
