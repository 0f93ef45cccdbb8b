# File: src/garage_advisor/application/ticket_service.py
"""
Ticket Application Service

Orchestrates the evaluators for the entry point:
1. Evaluate a request with one named evaluator
2. Run both evaluators on a request and report whether they agree

Errors from the domain are logged and re-raised unchanged; the service never
returns a partial result.
"""

import logging
from typing import Dict, List, Optional

from ..domain.exceptions import GarageAdvisorError
from ..domain.rule_tables import GarageRules
from ..infrastructure.factories import initialize
from .dtos import EvaluationComparison, TicketRequest, TicketResponse
from .evaluators import DecisionTreeEvaluator, RuleTableEvaluator, TicketEvaluator


class TicketService:
    """
    Application service for garage tickets

    Holds one decision tree evaluator and one rule table evaluator built
    from an initialized rule snapshot.
    """

    def __init__(self, rules: Optional[GarageRules] = None):
        """
        Initialize the ticket service

        Args:
            rules: Optional rule snapshot. If not provided, the reference
                   rules are initialized here.
        """
        self.logger = logging.getLogger(self.__class__.__name__)
        self.rules = rules if rules is not None else initialize()

        self.decision_tree = DecisionTreeEvaluator()
        self.rule_table = RuleTableEvaluator(self.rules)
        self.evaluators: Dict[str, TicketEvaluator] = {
            self.decision_tree.name: self.decision_tree,
            self.rule_table.name: self.rule_table,
        }

        self.logger.info("TicketService initialized")

    def evaluate(self, request: TicketRequest, evaluator_name: str = RuleTableEvaluator.name) -> TicketResponse:
        """
        Evaluate a request with one evaluator

        Raises: ValueError for an unknown evaluator name,
                GarageAdvisorError when evaluation fails
        """
        evaluator = self.evaluators.get(evaluator_name)
        if evaluator is None:
            raise ValueError(
                f"Unknown evaluator: {evaluator_name}. Valid evaluators: {sorted(self.evaluators)}"
            )
        try:
            return evaluator.evaluate(request)
        except GarageAdvisorError as e:
            self.logger.error(f"{evaluator.__class__.__name__} failed: {str(e)}")
            raise

    def compare(self, request: TicketRequest) -> EvaluationComparison:
        """
        Run both evaluators on the same request

        Divergence is expected for some inputs and is reported, not corrected.
        """
        tree_response = self.evaluate(request, DecisionTreeEvaluator.name)
        table_response = self.evaluate(request, RuleTableEvaluator.name)

        differences = self._differences(tree_response, table_response)
        if differences:
            self.logger.warning(f"Evaluators diverge for {request.model_name!r} on: {', '.join(differences)}")
        else:
            self.logger.info(f"Evaluators agree for {request.model_name!r}")

        return EvaluationComparison(
            request=request,
            decision_tree=tree_response,
            rule_table=table_response,
            agree=not differences,
            differences=differences
        )

    @staticmethod
    def _differences(first: TicketResponse, second: TicketResponse) -> List[str]:
        return [
            name for name in TicketResponse.model_fields
            if getattr(first, name) != getattr(second, name)
        ]
