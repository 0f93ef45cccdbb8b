#!/usr/bin/env python3
"""
Ticket Service and Command Line Integration Tests
"""

import io
import json
import unittest
from contextlib import redirect_stderr, redirect_stdout
from datetime import datetime
from unittest.mock import Mock

import yaml

from garage_advisor import main as cli
from garage_advisor.application.dtos import TicketRequest
from garage_advisor.application.ticket_service import TicketService
from garage_advisor.domain.exceptions import UnknownModelError
from garage_advisor.infrastructure.factories import initialize


def request(model: str, hour: int) -> TicketRequest:
    return TicketRequest(entry_timestamp=datetime(2013, 1, 18, hour, 30), model_name=model, make_year=1902)


class TestTicketService(unittest.TestCase):
    """Integration tests for TicketService"""

    def setUp(self):
        self.service = TicketService()

    def test_initializes_reference_rules(self):
        """Test default rules"""
        self.assertEqual(self.service.rules, initialize())

    def test_accepts_rule_snapshot(self):
        """Test injected rules are used"""
        rules = initialize()
        service = TicketService(rules)
        self.assertIs(service.rule_table.rules, rules)

    def test_compare_agreement(self):
        """Test morning CLASSIC request"""
        comparison = self.service.compare(request("pirate", 1))
        self.assertTrue(comparison.agree)
        self.assertEqual(comparison.differences, [])
        self.assertEqual(comparison.decision_tree, comparison.rule_table)

    def test_compare_divergence(self):
        """Test evening CLASSIC request"""
        with self.assertLogs("TicketService", level="WARNING"):
            comparison = self.service.compare(request("pirate", 20))
        self.assertFalse(comparison.agree)
        self.assertEqual(comparison.differences, ["recommendation1", "recommendation2"])

    def test_evaluate_by_name(self):
        """Test choosing an evaluator"""
        tree_response = self.service.evaluate(request("pirate", 20), "tree")
        table_response = self.service.evaluate(request("pirate", 20), "table")
        self.assertEqual(tree_response.recommendation1.estimate.hours, 8)
        self.assertEqual(table_response.recommendation1.estimate.hours, 12)

    def test_unknown_evaluator(self):
        """Test invalid evaluator name"""
        with self.assertRaises(ValueError):
            self.service.evaluate(request("pirate", 1), "neural")

    def test_errors_are_logged_and_reraised(self):
        """Test domain errors propagate"""
        with self.assertLogs("TicketService", level="ERROR"):
            with self.assertRaises(UnknownModelError):
                self.service.compare(request("tesla model s", 1))

    def test_evaluator_is_called_with_request(self):
        """Test delegation to the registered evaluator"""
        evaluator = Mock()
        self.service.evaluators["mock"] = evaluator
        ticket = request("pirate", 1)
        self.service.evaluate(ticket, "mock")
        evaluator.evaluate.assert_called_once_with(ticket)


class TestCommandLine(unittest.TestCase):
    """Integration tests for the command line entry point"""

    def run_cli(self, *argv):
        stdout, stderr = io.StringIO(), io.StringIO()
        with redirect_stdout(stdout), redirect_stderr(stderr):
            code = cli.main(list(argv) + ["--log-level", "CRITICAL"])
        return code, stdout.getvalue(), stderr.getvalue()

    def test_sample_request_text(self):
        """Test default sample request"""
        code, out, _ = self.run_cli()
        self.assertEqual(code, 0)
        self.assertIn("OLDSMOBILE", out)
        self.assertIn("L1/S1", out)
        self.assertIn("evaluators agree", out)

    def test_divergence_text(self):
        """Test evening entry"""
        code, out, _ = self.run_cli("--entry-time", "2013-01-18T20:00")
        self.assertEqual(code, 0)
        self.assertIn("evaluators diverge on: recommendation1, recommendation2", out)

    def test_json_output(self):
        """Test JSON format"""
        code, out, _ = self.run_cli("--format", "json", "--evaluator", "table")
        self.assertEqual(code, 0)
        data = json.loads(out)
        self.assertEqual(data["car"]["car_type"], "oldsmobile")
        self.assertEqual(data["recommendation1"]["placement"]["level"], "level1")

    def test_yaml_output(self):
        """Test YAML format"""
        code, out, _ = self.run_cli("--format", "yaml")
        self.assertEqual(code, 0)
        data = yaml.safe_load(out)
        self.assertTrue(data["agree"])
        self.assertEqual(data["request"]["model_name"], "pirate")

    def test_unknown_model_exit_code(self):
        """Test domain error exit status"""
        code, _, err = self.run_cli("--model", "tesla model s")
        self.assertEqual(code, 1)
        self.assertIn("tesla model s", err)

    def test_invalid_request_exit_code(self):
        """Test validation error exit status"""
        code, _, err = self.run_cli("--year", "0")
        self.assertEqual(code, 2)
        self.assertIn("Invalid request", err)

    def test_list_models(self):
        """Test catalog listing"""
        code, out, _ = self.run_cli("--list-models")
        self.assertEqual(code, 0)
        self.assertIn("OLDSMOBILE (CLASSIC): cutlass, delta 88, pirate, toronado", out)


if __name__ == "__main__":
    unittest.main()
