#!/usr/bin/env python3
"""
DTO Unit Tests

Tests for request validation and response serialization.
"""

import json
import unittest
from datetime import datetime
from decimal import Decimal

from pydantic import ValidationError

from garage_advisor.application.dtos import TicketRequest, TicketResponse
from garage_advisor.domain.models import (
    Car, CarType, GarageLevel, GarageLevelSection, GarageSection,
    HourlyEstimate, Recommendation
)


def make_response(rate: str = '5.00') -> TicketResponse:
    return TicketResponse(
        entry_timestamp=datetime(2013, 1, 18, 1, 30),
        car=Car(CarType.OLDSMOBILE, 1902),
        recommendation1=Recommendation(
            GarageLevelSection(GarageLevel.LEVEL1, GarageSection.SECTION1),
            HourlyEstimate(8, Decimal(rate))
        ),
        recommendation2=Recommendation(
            GarageLevelSection(GarageLevel.LEVEL2, GarageSection.SECTION1),
            HourlyEstimate(8, Decimal('5.00'))
        )
    )


class TestTicketRequest(unittest.TestCase):
    """Unit tests for TicketRequest"""

    def test_valid_request(self):
        """Test creating a request"""
        request = TicketRequest(
            entry_timestamp=datetime(2013, 1, 18, 1, 30),
            model_name="pirate",
            make_year=1902
        )
        self.assertEqual(request.model_name, "pirate")
        self.assertEqual(request.entry_timestamp.hour, 1)

    def test_timestamp_parsed_from_iso_string(self):
        """Test ISO 8601 input"""
        request = TicketRequest.from_dict({
            "entry_timestamp": "2013-01-18T20:00:00",
            "model_name": "pirate",
            "make_year": 1902
        })
        self.assertEqual(request.entry_timestamp, datetime(2013, 1, 18, 20, 0))

    def test_model_name_kept_verbatim(self):
        """Test the model name is not normalized"""
        request = TicketRequest(entry_timestamp=datetime(2013, 1, 18), model_name="Pirate", make_year=1902)
        self.assertEqual(request.model_name, "Pirate")

    def test_invalid_requests_rejected(self):
        """Test validation errors"""
        invalid = [
            {"model_name": "", "make_year": 1902},
            {"model_name": "   ", "make_year": 1902},
            {"model_name": "pirate", "make_year": 0},
            {"model_name": "pirate", "make_year": -5},
            {"model_name": "pirate", "make_year": True},
            {"model_name": "pirate", "make_year": 1902.0},
            {"model_name": "pirate", "make_year": "1902"},
        ]
        for fields in invalid:
            with self.subTest(fields=fields):
                with self.assertRaises(ValidationError):
                    TicketRequest(entry_timestamp=datetime(2013, 1, 18), **fields)

    def test_requests_are_frozen(self):
        """Test requests cannot be changed"""
        request = TicketRequest(entry_timestamp=datetime(2013, 1, 18), model_name="pirate", make_year=1902)
        with self.assertRaises(ValidationError):
            request.make_year = 2000


class TestTicketResponse(unittest.TestCase):
    """Unit tests for TicketResponse"""

    def test_value_equality(self):
        """Test responses with equal values are equal"""
        self.assertEqual(make_response(), make_response())
        self.assertNotEqual(make_response(), make_response(rate='4.25'))

    def test_recommendations_in_rank_order(self):
        """Test ranked list"""
        response = make_response()
        self.assertEqual(response.recommendations, [response.recommendation1, response.recommendation2])

    def test_json_serialization(self):
        """Test JSON output"""
        data = json.loads(make_response().to_json())
        self.assertEqual(data["entry_timestamp"], "2013-01-18T01:30:00")
        self.assertEqual(data["car"], {"car_type": "oldsmobile", "make_year": 1902})
        self.assertEqual(data["recommendation1"]["placement"], {"level": "level1", "section": "section1"})
        self.assertEqual(data["recommendation1"]["estimate"]["hours"], 8)
        self.assertEqual(Decimal(data["recommendation1"]["estimate"]["hourly_rate"]), Decimal('5.00'))

    def test_to_dict_keeps_domain_values(self):
        """Test python-mode dump"""
        data = make_response().to_dict()
        self.assertEqual(data["car"]["car_type"], CarType.OLDSMOBILE)
        self.assertEqual(data["recommendation2"]["estimate"]["hourly_rate"], Decimal('5.00'))


if __name__ == "__main__":
    unittest.main()
