# File: src/garage_advisor/application/dtos.py
"""
Data Transfer Objects (DTOs) for the Garage Advisor

1. Input DTOs - TicketRequest, received from the caller
2. Output DTOs - TicketResponse and EvaluationComparison, returned to it

DTO Principles:
- Immutable (frozen models) and compared by value
- Validation at creation
- No business logic, only data
- Serialization support (dict, JSON)
"""

from datetime import datetime
from typing import Any, Dict, List, Type, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..domain.models import Car, Recommendation

T = TypeVar('T', bound='BaseDTO')


# ============================================================================
# BASE DTO CLASSES
# ============================================================================

class BaseDTO(BaseModel):
    """Base DTO with common functionality"""

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        protected_namespaces=()
    )

    def to_dict(self, **kwargs) -> Dict[str, Any]:
        """Convert DTO to dictionary"""
        return self.model_dump(**kwargs)

    def to_json(self, **kwargs) -> str:
        """Convert DTO to JSON string"""
        return self.model_dump_json(**kwargs)

    @classmethod
    def from_dict(cls: Type[T], data: Dict[str, Any]) -> T:
        """Create DTO from dictionary"""
        return cls.model_validate(data)


# ============================================================================
# TICKET DTOs
# ============================================================================

class TicketRequest(BaseDTO):
    """DTO for a car entering the garage"""
    entry_timestamp: datetime = Field(description="Entry time")
    model_name: str = Field(min_length=1, description="Car model name, lowercase")
    make_year: int = Field(gt=0, strict=True, description="Year the car was made")

    @field_validator('model_name')
    @classmethod
    def validate_model_name(cls, v: str) -> str:
        """Reject blank model names; the name is otherwise kept verbatim"""
        if not v.strip():
            raise ValueError("Model name cannot be blank")
        return v


class TicketResponse(BaseDTO):
    """DTO for the two ranked recommendations of a ticket"""
    entry_timestamp: datetime = Field(description="Entry time")
    car: Car = Field(description="Resolved car")
    recommendation1: Recommendation = Field(description="First choice")
    recommendation2: Recommendation = Field(description="Second choice")

    @property
    def recommendations(self) -> List[Recommendation]:
        return [self.recommendation1, self.recommendation2]


class EvaluationComparison(BaseDTO):
    """DTO comparing the decision tree and rule table results for one request"""
    request: TicketRequest
    decision_tree: TicketResponse
    rule_table: TicketResponse
    agree: bool = Field(description="Both evaluators returned equal responses")
    differences: List[str] = Field(default_factory=list, description="Fields that differ")
