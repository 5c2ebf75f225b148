"""
Pydantic schemas for the Persona Relay API.

These models define the request/response structure for all API endpoints.
Field names match the JSON bodies the bundled front-end sends.
"""

from typing import Optional
from pydantic import BaseModel, Field


# ============================================================
# REQUEST MODELS
# ============================================================

class HealthRequest(BaseModel):
    """Request body for POST /api/health."""
    symptoms: str = Field(..., description="Patient symptoms to triage")

    model_config = {
        "json_schema_extra": {
            "examples": [{"symptoms": "Headache and mild fever for two days"}]
        }
    }


class AgricultureRequest(BaseModel):
    """Request body for POST /api/agriculture."""
    context: str = Field(..., description="Crop, region or pest context")

    model_config = {
        "json_schema_extra": {
            "examples": [{"context": "Tomatoes in a humid climate with aphids"}]
        }
    }


class FinanceRequest(BaseModel):
    """Request body for POST /api/finance."""
    budgetDetails: str = Field(..., description="Income, expenses and goals")

    model_config = {
        "json_schema_extra": {
            "examples": [{"budgetDetails": "Income 3000/month, rent 1200, saving for a car"}]
        }
    }


class GeneralRequest(BaseModel):
    """Request body for POST /api/general."""
    message: str = Field(..., description="Free-form message")

    model_config = {
        "json_schema_extra": {
            "examples": [{"message": "Hello"}]
        }
    }


# ============================================================
# RESPONSE MODELS
# ============================================================

class AnswerResponse(BaseModel):
    """Successful reply from any persona endpoint."""
    answer: str


class ErrorResponse(BaseModel):
    """Failed reply from any persona endpoint (HTTP 500)."""
    error: str


class StatusResponse(BaseModel):
    """Response for GET /api/status."""
    status: str = "ok"
    version: str = "1.0.0"
    backend: Optional[str] = None
    model: Optional[str] = None

