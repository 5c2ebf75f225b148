"""
Persona router — fixed-persona chat endpoints.

Endpoints:
- POST /api/health       — Medical triage (body: symptoms)
- POST /api/agriculture  — Planting and pest control (body: context)
- POST /api/finance      — Budget advice (body: budgetDetails)
- POST /api/general      — General assistant (body: message)

All four build the same two-turn conversation and differ only in the
system prompt and the label on the user turn.
"""

import asyncio

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from backend.llm_router import CompletionRouter, Failure, build_turns
from configs import PERSONAS, Persona

from ..schemas import (
    HealthRequest, AgricultureRequest, FinanceRequest, GeneralRequest,
    AnswerResponse, ErrorResponse,
)
from ..deps import get_router


router = APIRouter(prefix="/api", tags=["Personas"])

_RESPONSES = {500: {"model": ErrorResponse, "description": "Backend failure"}}


# =============================================================================
# HELPERS
# =============================================================================

async def _relay(persona: Persona, request: BaseModel, completion_router: CompletionRouter):
    """
    Run one completion for a persona and shape the HTTP reply.

    The user text is read from the body field the persona names.

    The router call blocks on the network, so it runs in a worker thread to
    keep the event loop free for concurrent requests.
    """
    value = getattr(request, persona.field)
    turns = build_turns(persona.system_prompt, persona.user_content(value))
    result = await asyncio.to_thread(completion_router.complete, turns)

    if isinstance(result, Failure):
        return JSONResponse(
            status_code=500,
            content=ErrorResponse(error=result.message).model_dump(),
        )

    return AnswerResponse(answer=result.text)


# =============================================================================
# ENDPOINTS
# =============================================================================

@router.post(PERSONAS["health"].path, response_model=AnswerResponse, responses=_RESPONSES)
async def health_advice(
    request: HealthRequest,
    completion_router: CompletionRouter = Depends(get_router),
):
    """Basic triage and advice for the given symptoms, with a disclaimer."""
    return await _relay(PERSONAS["health"], request, completion_router)


@router.post(PERSONAS["agriculture"].path, response_model=AnswerResponse, responses=_RESPONSES)
async def agriculture_advice(
    request: AgricultureRequest,
    completion_router: CompletionRouter = Depends(get_router),
):
    """Planting and pest control tips for the given context."""
    return await _relay(PERSONAS["agriculture"], request, completion_router)


@router.post(PERSONAS["finance"].path, response_model=AnswerResponse, responses=_RESPONSES)
async def finance_advice(
    request: FinanceRequest,
    completion_router: CompletionRouter = Depends(get_router),
):
    """Budget plans and cost-saving tips."""
    return await _relay(PERSONAS["finance"], request, completion_router)


@router.post(PERSONAS["general"].path, response_model=AnswerResponse, responses=_RESPONSES)
async def general_chat(
    request: GeneralRequest,
    completion_router: CompletionRouter = Depends(get_router),
):
    """General assistant; the message is passed through without a label."""
    return await _relay(PERSONAS["general"], request, completion_router)
