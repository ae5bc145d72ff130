from fastapi import APIRouter, HTTPException
from fastapi.responses import JSONResponse
import logging

from echo3ai.core.config import settings
from echo3ai.core.errors import ConfigError, NetworkError
from echo3ai.core.prompts import LanguageCheckPrompts
from echo3ai.schemas.podcast import (
    FactCheckRequest,
    FactCheckResponse,
    ChatRequest,
    ChatResponse,
    LanguageCheckRequest,
    LanguageCheckResponse,
)
from echo3ai.services.podcast import fact_check, chat, language_check


logger = logging.getLogger(__name__)
router = APIRouter(
    prefix='/api',
    tags=["podcasts"]
)

CHAT_ERRORS = {
    400: "Invalid request to chat service. Please check your question.",
    401: "Chat service authentication failed. Please check API key configuration.",
    429: "Chat service rate limit exceeded. Please try again later.",
}

LANGUAGE_CHECK_WARNINGS = {
    400: "Invalid request to language check service, but providing fallback analysis.",
    401: "Language check service authentication failed, but providing fallback analysis.",
    429: "Language check service rate limit exceeded, but providing fallback analysis.",
}


def _upstream_status(e: NetworkError) -> int:
    return e.status_code if e.status_code in (400, 401, 429) else 500


@router.post("/fact-check", response_model=FactCheckResponse)
async def fact_check_statement(input: FactCheckRequest):
    if not input.statement.strip():
        raise HTTPException(status_code=400, detail="Valid statement text is required.")

    logger.info(f"Starting fact-check: {input.statement[:200]}")

    try:
        result = await fact_check(input.statement, settings.gemini_api_key)
    except NetworkError as e:
        logger.error(f"Fact-check failed: {e}")
        raise HTTPException(status_code=500, detail=str(e))

    return FactCheckResponse(success=True, result=result)


@router.post("/chat", response_model=ChatResponse)
async def chat_with_transcript(input: ChatRequest):
    if not input.transcript or not input.question:
        raise HTTPException(status_code=400, detail="Transcript and question are required.")

    try:
        answer = await chat(input.transcript, input.question, input.creator, input.guest, settings.gemini_api_key)
    except ConfigError as e:
        raise HTTPException(status_code=500, detail=str(e))
    except NetworkError as e:
        logger.error(f"Chat failed: {e}")
        status = _upstream_status(e)
        raise HTTPException(
            status_code=status,
            detail=CHAT_ERRORS.get(status, "Failed to get response from chat service."),
        )

    logger.info(f"Chat response generated: {len(answer)} chars")
    return ChatResponse(success=True, answer=answer)


@router.post("/language-check", response_model=LanguageCheckResponse)
async def check_language(input: LanguageCheckRequest):
    if not input.transcript:
        raise HTTPException(status_code=400, detail="Transcript is required.")

    try:
        analysis = await language_check(
            input.transcript, input.title, input.creator, input.guest, settings.gemini_api_key
        )
    except ConfigError as e:
        raise HTTPException(status_code=500, detail=str(e))
    except NetworkError as e:
        logger.error(f"Language check failed: {e}")
        status = _upstream_status(e)
        fallback = LanguageCheckResponse(
            success=True,
            analysis=LanguageCheckPrompts.get_error_report(str(e)),
            warning=LANGUAGE_CHECK_WARNINGS.get(
                status, "Failed to get language analysis from service, but providing fallback analysis."
            ),
        )
        return JSONResponse(status_code=status, content=fallback.model_dump())

    logger.info(f"Language analysis complete: {len(analysis)} chars")
    return LanguageCheckResponse(success=True, analysis=analysis)
