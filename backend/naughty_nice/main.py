"""
Main FastAPI application and routing layer.
"""
from __future__ import annotations

import logging

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from naughty_nice.config import CORS_ALLOW_ORIGINS, LOG_FORMAT, LOG_LEVEL, settings
from naughty_nice.schemas import (
    AnalyzeRequest,
    ChatRequest,
    ChatResponse,
    MultiSourceResponse,
    SingleSourceResponse,
)
from naughty_nice.services.santa import AssistantNotConfiguredError, santa_chat
from naughty_nice.sources.collector import analyze_all, analyze_single
from naughty_nice.utils import normalize_identifier, now_utc

logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)
logger = logging.getLogger(__name__)


def require_identifier(username: str | None) -> str:
    """
    Normalize the requested handle or reject the request.

    Raises:
        HTTPException: 400 when no usable username was given
    """
    try:
        return normalize_identifier(username)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


# Initialize FastAPI app
app = FastAPI(
    title="Naughty or Nice API",
    version="0.1.0",
    description="Scores a handle's public footprint across microblog, forum, news and GitHub",
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/api/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "ok", "as_of": now_utc().isoformat()}


@app.post("/api/analyze", response_model=SingleSourceResponse, response_model_exclude_none=True)
async def analyze_user(request: AnalyzeRequest):
    """
    Legacy single-source analysis of a handle's microblog posts.

    Args:
        request: Handle to analyze and whether to force demo data

    Returns:
        SingleSourceResponse with the user profile and post analysis
    """
    username = require_identifier(request.username)

    try:
        return await analyze_single(username, demo=request.demo)
    except Exception as e:
        logger.exception("Analysis error for %s", username)
        raise HTTPException(status_code=500, detail="Failed to analyze user. Please try again.") from e


@app.post("/api/analyze-all", response_model=MultiSourceResponse, response_model_exclude_none=True)
async def analyze_all_sources(request: AnalyzeRequest):
    """
    Multi-source analysis with a weighted final verdict.

    Args:
        request: Handle to analyze; used as-is for every source

    Returns:
        MultiSourceResponse with final score, verdict and per-source breakdown
    """
    username = require_identifier(request.username)

    try:
        return await analyze_all(username)
    except Exception as e:
        logger.exception("Multi-source analysis error for %s", username)
        raise HTTPException(status_code=500, detail="Failed to analyze user. Please try again.") from e


@app.post("/api/santa-chat", response_model=ChatResponse, response_model_exclude_none=True)
async def chat_with_santa(request: ChatRequest):
    try:
        return await santa_chat(request)
    except AssistantNotConfiguredError as e:
        raise HTTPException(status_code=503, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Santa chat error")
        raise HTTPException(status_code=500, detail="Santa is taking a cookie break. Please try again!") from e


if __name__ == "__main__":
    # For development
    import uvicorn
    uvicorn.run("naughty_nice.main:app", host="0.0.0.0", port=settings.PORT, reload=True)
