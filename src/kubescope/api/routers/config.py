# src/kubescope/api/routers/config.py
"""
API routes for health and version information.
"""

import logging

from fastapi import APIRouter

from kubescope import __version__
from kubescope.api.schemas import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health():
    """Health check endpoint."""
    return HealthResponse(status="ok", version=__version__)
