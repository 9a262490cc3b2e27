"""Health check endpoint."""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter(tags=["Health"])


@router.get("/health", response_class=PlainTextResponse)
def health_check():
    """Liveness probe for load balancers and pipeline checks."""
    return "OK"
