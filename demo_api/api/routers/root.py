"""Welcome endpoint."""

from fastapi import APIRouter
from pydantic import BaseModel

from demo_api.utils.timestamps import iso_timestamp

WELCOME_MESSAGE = "Hello from Jenkins CI/CD Pipeline!"

router = APIRouter(tags=["Root"])


class WelcomeResponse(BaseModel):
    message: str
    timestamp: str
    success: bool


@router.get("/", response_model=WelcomeResponse)
def read_root():
    """Return the welcome payload stamped with the request time."""
    return WelcomeResponse(
        message=WELCOME_MESSAGE,
        timestamp=iso_timestamp(),
        success=True,
    )
