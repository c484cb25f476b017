# /app/models/common_model.py

from pydantic import BaseModel, Field


class MessageResponse(BaseModel):
    """Confirmation body returned by delete endpoints."""
    message: str = Field(..., example="Faculty deleted successfully")


class Pagination(BaseModel):
    page: int
    limit: int
    total: int
