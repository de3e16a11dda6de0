# File: src/commitgen/server/schemas.py
# Purpose: Pydantic schemas for the commit message API
from typing import List, Literal, Optional

from pydantic import BaseModel, Field


class CommitMessageRequest(BaseModel):
    """
    Request schema for commit message generation.

    The command itself is never accepted here; it only comes from settings.
    """
    language: Optional[Literal["en", "zh"]] = Field(None, description="Language for error text")


class CommitMessageResponse(BaseModel):
    """Response schema for a generated commit message"""
    ok: bool = True
    message: str
    warnings: List[str] = []

    class Config:
        json_schema_extra = {
            "example": {
                "ok": True,
                "message": "feat: add new feature",
                "warnings": [],
            }
        }


class ErrorResponse(BaseModel):
    """Response schema for a failed generation"""
    ok: bool = False
    error: str
    message: str
    detail: str = ""
    request_id: Optional[str] = None
