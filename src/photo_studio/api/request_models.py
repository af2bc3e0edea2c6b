"""Pydantic models for JSON request bodies."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class FinishSessionRequest(BaseModel):
    """Body of a finish-session request."""

    model_config = ConfigDict(populate_by_name=True)

    session_id: str | None = Field(default=None, alias="sessionId")


class SubmitSelectionRequest(BaseModel):
    """Body of a selection submission; the id list is checked by the service."""

    model_config = ConfigDict(populate_by_name=True)

    session_id: str | None = Field(default=None, alias="sessionId")
    selected_photo_ids: Any = Field(default=None, alias="selectedPhotoIds")


class GenerateCodeRequest(BaseModel):
    """Body of a selection-code request."""

    model_config = ConfigDict(populate_by_name=True)

    session_id: str | None = Field(default=None, alias="sessionId")
    page: str | None = None
