"""Pydantic schemas for relay responses."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from .relay_models import ShareInfo


class ShareResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    short_code: str = Field(alias="shortCode")
    download_url: str = Field(alias="downloadUrl")
    preview_url: str | None = Field(alias="previewUrl")
    filename: str
    size: int
    previewable: bool
    expires_at: datetime = Field(alias="expiresAt")

    @classmethod
    def from_share(cls, share: ShareInfo) -> "ShareResponse":
        return cls(
            short_code=share.short_code,
            download_url=share.download_path,
            preview_url=share.preview_path,
            filename=share.original_name,
            size=share.size,
            previewable=share.previewable,
            expires_at=share.expires_at,
        )


class RelayErrorSchema(BaseModel):
    success: bool = False
    error: str
    message: str


class HealthSchema(BaseModel):
    status: str
    objects: int
