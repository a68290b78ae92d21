"""
Banner API routes — upsert and fetch by id.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict, Field

from api.dependencies import get_banner_service
from banners.service import BannerService

router = APIRouter(tags=["banners"])


class BannerRequest(BaseModel):
    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)

    id: str = Field(..., min_length=1, max_length=64)
    title: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., min_length=1)
    timer: int = Field(..., ge=0, strict=True)
    url: str = Field(..., min_length=1, max_length=2048)


class BannerUpsertResponse(BaseModel):
    message: str
    id: str
    status: str


class BannerView(BaseModel):
    title: str
    description: str
    timer: int
    url: str


@router.post("/banner", response_model=BannerUpsertResponse)
async def upsert_banner(
    req: BannerRequest,
    service: BannerService = Depends(get_banner_service),
) -> Dict[str, Any]:
    """Create a banner, or replace every field of an existing one."""
    result = await service.upsert(req.id, req.title, req.description, req.timer, req.url)
    return {"message": f"Banner {result['status']} successfully", **result}


@router.get("/banner", response_model=BannerView)
async def get_banner(
    id: Optional[str] = None,
    service: BannerService = Depends(get_banner_service),
) -> Dict[str, Any]:
    """Return the banner's display fields (the id is not echoed)."""
    return await service.fetch(id.strip() if id else id)
