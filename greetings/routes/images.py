"""
GET /v1/images/probe -- Is this image URL usable?

Lets the admin form check an image before saving a record. The probe
gives up after a fixed timeout (GREETINGS_IMAGE_PROBE_TIMEOUT, default 10s).
"""

from fastapi import APIRouter, Query

from greetings.images import probe_image
from greetings.models.schemas import ImageProbeResponse

router = APIRouter()


@router.get(
    "/v1/images/probe",
    response_model=ImageProbeResponse,
    summary="Probe an image URL",
    description="True only if the URL answers with an image before the probe timeout.",
    tags=["Images"],
)
async def probe(
    url: str = Query(description="Image URL to check."),
) -> ImageProbeResponse:
    usable = await probe_image(url)
    return ImageProbeResponse(url=url, usable=usable)
