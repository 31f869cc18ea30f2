"""
SKU API endpoints.

Parses SKU strings into structured item details. Every response uses the
ApiResponse envelope; parse failures are known failures carrying the
failure kind (e.g. "unknown_attribute").
"""

import logging

from fastapi import APIRouter
from pydantic import BaseModel, Field

from tf2sku.config import MAX_BATCH_SIZE, settings
from tf2sku.models.failure import (
    ApiResponse,
    FailureKind,
    RefusalError,
    SkuParseError,
    create_success,
    finalize_response,
)
from tf2sku.models.sku import Sku
from tf2sku.parsers.sku import parse_sku, parse_sku_lenient

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/sku", tags=["sku"])


class SkuParseRequest(BaseModel):
    """Request model for parsing one SKU."""

    sku: str = Field(
        ...,
        description="SKU string",
        examples=["264;11;kt-3"],
    )
    lenient: bool | None = Field(
        default=None,
        description="Default an invalid quality to Normal instead of failing. "
        "Falls back to the server's configured mode.",
    )


class SkuBatchRequest(BaseModel):
    """Request model for parsing many SKUs."""

    skus: list[str] = Field(
        ...,
        description="SKU strings, parsed independently",
        examples=[["264;11;kt-3", "627;6;footprints-2"]],
    )
    lenient: bool | None = Field(
        default=None,
        description="Default an invalid quality to Normal instead of failing.",
    )


class SkuDetail(BaseModel):
    """A parsed SKU. Enumeration values are given by member name."""

    sku: str = Field(..., description="Canonical SKU string")
    defindex: int
    quality: str
    particle: int | None = None
    craftable: bool = True
    australium: bool = False
    strange: bool = False
    wear: str | None = None
    skin: int | None = None
    killstreak_tier: str | None = None
    festivized: bool = False
    crate_number: int | None = None
    craft_number: int | None = None
    target_defindex: int | None = None
    output_defindex: int | None = None
    output_quality: str | None = None
    paint: str | None = None
    sheen: str | None = None
    killstreaker: str | None = None
    strange_parts: list[str] = Field(default_factory=list)
    spells: list[str] = Field(default_factory=list)

    @classmethod
    def from_sku(cls, sku: Sku) -> "SkuDetail":
        return cls(sku=str(sku), **sku.to_dict())


class SkuBatchResult(BaseModel):
    """Per-SKU outcomes of a batch, in request order."""

    results: list[ApiResponse[SkuDetail]] = Field(default_factory=list)
    parsed: int = 0
    failed: int = 0


def _parse(text: str, lenient: bool | None) -> Sku:
    if lenient is None:
        lenient = settings.lenient_quality
    return parse_sku_lenient(text) if lenient else parse_sku(text)


@router.post("/parse", response_model=ApiResponse[SkuDetail])
async def parse(request: SkuParseRequest) -> ApiResponse[SkuDetail]:
    """
    Parse one SKU.

    Returns 400 with a known failure envelope if the SKU is invalid.
    """
    sku = _parse(request.sku, request.lenient)
    return create_success(SkuDetail.from_sku(sku))


@router.post("/batch", response_model=ApiResponse[SkuBatchResult])
async def parse_batch(request: SkuBatchRequest) -> ApiResponse[SkuBatchResult]:
    """
    Parse many SKUs.

    Invalid SKUs do not fail the batch; each gets its own failure envelope.
    """
    if len(request.skus) > MAX_BATCH_SIZE:
        raise RefusalError(
            kind=FailureKind.BATCH_TOO_LARGE,
            message=f"A batch may contain at most {MAX_BATCH_SIZE} SKUs.",
            detail=f"Received {len(request.skus)} SKUs",
            suggestion="Split the request into smaller batches.",
        )

    result = SkuBatchResult()
    for text in request.skus:
        try:
            sku = _parse(text, request.lenient)
        except SkuParseError as e:
            item = ApiResponse[SkuDetail].known_failure(
                kind=e.kind,
                message=e.message,
                detail=e.detail,
                suggestion=e.suggestion,
            )
            result.failed += 1
        else:
            item = ApiResponse[SkuDetail].success(SkuDetail.from_sku(sku))
            result.parsed += 1
        result.results.append(finalize_response(item))

    logger.info("Parsed batch of %d SKUs (%d failed)", len(request.skus), result.failed)

    return create_success(result)
