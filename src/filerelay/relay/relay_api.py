"""HTTP routes for uploading and fetching relayed files."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, File, Request, UploadFile, status
from fastapi.responses import Response

from .relay_errors import (
    NoFileError,
    RelayError,
    RelayInternalError,
    UnsupportedTypeError,
)
from .relay_models import FilePayload
from .relay_policy import is_allowed
from .relay_schemas import HealthSchema, RelayErrorSchema, ShareResponse
from .relay_service import RelayService
from .uploads import read_upload

router = APIRouter(tags=["relay"])
logger = logging.getLogger(__name__)

ERROR_RESPONSES = {
    status.HTTP_400_BAD_REQUEST: {"model": RelayErrorSchema},
    status.HTTP_403_FORBIDDEN: {"model": RelayErrorSchema},
    status.HTTP_404_NOT_FOUND: {"model": RelayErrorSchema},
    status.HTTP_410_GONE: {"model": RelayErrorSchema},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": RelayErrorSchema},
}


def get_relay_service(request: Request) -> RelayService:
    """Fetch relay service from application state."""
    try:
        return request.app.state.relay_service  # type: ignore[attr-defined]
    except AttributeError as exc:  # pragma: no cover - defensive path
        raise RuntimeError("RelayService is not configured") from exc


def _file_response(result: FilePayload) -> Response:
    return Response(
        content=result.payload,
        media_type=result.content_type,
        headers={"Content-Disposition": result.content_disposition},
    )


@router.post("/upload", response_model=ShareResponse, responses=ERROR_RESPONSES)
async def upload_file(
    file: UploadFile | None = File(None),
    service: RelayService = Depends(get_relay_service),
) -> ShareResponse:
    """Buffer the uploaded file and return its share code."""
    if file is None or not file.filename:
        logger.warning("relay.upload.missing_file")
        raise NoFileError()
    if not is_allowed(file.content_type):
        logger.warning(
            "relay.upload.unsupported_type",
            extra={"content_type": file.content_type},
        )
        raise UnsupportedTypeError()

    try:
        payload = await read_upload(file)
        share = service.upload(payload, file.content_type, file.filename)
    except RelayError:
        raise
    except Exception as exc:
        logger.exception("relay.upload.unexpected_error")
        raise RelayInternalError("Upload failed") from exc
    return ShareResponse.from_share(share)


@router.get("/api/download/{code}", responses=ERROR_RESPONSES)
def download_file(
    code: str,
    service: RelayService = Depends(get_relay_service),
) -> Response:
    try:
        result = service.download(code)
    except RelayError:
        raise
    except Exception as exc:
        logger.exception("relay.download.unexpected_error", extra={"short_code": code})
        raise RelayInternalError("Download failed") from exc
    return _file_response(result)


@router.get("/api/preview/{code}", responses=ERROR_RESPONSES)
def preview_file(
    code: str,
    service: RelayService = Depends(get_relay_service),
) -> Response:
    try:
        result = service.preview(code)
    except RelayError:
        raise
    except Exception as exc:
        logger.exception("relay.preview.unexpected_error", extra={"short_code": code})
        raise RelayInternalError("Preview failed") from exc
    return _file_response(result)


@router.get("/api/files/{code}", response_model=ShareResponse, responses=ERROR_RESPONSES)
def describe_file(
    code: str,
    service: RelayService = Depends(get_relay_service),
) -> ShareResponse:
    """Return share metadata without transferring the payload."""
    try:
        share = service.describe(code)
    except RelayError:
        raise
    except Exception as exc:
        logger.exception("relay.describe.unexpected_error", extra={"short_code": code})
        raise RelayInternalError("Lookup failed") from exc
    return ShareResponse.from_share(share)


@router.get("/health", response_model=HealthSchema)
def health(service: RelayService = Depends(get_relay_service)) -> HealthSchema:
    return HealthSchema(status="ok", objects=len(service.store))


__all__ = ["get_relay_service", "router"]
