"""API controller for the relay endpoints.

Both routes read the raw JSON body themselves rather than declaring a
pydantic request model: malformed input must come back as a 400 with an
``error`` message, never as FastAPI's 422 validation payload.
"""

from typing import Any

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse
from loguru import logger

from ..models.chat_response import ErrorResponse, ProbeErrorResponse
from ..services.relay_service import RelayService, get_relay_service
from ..utils.error_handler import InvalidRequestError, RelayError, error_message

router = APIRouter(prefix="/api", tags=["Relay"])


async def _read_json(request: Request) -> Any:
    try:
        return await request.json()
    except ValueError as exc:
        raise InvalidRequestError(f"Request body must be valid JSON: {exc}") from exc


@router.post("/chat")
async def chat_endpoint(
    request: Request,
    service: RelayService = Depends(get_relay_service),
) -> JSONResponse:
    """Relay one chat turn to the selected provider.

    Returns ``{"role": "assistant", "content": ...}`` on success and
    ``{"error": ...}`` with status 400 on any failure.
    """
    try:
        body = await _read_json(request)
        response = await service.chat(body)
        return JSONResponse(status_code=status.HTTP_200_OK, content=response.model_dump(mode="json"))
    except RelayError as exc:
        logger.error("Chat relay failed ({}): {}", exc.kind.value, exc)
        message = exc.message
    except Exception as exc:
        logger.exception("Unhandled exception during chat relay")
        message = error_message(exc)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=ErrorResponse(error=message).model_dump(),
    )


@router.post("/test-provider")
async def test_provider_endpoint(
    request: Request,
    service: RelayService = Depends(get_relay_service),
) -> JSONResponse:
    """Send a fixed health-check prompt to check provider connectivity."""
    try:
        body = await _read_json(request)
        response = await service.probe(body)
        return JSONResponse(
            status_code=status.HTTP_200_OK,
            content=response.model_dump(mode="json", by_alias=True),
        )
    except RelayError as exc:
        logger.warning("Provider probe failed ({}): {}", exc.kind.value, exc)
        message = exc.message
    except Exception as exc:
        logger.exception("Unhandled exception during provider probe")
        message = error_message(exc)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=ProbeErrorResponse(error=message).model_dump(),
    )
