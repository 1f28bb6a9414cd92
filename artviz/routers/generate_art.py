"""
Art visualization API routes
"""
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from artviz.core.errors import ArtVisualizationError, ErrorKind, ValidationError
from artviz.middleware.logging_middleware import get_logger
from artviz.schemas.art import ArtTypesResponse, ArtVisualizationRequest, ArtVisualizationResponse
from artviz.services.art_catalog import DEFAULT_ART_TYPE, list_art_types
from artviz.services.art_visualization_service import ArtVisualizationService, get_art_visualization_service

logger = get_logger(__name__)
router = APIRouter(tags=["art"])

GENERIC_FAILURE_MESSAGE = "Failed to generate image"


def failure_response(error: str, kind: ErrorKind, status_code: int) -> JSONResponse:
    """JSON failure envelope; success fields are left out entirely."""
    body = ArtVisualizationResponse.failure(error or GENERIC_FAILURE_MESSAGE, kind)
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json", exclude_none=True))


@router.post("/generate-art", response_model=ArtVisualizationResponse, response_model_exclude_none=True)
async def generate_art(
    request: ArtVisualizationRequest,
    service: ArtVisualizationService = Depends(get_art_visualization_service),
):
    """Add the requested kind of artwork to the most prominent wall of the uploaded room photo"""
    if not request.image or not request.image.strip():
        error = ValidationError("No image provided")
        logger.warning(f"Rejected generate-art request: {error.message}")
        return failure_response(error.message, error.kind, error.status_code)

    try:
        image_url = await service.visualize(request.image, request.artType)
        return ArtVisualizationResponse.ok(image_url)

    except ArtVisualizationError as e:
        logger.error(f"Error generating art ({e.kind.value}): {e.message}", exc_info=e.status_code >= 500)
        return failure_response(e.message, e.kind, e.status_code)
    except Exception as e:
        logger.exception(f"Error generating art: {e}")
        return failure_response(str(e), ErrorKind.INTERNAL, 500)


@router.get("/art-types", response_model=ArtTypesResponse)
async def get_art_types():
    """List the art types the client can offer"""
    return ArtTypesResponse(artTypes=list_art_types(), default=DEFAULT_ART_TYPE.value)
