"""
Coaster endpoints.

List, fetch, randomly pick and create coaster records.  Lookups that
find nothing answer 404 with an empty body.  Creation reads the raw
request body itself so that the media type can be checked before any
JSON parsing: a wrong ``content-type`` is a 415 whatever the body
holds, a body that is not a coaster object is a 400.

``/random`` is declared before ``/{coaster_id}`` so the literal path
wins over the parameter.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import PlainTextResponse, RedirectResponse
from pydantic import ValidationError
from starlette.requests import ClientDisconnect

from coaster_api.app.schemas.coaster import Coaster, CoasterCreate
from coaster_api.app.services.coaster_service import CoasterService

logger = logging.getLogger(__name__)

JSON_MEDIA_TYPE = "application/json"

router = APIRouter()


def get_coaster_service(request: Request) -> CoasterService:
    """Return the coaster service created by ``create_app``."""
    return request.app.state.coaster_service


def _coaster_location(collection_path: str, coaster_id: str) -> str:
    return f"{collection_path.rstrip('/')}/{coaster_id}"


@router.get("", response_model=List[Coaster])
def list_coasters(service: CoasterService = Depends(get_coaster_service)) -> List[Coaster]:
    """Return all coasters as a JSON array, in no particular order."""
    return service.list_coasters()


@router.post(
    "",
    response_model=Coaster,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"description": "Body is not a valid coaster object"},
        415: {"description": "Content type is not application/json"},
        500: {"description": "Request body could not be read"},
    },
)
async def create_coaster(
    request: Request,
    response: Response,
    service: CoasterService = Depends(get_coaster_service),
):
    """Create a coaster from a JSON body.

    Any ``id`` in the body is replaced by a server-generated one.  The
    stored record is returned together with a ``Location`` header
    pointing at it.
    """
    try:
        body = await request.body()
    except ClientDisconnect:
        logger.error("Client disconnected while sending a coaster")
        return PlainTextResponse(
            "failed to read request body",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    content_type = request.headers.get("content-type", "")
    if content_type.strip().lower() != JSON_MEDIA_TYPE:
        return PlainTextResponse(
            f"need content-type '{JSON_MEDIA_TYPE}', but got '{content_type}'",
            status_code=status.HTTP_415_UNSUPPORTED_MEDIA_TYPE,
        )

    try:
        data = CoasterCreate.model_validate_json(body)
    except ValidationError as exc:
        logger.warning("Rejected coaster payload: %s", exc)
        return PlainTextResponse(str(exc), status_code=status.HTTP_400_BAD_REQUEST)

    coaster = service.create_coaster(data)
    response.headers["Location"] = _coaster_location(request.url.path, coaster.id)
    return coaster


@router.get(
    "/random",
    status_code=status.HTTP_302_FOUND,
    response_class=RedirectResponse,
    responses={404: {"description": "No coasters stored"}},
)
def random_coaster(request: Request, service: CoasterService = Depends(get_coaster_service)):
    """Redirect to a randomly chosen coaster."""
    coaster = service.get_random_coaster()
    if coaster is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    collection_path = request.url.path.rsplit("/", 1)[0]
    return RedirectResponse(
        _coaster_location(collection_path, coaster.id),
        status_code=status.HTTP_302_FOUND,
    )


@router.get(
    "/{coaster_id}",
    response_model=Coaster,
    responses={404: {"description": "Coaster not found"}},
)
def get_coaster(coaster_id: str, service: CoasterService = Depends(get_coaster_service)):
    """Retrieve a single coaster by ID."""
    coaster = service.get_coaster(coaster_id)
    if coaster is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return coaster
