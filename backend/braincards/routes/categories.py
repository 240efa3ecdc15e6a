"""
Brain Cards Backend — Category Route Handlers
==============================================

What:  POST /category, GET /category and GET /category/{id} under the API prefix.
How:   Each handler calls CategoryService and renders the returned result:
       Ok → success status with the value as JSON, Err → err.status_code
       with err.payload as JSON.

The request body is decoded here rather than through a Pydantic body model:
clients get the exact 400 messages produced by CategoryService, never
FastAPI's generic 422.
"""

import logging
from typing import Dict, List, Optional

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from braincards.config import settings
from braincards.middleware.request_id import request_id_var
from braincards.results import Err, server_error
from braincards.schemas.category import Category, CategoryListItem, MessageResponse
from braincards.services.category_service import CategoryService, get_category_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix=settings.api_prefix, tags=["Categories"])


def render_error(err: Err, headers: Optional[Dict[str, str]] = None) -> JSONResponse:
    """Turn an Err result into its JSON response, logging it on the way out."""
    rid = request_id_var.get("")
    if err.status_code >= 500:
        logger.error("[%s] %s: %s", rid, err.kind, err.message)
    else:
        logger.warning("[%s] %s: %s", rid, err.kind, err.message)
    return JSONResponse(status_code=err.status_code, content=err.payload, headers=headers)


def category_location(category_id: str) -> str:
    return f"{settings.api_prefix}/category/{category_id}"


@router.post(
    "/category",
    status_code=201,
    response_model=Category,
    responses={
        201: {"description": "Category created", "model": Category},
        400: {"description": "Invalid title or pairs", "model": MessageResponse},
        500: {"description": "Malformed JSON or store failure", "model": MessageResponse},
    },
    summary="Create a category",
    description=(
        "Body: {\"title\": string, \"pairs\"?: [[string, string], ...]}. "
        "Returns the stored category with its generated id and a Location header."
    ),
)
async def create_category(
    request: Request,
    service: CategoryService = Depends(get_category_service),
) -> JSONResponse:
    try:
        payload = await request.json()
    except ValueError as e:
        # JSONDecodeError and UnicodeDecodeError both land here
        logger.error("Could not decode request body: %s", str(e))
        return render_error(server_error())

    result = await service.create_category(payload)
    if isinstance(result, Err):
        return render_error(result)

    category = result.value
    request.state.category_id = category.id
    return JSONResponse(
        status_code=201,
        content=category.model_dump(mode="json"),
        headers={
            "Location": category_location(category.id),
            "Access-Control-Expose-Headers": "Location",
        },
    )


@router.get(
    "/category",
    response_model=List[CategoryListItem],
    responses={500: {"description": "Store failure", "model": MessageResponse}},
    summary="List categories",
    description="Every category's id, title and number of pairs, in creation order.",
)
async def list_categories(
    service: CategoryService = Depends(get_category_service),
) -> JSONResponse:
    result = await service.get_category_list()
    if isinstance(result, Err):
        return render_error(result)

    return JSONResponse(content=[item.model_dump(mode="json") for item in result.value])


@router.get(
    "/category/{category_path:path}",
    response_model=Category,
    responses={
        404: {"description": "No category with this id", "model": MessageResponse},
        500: {"description": "Store failure", "model": MessageResponse},
    },
    summary="Get a category by id",
    description="The full category including its pairs in original order.",
)
async def get_category(
    category_path: str,
    request: Request,
    service: CategoryService = Depends(get_category_service),
) -> JSONResponse:
    # The id is the last path segment: /category/a/b looks up "b"
    category_id = category_path.rsplit("/", 1)[-1]
    request.state.category_id = category_id

    result = await service.get_category(category_id)
    if isinstance(result, Err):
        return render_error(result)

    return JSONResponse(content=result.value.model_dump(mode="json"))
