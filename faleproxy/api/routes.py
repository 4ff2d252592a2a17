from typing import Optional

from fastapi import APIRouter

from faleproxy.schemas import ErrorResponse, FetchRequest, FetchResponse
from faleproxy.services import relay

router = APIRouter()

@router.post(
    "/fetch",
    response_model=FetchResponse,
    response_model_by_alias=True,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def fetch_page(request: Optional[FetchRequest] = None):
    """
    Fetch a page and replace Yale with Fale in its visible text.

    Links, image sources and other attribute values are returned unchanged.
    """
    url = request.url if request is not None else None
    result = await relay.process_fetch_request(url)
    return FetchResponse(**result)

@router.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "service": "Faleproxy"}
