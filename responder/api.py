from fastapi import APIRouter
from loguru import logger

from responder.schemas import SuccessResponse

router = APIRouter()


@router.get("/", response_model=SuccessResponse)
async def root_route() -> SuccessResponse:
    """Returns the fixed success payload."""
    logger.debug("Received request for /")
    return SuccessResponse()
