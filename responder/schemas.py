from typing import Literal

from pydantic import BaseModel


class SuccessResponse(BaseModel):
    """Response model for the root endpoint.

    `success` is the string "true", not a JSON boolean. Consumers match on the
    literal string, so it must stay that way.
    """

    success: Literal["true"] = "true"
