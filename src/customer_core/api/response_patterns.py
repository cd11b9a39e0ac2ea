# CustomerCore - Customer Record Management Service
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""API response patterns following Result[T, E] + HTTP semantics."""

from typing import Any, Union

from beartype import beartype
from fastapi import Response, status
from pydantic import BaseModel, ConfigDict, Field

from ..core.errors import Conflict, CustomerError, InvalidRequest, NotFound
from ..core.result_types import Result


@beartype
class ErrorResponse(BaseModel):
    """Standardized error response for business logic failures."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        validate_assignment=True,
        str_strip_whitespace=True,
        validate_default=True,
    )

    success: bool = Field(default=False, description="Always false for error responses")
    error: str = Field(..., description="Human-readable error message")
    error_code: str | None = Field(default=None, description="Machine-readable error code")


ERROR_STATUS: dict[type, int] = {
    NotFound: status.HTTP_404_NOT_FOUND,
    Conflict: status.HTTP_409_CONFLICT,
    InvalidRequest: status.HTTP_400_BAD_REQUEST,
}


@beartype
def map_error_to_status(error: CustomerError) -> int:
    """Map a business-rule rejection to its HTTP status code."""
    return ERROR_STATUS[type(error)]


@beartype
def handle_result(
    result: Result[Any, CustomerError],
    response: Response,
    success_status: int = status.HTTP_200_OK,
) -> Union[Any, ErrorResponse]:
    """Convert a service Result to the response payload and status code.

    Args:
        result: Service layer Result
        response: FastAPI Response object to set status code
        success_status: HTTP status for successful operations (default 200)

    Returns:
        Either the unwrapped success value or ErrorResponse
    """
    if result.is_err():
        error = result.unwrap_err()
        response.status_code = map_error_to_status(error)
        return ErrorResponse(error=error.message, error_code=error.code)

    response.status_code = success_status
    return result.unwrap()
