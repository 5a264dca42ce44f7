"""REST API error response models.

Every error body has the same shape, so clients can branch on ``code``.
"""

from pydantic import BaseModel, ConfigDict


class ErrorDetail(BaseModel):
    """Field-level error detail, used by validation errors."""

    field: str
    message: str
    code: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "field": "price",
                "message": "Price can't be zero or lower",
                "code": "NON_POSITIVE_PRICE",
            }
        }
    )


class ErrorResponse(BaseModel):
    """Structured error response format.

    Examples:
        Simple error:
            {
                "detail": "Car with identifier 'car9' not found",
                "code": "NOT_FOUND"
            }

        Validation error with field details:
            {
                "detail": "Validation failed",
                "code": "VALIDATION_ERROR",
                "errors": [
                    {
                        "field": "price",
                        "message": "Price can't be zero or lower",
                        "code": "NON_POSITIVE_PRICE"
                    }
                ]
            }
    """

    detail: str
    code: str | None = None
    errors: list[ErrorDetail] | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"detail": "Car with identifier 'car9' not found", "code": "NOT_FOUND"},
                {
                    "detail": "Car purchase has been cancelled due to car malfunctions",
                    "code": "SALE_CANCELLED",
                },
                {
                    "detail": "Validation failed",
                    "code": "VALIDATION_ERROR",
                    "errors": [
                        {
                            "field": "price",
                            "message": "Price can't be zero or lower",
                            "code": "NON_POSITIVE_PRICE",
                        }
                    ],
                },
            ]
        }
    )


ERROR_RESPONSES: dict[int | str, dict] = {
    404: {"model": ErrorResponse, "description": "Car, user or asset not found"},
    409: {"model": ErrorResponse, "description": "Business rule refused the operation"},
    422: {"model": ErrorResponse, "description": "Validation error"},
    503: {"model": ErrorResponse, "description": "World state unavailable"},
}
