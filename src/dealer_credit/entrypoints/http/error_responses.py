"""REST API error response models.

Structured error responses that provide consistent format for all HTTP errors.
Used in route ``responses=`` declarations so the OpenAPI schema documents them.
"""

from pydantic import BaseModel, ConfigDict


class ErrorDetail(BaseModel):
    """Individual error detail for field-level errors.

    Used in validation errors to indicate which field failed and why.
    """

    field: str
    message: str
    code: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "field": "downPayment",
                "message": "Minimum down payment for motor bekas is 20% (got 5.00%)",
                "code": "DOWN_PAYMENT_BELOW_MINIMUM",
            }
        }
    )


class ErrorResponse(BaseModel):
    """Structured error response format.

    Supports:
    - Simple errors (just detail and code)
    - Multi-field validation errors (detail + errors array)

    Examples:
        Simple error:
            {
                "detail": "LeasingPartner with identifier 'XYZ' not found",
                "code": "NOT_FOUND"
            }

        Validation error with every failed rule:
            {
                "detail": "Credit validation failed",
                "code": "VALIDATION_ERROR",
                "errors": [
                    {
                        "field": "downPayment",
                        "message": "Down payment must be less than the vehicle price",
                        "code": "DOWN_PAYMENT_NOT_BELOW_PRICE"
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
                {"detail": "LeasingPartner with identifier 'XYZ' not found", "code": "NOT_FOUND"},
                {
                    "detail": "Credit validation failed",
                    "code": "VALIDATION_ERROR",
                    "errors": [
                        {
                            "field": "vehiclePrice",
                            "message": "Minimum motor price is Rp 5.000.000",
                            "code": "PRICE_BELOW_MINIMUM",
                        },
                        {
                            "field": "tenor",
                            "message": "Maximum tenor for motor baru is 36 months",
                            "code": "TENOR_ABOVE_MAXIMUM",
                        },
                    ],
                },
            ]
        }
    )


VALIDATION_RESPONSE = {"model": ErrorResponse, "description": "Invalid request or credit application"}
UNAUTHORIZED_RESPONSE = {"model": ErrorResponse, "description": "Missing or invalid API key"}
NOT_FOUND_RESPONSE = {"model": ErrorResponse, "description": "Leasing partner or rate not found"}
