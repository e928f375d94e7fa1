from enum import Enum


class ErrorType(Enum):
    NOT_FOUND = "not_found"
    VALIDATION_ERROR = "validation_error"
    INSUFFICIENT_STOCK = "insufficient_stock"
    PRODUCT_IN_USE = "product_in_use"
    CONSTRAINT_VIOLATION = "constraint_violation"
    STORE_UNAVAILABLE = "store_unavailable"
    INTERNAL_ERROR = "internal_error"


# Map error types to HTTP status codes
ERROR_STATUS_MAP = {
    ErrorType.NOT_FOUND: 404,
    ErrorType.VALIDATION_ERROR: 422,
    ErrorType.INSUFFICIENT_STOCK: 409,
    ErrorType.PRODUCT_IN_USE: 409,
    ErrorType.CONSTRAINT_VIOLATION: 409,
    ErrorType.STORE_UNAVAILABLE: 503,
    ErrorType.INTERNAL_ERROR: 500,
}
