from fastapi import HTTPException, status


class NotFoundError(HTTPException):
    """Raised when a requested resource is not found (or not visible to the caller)."""

    def __init__(self, resource: str):
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"{resource} not found",
        )


class UnauthorizedError(HTTPException):
    """Raised when the request carries no usable credentials."""

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=message,
        )


class ValidationError(HTTPException):
    """Raised when request validation fails."""

    def __init__(self, message: str):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=message,
        )


class UpstreamError(HTTPException):
    """Raised when a third-party service (GitHub, LLM) fails or misbehaves."""

    def __init__(self, message: str, status_code: int = status.HTTP_502_BAD_GATEWAY):
        super().__init__(
            status_code=status_code,
            detail=message,
        )


class ServiceUnavailableError(HTTPException):
    """Raised when an optional integration is not configured on the server."""

    def __init__(self, message: str):
        super().__init__(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=message,
        )
