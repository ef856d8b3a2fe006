from typing import Optional, Any

class SmartGovError(Exception):
    """
    Base exception for SmartGov application.
    """
    def __init__(self, message: str, code: str = "INTERNAL_ERROR", status_code: int = 500, details: Optional[Any] = None):
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)

class ValidationError(SmartGovError):
    """
    Raised when a required field is missing.
    """
    def __init__(self, message: str = "Validation error", details: Optional[Any] = None):
        super().__init__(message, code="VALIDATION_ERROR", status_code=400, details=details)

class UnauthenticatedError(SmartGovError):
    """
    Raised when a request that needs a session token arrives without one.
    """
    def __init__(self, message: str = "Not authenticated", details: Optional[Any] = None):
        super().__init__(message, code="UNAUTHENTICATED", status_code=401, details=details)

class ApiError(SmartGovError):
    """
    Raised by the API client when the backend answers with a non-2xx status.
    """
    def __init__(self, message: str, status_code: int, code: str = "API_ERROR", details: Optional[Any] = None):
        super().__init__(message, code=code, status_code=status_code, details=details)
