from pydantic import BaseModel, Field
from typing import Optional, Any

class ErrorResponse(BaseModel):
    """
    Body of every failed request. The front end shows `error` as-is.
    """
    error: str = Field(..., description="User-visible failure message")
    code: str = Field(..., description="Machine-readable error code, e.g. UNAUTHENTICATED")
    details: Optional[Any] = None
