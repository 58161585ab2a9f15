"""
==============================================================================
Common Schemas Module
==============================================================================

Shared response schemas used across all API endpoints.

==============================================================================
"""

from typing import Any, Optional

from pydantic import BaseModel, Field


class SuccessResponse(BaseModel):
    """Standard success response wrapper."""
    success: bool = Field(default=True)
    message: str = Field(default="Request completed successfully")
    data: Optional[Any] = Field(default=None)

    @classmethod
    def of(cls, data: Any, message: str) -> "SuccessResponse":
        """Wrap a handler result."""
        return cls(data=data, message=message)
