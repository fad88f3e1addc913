"""
Base models and common schemas
"""
from datetime import datetime, timezone
from typing import Any, Generic, Optional, TypeVar
from pydantic import BaseModel, Field

DataT = TypeVar("DataT")


class MetaInfo(BaseModel):
    """Response metadata"""
    request_id: str = Field(..., description="Unique request identifier")
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    processing_time_ms: Optional[int] = None


class ErrorDetail(BaseModel):
    """Error details"""
    code: str = Field(..., description="Error code")
    message: str = Field(..., description="Human-readable error message")
    details: Optional[dict[str, Any]] = None


class SuccessResponse(BaseModel, Generic[DataT]):
    """Standard success response wrapper"""
    success: bool = True
    data: DataT
    meta: Optional[MetaInfo] = None


class ErrorResponse(BaseModel):
    """Standard error response wrapper"""
    success: bool = False
    error: ErrorDetail
    meta: Optional[MetaInfo] = None
