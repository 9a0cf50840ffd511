"""
Pydantic Schemas — API Response Models

Requests to /write are arbitrary JSON messages and are not modelled here;
the translator validates them itself.
"""

from typing import Any, Dict

from pydantic import BaseModel, Field


class WriteResponse(BaseModel):
    """Successful write of one message."""
    status: str = Field(default="written")
    database: str = Field(..., description="Database the point was written to")
    line_protocol: str = Field(..., description="Text submitted to the store")
    message: Dict[str, Any] = Field(..., description="The forwarded original message")


class StatusResponse(BaseModel):
    """Current node status badge. Empty strings mean idle."""
    fill: str = ""
    shape: str = ""
    text: str = ""
    idle: bool = True
