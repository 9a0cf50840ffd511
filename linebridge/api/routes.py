"""
API Routes — Endpoint Definitions

POST /write hands the request body to the write node as one host message
and maps the completion outcome onto an HTTP status.
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Request, status

from linebridge.errors import ConfigurationError, SubmissionError
from linebridge.node import WriteNode

from .schemas import StatusResponse, WriteResponse


router = APIRouter()


def get_node(request: Request) -> WriteNode:
    """Dependency that provides the process-wide write node."""
    return request.app.state.node


def error_status_code(error: BaseException) -> int:
    """Map a completion error to an HTTP status code."""
    if isinstance(error, ConfigurationError):
        return status.HTTP_503_SERVICE_UNAVAILABLE
    if isinstance(error, SubmissionError):
        return status.HTTP_502_BAD_GATEWAY
    return status.HTTP_422_UNPROCESSABLE_ENTITY


@router.post(
    "/write",
    response_model=WriteResponse,
    status_code=status.HTTP_200_OK,
    responses={
        422: {"description": "Message could not be translated"},
        502: {"description": "Store rejected the write"},
        503: {"description": "Store connection not configured"},
    },
    summary="Write a single message",
    description="Translates the message to line protocol and writes it to the store."
)
async def write_message(
    message: Dict[str, Any] = Body(...),
    node: WriteNode = Depends(get_node)
) -> WriteResponse:
    """
    Write one message.
    
    - String payloads are written verbatim as line protocol
    - Object payloads are converted to a point first
    """
    if node.is_inert:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Store connection config not set"
        )
    
    forwarded: List[Any] = []
    failure: List[BaseException] = []

    def done(error: Optional[BaseException] = None) -> None:
        if error is not None:
            failure.append(error)

    encoded = await node.on_input(message, send=forwarded.append, done=done)
    
    if failure:
        raise HTTPException(
            status_code=error_status_code(failure[0]),
            detail=str(failure[0])
        )
    
    return WriteResponse(
        database=encoded.database,
        line_protocol=encoded.line_protocol,
        message=forwarded[0],
    )


@router.get(
    "/status",
    response_model=StatusResponse,
    summary="Node status",
    description="Current status badge of the write node."
)
async def node_status(node: WriteNode = Depends(get_node)) -> StatusResponse:
    current = node.status.current
    return StatusResponse(**current.to_dict(), idle=current.is_idle)
