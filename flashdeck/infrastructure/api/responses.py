"""Conversion of handler envelopes into HTTP responses."""

from fastapi.responses import JSONResponse

from flashdeck.application.handler.response import ApiResponse


def to_json_response(response: ApiResponse) -> JSONResponse:
    """Send the envelope body as JSON with the envelope status code."""
    return JSONResponse(content=response.body, status_code=response.status)
