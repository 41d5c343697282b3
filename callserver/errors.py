## Error taxonomy for the call API.
## Every error is rendered as {"error": ...} with its status code; the
## manager page renders its own HTML 401 instead.

from typing import Any

from fastapi import Request
from fastapi.responses import JSONResponse


class CallServerError(Exception):
    status_code = 500

    def __init__(self, error: Any = "Unknown error"):
        super().__init__(error if isinstance(error, str) else repr(error))
        self.error = error


class ConfigurationError(CallServerError):
    """Required provider settings are missing."""
    status_code = 500


class ValidationError(CallServerError):
    status_code = 400


class AuthorizationError(CallServerError):
    status_code = 401

    def __init__(self, error: Any = "Unauthorized"):
        super().__init__(error)


class UpstreamError(CallServerError):
    """Provider call failed; `error` is the provider payload when there is one."""
    status_code = 500


async def call_server_error_handler(request: Request, exc: CallServerError) -> JSONResponse:
    return JSONResponse({"error": exc.error}, status_code=exc.status_code)
