## Manager pass gate: one shared secret, exact comparison, allow or deny.

from typing import Optional

from fastapi import Request

from callserver.errors import AuthorizationError

PASS_QUERY_PARAM = "pass"
PASS_HEADER = "X-Manager-Pass"


def presented_pass(request: Request, header_first: bool = False) -> Optional[str]:
    """Credential from ?pass= or X-Manager-Pass, first non-empty wins."""
    from_query = request.query_params.get(PASS_QUERY_PARAM)
    from_header = request.headers.get(PASS_HEADER)
    order = (from_header, from_query) if header_first else (from_query, from_header)
    for value in order:
        if value:
            return value
    return None


def is_authorized(presented: Optional[str], secret: str) -> bool:
    if presented is None or not secret:
        return False
    return presented == secret


def require_manager(request: Request, secret: str, header_first: bool = False) -> None:
    if not is_authorized(presented_pass(request, header_first=header_first), secret):
        raise AuthorizationError()
