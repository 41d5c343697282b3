## Participant join links for a provider room.
## Every value is percent-encoded like JS encodeURIComponent, so names and the
## manager pass are reflected as-is but never break the query string.

import re
from urllib.parse import quote

from callserver.schemas import ParticipantLinks

MANAGER_DISPLAY_NAME = "Manager"

_SCHEME_RE = re.compile(r"^https?://", re.IGNORECASE)


def normalize_domain(raw: str) -> str:
    """Strip scheme and trailing slashes: 'https://x.daily.co/' -> 'x.daily.co'."""
    return _SCHEME_RE.sub("", (raw or "").strip()).rstrip("/")


def build_room_url(domain: str, room_name: str) -> str:
    return f"https://{normalize_domain(domain)}/{room_name}"


def _encode(value: str) -> str:
    ## same set as JS encodeURIComponent
    return quote(value, safe="-_.!~*'()")


def build_role_url(base: str, display_name: str, role: str, **extra: str) -> str:
    url = f"{base}?userName={_encode(display_name)}&role={_encode(role)}"
    for key, value in extra.items():
        url += f"&{key}={_encode(value)}"
    return url


def build_participant_links(
    domain: str,
    room_name: str,
    client_name: str = "Client",
    model_name: str = "Model",
    manager_pass: str = "",
) -> ParticipantLinks:
    base = build_room_url(domain, room_name)
    return ParticipantLinks(
        model=build_role_url(base, model_name, "model"),
        client=build_role_url(base, client_name, "client"),
        manager=build_role_url(base, MANAGER_DISPLAY_NAME, "manager", **{"pass": manager_pass}),
    )
