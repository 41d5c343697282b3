## Daily.co room provisioning
## POST {DAILY_API_URL}/rooms with bearer auth, single attempt, explicit timeout.
## Provider errors are passed back to the caller as UpstreamError(payload).

import logging
import math
import secrets
import string
import time
from dataclasses import dataclass
from typing import Any, Optional

import httpx

from callserver.config import Settings
from callserver.errors import ConfigurationError, UpstreamError

logger = logging.getLogger(__name__)

ROOM_NAME_PREFIX = "room_"
ROOM_NAME_LENGTH = 12
MIN_LEAD_SECONDS = 5
NBF_SKEW_SECONDS = 10

_ALPHABET = string.ascii_lowercase + string.digits


@dataclass(frozen=True)
class ProvisionedRoom:
    name: str
    exp: int
    privacy: str


def now_seconds() -> int:
    return int(time.time())


def generate_room_name(prefix: str = ROOM_NAME_PREFIX, length: int = ROOM_NAME_LENGTH) -> str:
    return prefix + "".join(secrets.choice(_ALPHABET) for _ in range(length))


def compute_expiration(duration_minutes: float, now: Optional[int] = None) -> int:
    """Absolute expiry in epoch seconds, never closer than MIN_LEAD_SECONDS."""
    if now is None:
        now = now_seconds()
    exp = now + math.floor(duration_minutes * 60)
    return max(exp, now + MIN_LEAD_SECONDS)


def build_room_payload(name: str, privacy: str, exp: int, now: int) -> dict:
    return {
        "name": name,
        "privacy": privacy,
        "properties": {
            "exp": exp,
            "nbf": now - NBF_SKEW_SECONDS,
            "enable_prejoin_ui": True,
            "eject_at_room_exp": True,
            "enable_chat": True,
            "enable_network_ui": True,
        },
    }


def _as_epoch(value) -> Optional[int]:
    try:
        return int(value)
    except (TypeError, ValueError):
        logger.warning("ignoring non-numeric exp from provider: %r", value)
        return None


def _provider_exp(data: dict) -> Optional[int]:
    config = data.get("config")
    if isinstance(config, dict) and config.get("exp"):
        exp = _as_epoch(config["exp"])
        if exp is not None:
            return exp
    if data.get("exp"):
        return _as_epoch(data["exp"])
    return None


def _error_payload(r: httpx.Response) -> Any:
    try:
        return r.json()
    except ValueError:
        pass
    return r.text or f"Daily API returned HTTP {r.status_code}"


class DailyRoomProvisioner:
    def __init__(self, settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.settings = settings
        ## tests swap in httpx.MockTransport
        self.transport = transport

    def ensure_configured(self) -> None:
        missing = self.settings.missing()
        if missing:
            logger.error("create-call refused, missing config: %s", ", ".join(missing))
            raise ConfigurationError("Server misconfigured: DAILY_API_KEY or DAILY_DOMAIN missing")

    async def create_room(self, duration_minutes: float, name: Optional[str] = None) -> ProvisionedRoom:
        self.ensure_configured()

        now = now_seconds()
        exp = compute_expiration(duration_minutes, now)
        privacy = self.settings.room_privacy
        payload = build_room_payload(name or generate_room_name(), privacy, exp, now)

        api = f"{self.settings.daily_api_url}/rooms"
        headers = {"Authorization": f"Bearer {self.settings.daily_api_key}"}
        logger.info("creating room name=%s exp=%s privacy=%s", payload["name"], exp, privacy)
        try:
            async with httpx.AsyncClient(timeout=self.settings.daily_timeout, transport=self.transport) as client:
                r = await client.post(api, json=payload, headers=headers)
        except httpx.HTTPError as e:
            logger.error("create room request failed: %r", e)
            raise UpstreamError(str(e) or "Daily API request failed") from e

        if r.status_code >= 300:
            err = _error_payload(r)
            logger.error("create room failed status=%s body=%s", r.status_code, err)
            raise UpstreamError(err)

        try:
            data = r.json()
        except ValueError as e:
            raise UpstreamError("Daily API returned a non-JSON response") from e
        if not isinstance(data, dict):
            raise UpstreamError("Daily API returned an unexpected response")

        room = ProvisionedRoom(
            name=data.get("name") or payload["name"],
            exp=_provider_exp(data) or exp,
            privacy=data.get("privacy") or privacy,
        )
        logger.info("room created name=%s exp=%s", room.name, room.exp)
        return room
