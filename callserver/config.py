import os
from dataclasses import dataclass
from dotenv import load_dotenv

from callserver.utils.links import normalize_domain

load_dotenv()

DEFAULT_MANAGER_PASS = "museflow"
DEFAULT_DAILY_API_URL = "https://api.daily.co/v1"
PRIVACY_MODES = ("public", "private")


def _privacy(raw: str) -> str:
    mode = (raw or "").lower().strip()
    return mode if mode in PRIVACY_MODES else "public"


@dataclass(frozen=True)
class Settings:
    daily_api_key: str = ""
    daily_domain: str = ""
    daily_api_url: str = DEFAULT_DAILY_API_URL
    room_privacy: str = "public"
    daily_timeout: float = 5.0
    manager_pass: str = DEFAULT_MANAGER_PASS
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            daily_api_key=os.getenv("DAILY_API_KEY", "").strip(),
            daily_domain=normalize_domain(os.getenv("DAILY_DOMAIN", "")),
            daily_api_url=(os.getenv("DAILY_API_URL") or DEFAULT_DAILY_API_URL).strip().rstrip("/"),
            room_privacy=_privacy(os.getenv("DAILY_ROOM_PRIVACY", "public")),
            daily_timeout=float(os.getenv("DAILY_TIMEOUT_SEC", "5.0")),
            manager_pass=os.getenv("MANAGER_PASS") or DEFAULT_MANAGER_PASS,
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "3000")),
            log_level=(os.getenv("LOG_LEVEL", "INFO") or "INFO").upper().strip(),
        )

    def missing(self) -> list:
        """Names of required provider settings that are not set."""
        out = []
        if not self.daily_api_key:
            out.append("DAILY_API_KEY")
        if not self.daily_domain:
            out.append("DAILY_DOMAIN")
        return out
