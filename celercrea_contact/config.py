"""
Contact endpoint configuration.

Built once by create_app() from env (after .env is loaded):
- RESEND_API_KEY, TO_EMAIL, FROM_EMAIL: required at request time
- CORS_ALLOWED_ORIGINS (comma list), CORS_DEFAULT_ORIGIN
- CORS_ALLOW_ANY_ORIGIN=1: legacy "*" origin
- CONTACT_CHECK_CONFIG=0: legacy handler without the readiness check
- RESEND_API_URL, RESEND_TIMEOUT, DEV_EMAIL_LOG_ONLY
"""

from __future__ import annotations
import os
from dataclasses import dataclass
from typing import Mapping, Optional, Tuple

DEFAULT_ORIGIN = "https://celercrea.com"
DEFAULT_ALLOWED_ORIGINS = ("https://celercrea.com", "https://www.celercrea.com")
RESEND_API_URL = "https://api.resend.com/emails"


def _clean(value: Optional[str]) -> Optional[str]:
    value = (value or "").strip()
    return value or None


def _flag(value: Optional[str], default: bool) -> bool:
    value = (value or "").strip()
    if not value:
        return default
    return value == "1"


def _timeout(value: Optional[str], default: float = 15.0) -> float:
    value = (value or "").strip()
    if not value:
        return default
    try:
        return float(value)
    except ValueError:
        print(f"*** RESEND_TIMEOUT={value!r} is not a number, using {default}")
        return default


def _origins(value: Optional[str]) -> Tuple[str, ...]:
    if not value or not value.strip():
        return DEFAULT_ALLOWED_ORIGINS
    return tuple(o.strip() for o in value.split(",") if o.strip())


@dataclass(frozen=True)
class ContactConfig:
    resend_api_key: Optional[str] = None
    to_email: Optional[str] = None
    from_email: Optional[str] = None
    allowed_origins: Tuple[str, ...] = DEFAULT_ALLOWED_ORIGINS
    default_origin: str = DEFAULT_ORIGIN
    allow_any_origin: bool = False
    check_config: bool = True
    resend_api_url: str = RESEND_API_URL
    resend_timeout: float = 15.0
    dev_email_log_only: bool = False

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "ContactConfig":
        env = os.environ if env is None else env
        return cls(
            resend_api_key=_clean(env.get("RESEND_API_KEY")),
            to_email=_clean(env.get("TO_EMAIL")),
            from_email=_clean(env.get("FROM_EMAIL")),
            allowed_origins=_origins(env.get("CORS_ALLOWED_ORIGINS")),
            default_origin=_clean(env.get("CORS_DEFAULT_ORIGIN")) or DEFAULT_ORIGIN,
            allow_any_origin=_flag(env.get("CORS_ALLOW_ANY_ORIGIN"), False),
            check_config=_flag(env.get("CONTACT_CHECK_CONFIG"), True),
            resend_api_url=_clean(env.get("RESEND_API_URL")) or RESEND_API_URL,
            resend_timeout=_timeout(env.get("RESEND_TIMEOUT")),
            dev_email_log_only=_flag(env.get("DEV_EMAIL_LOG_ONLY"), False),
        )

    def missing_setting(self) -> Optional[str]:
        """Name of the first required setting that is absent, else None."""
        if not self.resend_api_key:
            return "RESEND_API_KEY"
        if not self.to_email:
            return "TO_EMAIL"
        if not self.from_email:
            return "FROM_EMAIL"
        return None
