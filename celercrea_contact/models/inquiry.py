"""
Contact form submission and the email built from it.
"""

from __future__ import annotations
import re
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Tuple

# Lightweight shape check (local@domain.tld), not RFC validation
EMAIL_RE = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")

NAME_EMAIL_REQUIRED = "Name and email are required."
INVALID_EMAIL = "Invalid email format."
CONTENT_REQUIRED = "Please include a project type or some details."


def _field(data: Dict[str, Any], key: str) -> str:
    value = data.get(key)
    if not value:
        return ""
    return str(value).strip()


@dataclass(frozen=True)
class InquiryRequest:
    name: str
    email: str
    type: str = ""
    msg: str = ""


@dataclass(frozen=True)
class OutboundEmail:
    from_email: str
    to_email: str
    reply_to: str
    subject: str
    text: str

    def to_resend_payload(self) -> Dict[str, Any]:
        # reply-to under both spellings; the provider accepts either depending on route
        return {
            "from": self.from_email,
            "to": [self.to_email],
            "subject": self.subject,
            "text": self.text,
            "reply_to": self.reply_to,
            "replyTo": self.reply_to,
        }


def is_bot(data: Dict[str, Any]) -> bool:
    """Hidden "company" field filled in means a bot."""
    return bool(_field(data, "company"))


def parse_inquiry(data: Any) -> Tuple[Optional[InquiryRequest], Optional[str]]:
    """
    Validate a decoded JSON body. Returns (inquiry, None) or (None, error_message).
    A body that is not a JSON object carries no fields.
    """
    if not isinstance(data, dict):
        data = {}
    name = _field(data, "name")
    email = _field(data, "email")
    need = _field(data, "type")
    msg = _field(data, "msg")

    if not name or not email:
        return None, NAME_EMAIL_REQUIRED
    if not EMAIL_RE.fullmatch(email):
        return None, INVALID_EMAIL
    if not need and not msg:
        return None, CONTENT_REQUIRED
    return InquiryRequest(name=name, email=email, type=need, msg=msg), None


def build_outbound_email(
    inquiry: InquiryRequest,
    *,
    from_email: str,
    to_email: str,
    now: Optional[datetime] = None,
) -> OutboundEmail:
    now = now or datetime.now(timezone.utc)
    stamp = now.isoformat(timespec="milliseconds").replace("+00:00", "Z")
    subject = f"CelerCrea Inquiry — {inquiry.type or 'Project request'} — {inquiry.name}"
    text = (
        f"New inquiry received ({stamp})\n"
        f"\n"
        f"Name: {inquiry.name}\n"
        f"Email: {inquiry.email}\n"
        f"Need: {inquiry.type or '(not specified)'}\n"
        f"\n"
        f"Details:\n"
        f"{inquiry.msg or '(none provided)'}\n"
    )
    return OutboundEmail(
        from_email=from_email,
        to_email=to_email,
        reply_to=inquiry.email,
        subject=subject,
        text=text,
    )
