from __future__ import annotations
import json
from typing import Any, Callable, Dict, Optional, Tuple

from celercrea_contact.config import ContactConfig
from celercrea_contact.models.inquiry import (
    OutboundEmail,
    build_outbound_email,
    is_bot,
    parse_inquiry,
)

Result = Tuple[int, Optional[Dict[str, Any]]]
EmailSender = Callable[..., Tuple[Optional[str], Optional[str]]]

UNKNOWN_SEND_ERROR = "Unknown Resend error"


def _mask_email(e: str | None) -> str | None:
    if not e:
        return None
    local, _, domain = e.partition("@")
    if not domain:
        return e
    if len(local) <= 2:
        masked = local[0:1] + "***"
    else:
        masked = local[0] + "***" + local[-1]
    return masked + "@" + domain


def _fail(status: int, error: str, detail: str | None = None) -> Result:
    body: Dict[str, Any] = {"ok": False, "error": error}
    if detail is not None:
        body["detail"] = detail
    return status, body


def method_not_allowed() -> Result:
    return _fail(405, "Method not allowed")


def check_method(method: str) -> Optional[Result]:
    if method == "OPTIONS":
        return 204, None
    if method != "POST":
        return method_not_allowed()
    return None


def check_config(config: ContactConfig) -> Optional[Result]:
    if not config.check_config:
        return None
    missing = config.missing_setting()
    if missing:
        return _fail(500, f"Missing {missing}")
    return None


def check_content_type(content_type: str | None) -> Optional[Result]:
    if "application/json" not in (content_type or "").lower():
        return _fail(400, "Expected JSON")
    return None


def dispatch(email: OutboundEmail, config: ContactConfig, send: EmailSender) -> Result:
    provider, msg_or_err = send(email, config=config)
    if provider is None:
        print("[email error]", _mask_email(email.reply_to), msg_or_err)
        return _fail(502, "Email send failed", msg_or_err or UNKNOWN_SEND_ERROR)
    return 200, {"ok": True}


def _process(
    body: bytes, content_type: str | None, config: ContactConfig, send: EmailSender
) -> Result:
    gate = check_config(config) or check_content_type(content_type)
    if gate:
        return gate

    data = json.loads(body.decode("utf-8", "replace"))
    if data is None:
        return _fail(500, "Server error")

    if isinstance(data, dict) and is_bot(data):
        print("[contact] honeypot hit, dropped")
        return 200, {"ok": True}

    inquiry, err = parse_inquiry(data)
    if inquiry is None:
        return _fail(400, err)

    email = build_outbound_email(
        inquiry,
        from_email=config.from_email or "",
        to_email=config.to_email or "",
    )
    return dispatch(email, config, send)


def handle_inquiry(
    *,
    method: str,
    content_type: str | None,
    body: bytes,
    config: ContactConfig,
    send: EmailSender,
) -> Result:
    """
    Run a contact form request through the gates.
    Returns (status_code, json_body); json_body is None for the pre-flight reply.
    """
    gate = check_method(method.upper())
    if gate:
        return gate

    try:
        return _process(body, content_type, config, send)
    except Exception as e:
        print("[contact error]", type(e).__name__, str(e)[:200])
        return _fail(500, "Server error")
