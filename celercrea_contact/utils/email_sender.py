"""
Resend email sending wrapper.

Configure via ContactConfig (env):
- RESEND_API_KEY: bearer token
- RESEND_API_URL: send endpoint (default: https://api.resend.com/emails)
- RESEND_TIMEOUT: transport timeout in seconds (default: 15)
- DEV_EMAIL_LOG_ONLY=1: print the email instead of sending it
"""

from __future__ import annotations
from typing import Optional, Tuple

import requests

from celercrea_contact.config import ContactConfig
from celercrea_contact.models.inquiry import OutboundEmail


def send_email(
    email: OutboundEmail, *, config: ContactConfig
) -> Tuple[Optional[str], Optional[str]]:
    """
    Send an email via Resend.
    Returns (provider, provider_msg_id) or (None, error_message) on failure.
    """
    if config.dev_email_log_only:
        print(f"[email][dev] to={email.to_email} subj={email.subject}")
        print(email.text)
        return "dev", None
    return _send_via_resend(email, config=config)


def _send_via_resend(
    email: OutboundEmail, *, config: ContactConfig
) -> Tuple[Optional[str], Optional[str]]:
    try:
        response = requests.post(
            config.resend_api_url,
            json=email.to_resend_payload(),
            headers={"Authorization": f"Bearer {config.resend_api_key}"},
            timeout=config.resend_timeout,
        )
    except requests.RequestException as e:
        return None, str(e)

    if not response.ok:
        return None, response.text

    msg_id = None
    try:
        msg_id = (response.json() or {}).get("id")
    except ValueError:
        pass
    return "resend", msg_id or str(response.status_code)
