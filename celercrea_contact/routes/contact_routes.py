"""
Contact form API: validate a submission and forward it by email to TO_EMAIL.
"""

from flask import Blueprint, Response, current_app, jsonify, request

from celercrea_contact.services.inquiry_service import handle_inquiry, method_not_allowed
from celercrea_contact.utils.cors import cors_headers

contact_bp = Blueprint("contact", __name__)

CONTACT_PATH = "/api/contact"
ALL_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def _reply(status, payload):
    config = current_app.extensions["contact_config"]
    headers = cors_headers(request.headers.get("Origin"), config)

    if payload is None:
        resp = Response(status=status, headers=headers)
        resp.headers.pop("Content-Type", None)
        return resp

    resp = jsonify(payload)
    resp.status_code = status
    resp.headers.extend(headers)
    return resp


@contact_bp.route(CONTACT_PATH, methods=ALL_METHODS)
def submit_contact():
    """Accept contact form submission; every verb gets a JSON reply with CORS headers."""
    status, payload = handle_inquiry(
        method=request.method,
        content_type=request.headers.get("Content-Type"),
        body=request.get_data(cache=False),
        config=current_app.extensions["contact_config"],
        send=current_app.extensions["contact_email_sender"],
    )
    return _reply(status, payload)


@contact_bp.app_errorhandler(405)
def contact_method_not_allowed(e):
    # verbs outside ALL_METHODS (TRACE, PROPFIND, ...) fail in routing
    if request.path.rstrip("/") != CONTACT_PATH:
        return e
    return _reply(*method_not_allowed())
