#!/usr/bin/env python3
"""
Manual smoke test for the contact API.

Usage:
  python scripts/smoke_contact.py [--base URL] [--send]

  Ensure the server is running first:
    DEV_EMAIL_LOG_ONLY=1 PORT=5050 python run.py

  --send posts one valid inquiry (a real email unless DEV_EMAIL_LOG_ONLY=1).
"""
import argparse
import json
import sys
from urllib.request import Request, urlopen
from urllib.error import HTTPError, URLError

BASE = "http://127.0.0.1:5050"
ORIGIN = "https://celercrea.com"


def req(method: str, path: str, data=None) -> tuple[dict | None, int]:
    url = f"{BASE.rstrip('/')}{path}"
    headers = {"Content-Type": "application/json", "Origin": ORIGIN}
    body = json.dumps(data).encode() if data is not None else None
    try:
        r = urlopen(Request(url, data=body, headers=headers, method=method), timeout=10)
        raw = r.read().decode()
        return (json.loads(raw) if raw else {}), r.status
    except HTTPError as e:
        body = e.read().decode() if e.fp else ""
        try:
            out = json.loads(body) if body else {}
        except json.JSONDecodeError:
            out = {"error": body or str(e)}
        return out, e.code
    except URLError as e:
        print(f"Connection error: {e}")
        return None, 0


def main():
    global BASE
    ap = argparse.ArgumentParser()
    ap.add_argument(
        "--base", default=BASE, help="Base URL (default: http://127.0.0.1:5050)"
    )
    ap.add_argument("--send", action="store_true", help="Also send one real inquiry")
    args = ap.parse_args()
    BASE = args.base

    checks = [
        ("pre-flight", "OPTIONS", None, 204),
        ("GET rejected", "GET", None, 405),
        ("honeypot", "POST", {"name": "x", "email": "x@y.io", "company": "bot"}, 200),
        ("missing name", "POST", {"email": "jane@example.com", "msg": "hi"}, 400),
        ("bad email", "POST", {"name": "Jane", "email": "jane@example", "msg": "hi"}, 400),
        ("no content", "POST", {"name": "Jane", "email": "jane@example.com"}, 400),
    ]
    if args.send:
        checks.append(
            (
                "send",
                "POST",
                {
                    "name": "Smoke Test",
                    "email": "smoke@example.com",
                    "type": "Website",
                    "msg": "Smoke test inquiry, please ignore.",
                },
                200,
            )
        )

    ok = fail = 0
    for i, (label, method, data, expected) in enumerate(checks, 1):
        print(f"{i}. {label} ...")
        resp, code = req(method, "/api/contact", data)
        if code != expected:
            print(f"   FAIL expected {expected}, got {code} {resp}")
            fail += 1
        else:
            print(f"   OK {code} {resp}")
            ok += 1

    print(f"\n{ok} passed, {fail} failed")
    sys.exit(1 if fail else 0)


if __name__ == "__main__":
    main()
