"""
Locust load tests for the contact API.

Install: pip install locust
Run: locust -f locustfile.py --host=http://127.0.0.1:5050

For headless: locust -f locustfile.py --host=http://127.0.0.1:5050 \
    --users 10 --spawn-rate 2 --run-time 1m --headless

Only paths that never reach the email provider are exercised
(pre-flight, honeypot, validation errors).
"""

import os
from locust import HttpUser, task, between

ORIGIN = os.getenv("LOCUST_ORIGIN", "https://celercrea.com")


class ContactAPIUser(HttpUser):
    wait_time = between(1, 3)

    def _headers(self):
        return {"Content-Type": "application/json", "Origin": ORIGIN}

    @task(10)
    def ping(self):
        self.client.get("/__ping")

    @task(8)
    def preflight(self):
        self.client.options(
            "/api/contact",
            headers={
                "Origin": ORIGIN,
                "Access-Control-Request-Method": "POST",
            },
        )

    @task(5)
    def honeypot(self):
        self.client.post(
            "/api/contact",
            json={
                "name": "Bot",
                "email": "bot@example.com",
                "msg": "spam",
                "company": "Spam Inc",
            },
            headers=self._headers(),
        )

    @task(3)
    def invalid_email(self):
        with self.client.post(
            "/api/contact",
            json={"name": "Load Test", "email": "not-an-email", "msg": "hi"},
            headers=self._headers(),
            catch_response=True,
        ) as r:
            if r.status_code == 400:
                r.success()
