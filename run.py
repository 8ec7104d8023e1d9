from celercrea_contact import create_app
import os

app = create_app()

if __name__ == "__main__":
    port = int(os.getenv("PORT", 5050))
    app.run(
        host="127.0.0.1",
        port=port,
        debug=False,
        use_reloader=False,
    )

# Local run:
# cp .env.example .env  (fill in RESEND_API_KEY, TO_EMAIL, FROM_EMAIL)
# DEV_EMAIL_LOG_ONLY=1 PORT=5050 python run.py
