# celercrea_contact/__init__.py
from flask import Flask
from dotenv import load_dotenv

from celercrea_contact.config import ContactConfig
from celercrea_contact.routes import contact_bp, core
from celercrea_contact.utils.email_sender import send_email

load_dotenv(dotenv_path=".env")


def create_app(config=None, email_sender=None):
    app = Flask(__name__)
    app.url_map.strict_slashes = False

    config = config or ContactConfig.from_env()
    app.extensions["contact_config"] = config
    app.extensions["contact_email_sender"] = email_sender or send_email

    missing = config.missing_setting()
    if missing:
        print(f"*** contact endpoint not ready: {missing} is not set")

    app.register_blueprint(core)
    app.register_blueprint(contact_bp)
    return app
