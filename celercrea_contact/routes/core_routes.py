from flask import Blueprint, jsonify

core = Blueprint("core", __name__)


@core.get("/__ping")
def __ping():
    return jsonify({"ok": True}), 200
