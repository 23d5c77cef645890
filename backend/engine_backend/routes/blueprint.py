from flask import Blueprint, current_app
from werkzeug.routing import Rule

api_bp = Blueprint("backend", __name__)

# Listed so Flask leaves OPTIONS to the view instead of answering it itself
ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


class AnyMethodRule(Rule):
    """URL rule that matches on the path alone; the method is never checked."""

    def __init__(self, string, **kwargs):
        kwargs["methods"] = None
        super().__init__(string, **kwargs)


def json_response(payload: dict):
    # Compact, insertion-ordered, no trailing newline (jsonify appends one)
    body = current_app.json.dumps(payload, separators=(",", ":"))
    return current_app.response_class(body, mimetype="application/json")
