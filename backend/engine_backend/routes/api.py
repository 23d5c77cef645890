from werkzeug.routing import BaseConverter

from .blueprint import ALL_METHODS, api_bp, json_response

PLACEHOLDER_MESSAGE = "Engine backend API placeholder"


class SuffixConverter(BaseConverter):
    """Matches the rest of the URL, slashes included (non-empty)."""

    regex = ".+"
    part_isolating = False


@api_bp.route("/api", methods=ALL_METHODS)
@api_bp.route("/api<suffix:rest>", methods=ALL_METHODS)
def api_placeholder(rest: str = ""):
    # /api, /api/..., and anything else sharing the prefix (/apiary)
    return json_response({"message": PLACEHOLDER_MESSAGE})
