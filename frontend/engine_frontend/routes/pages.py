from pathlib import Path

from flask import current_app

from .blueprint import ALL_METHODS, pages_bp

PAGES_DIR = Path(__file__).resolve().parents[1] / "static"
INDEX_PAGE = "index.html"

# Read once; every request gets the same bytes and a plain 200
INDEX_HTML = (PAGES_DIR / INDEX_PAGE).read_bytes()


@pages_bp.route("/", methods=ALL_METHODS)
@pages_bp.route("/index.html", methods=ALL_METHODS)
def index():
    return current_app.response_class(INDEX_HTML, mimetype="text/html")
