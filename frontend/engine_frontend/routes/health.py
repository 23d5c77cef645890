import time

from .blueprint import ALL_METHODS, pages_bp, json_response


def now_ms() -> int:
    return time.time_ns() // 1_000_000


@pages_bp.route("/health", methods=ALL_METHODS)
def health():
    return json_response({"status": "ok", "service": "frontend", "ts": now_ms()})
