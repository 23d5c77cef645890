import time

from .blueprint import ALL_METHODS, api_bp, json_response


def now_ms() -> int:
    return time.time_ns() // 1_000_000


@api_bp.route("/health", methods=ALL_METHODS)
def health():
    return json_response({"status": "ok", "service": "backend", "ts": now_ms()})
