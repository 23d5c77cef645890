from __future__ import annotations

import json
import time


def test_health_endpoint(client):
    before = time.time_ns() // 1_000_000
    resp = client.get("/health")
    after = time.time_ns() // 1_000_000

    assert resp.status_code == 200
    assert resp.content_type == "application/json"
    payload = resp.get_json()
    assert payload == {"status": "ok", "service": "frontend", "ts": payload["ts"]}
    assert before <= payload["ts"] <= after


def test_health_body_is_compact_and_ordered(client):
    body = client.get("/health").get_data(as_text=True)
    assert body.startswith('{"status":"ok","service":"frontend","ts":')


def test_health_timestamp_does_not_go_backwards(client):
    stamps = [client.get("/health").get_json()["ts"] for _ in range(5)]
    assert stamps == sorted(stamps)


def test_health_accepts_post(client):
    assert client.post("/health").status_code == 200


def test_health_body_is_exact(client):
    body = client.get("/health").data
    payload = json.loads(body)
    assert body == b'{"status":"ok","service":"frontend","ts":%d}' % payload["ts"]


def test_health_answers_trace(client):
    resp = client.open("/health", method="TRACE")
    assert resp.status_code == 200
    assert resp.get_json()["service"] == "frontend"
