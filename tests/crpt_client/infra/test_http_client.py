from __future__ import annotations

import json

import httpx

from crpt_client.infra.http_client import HttpClient


def _json_response(status_code: int, obj: object) -> httpx.Response:
    req = httpx.Request("POST", "http://test")
    content = json.dumps(obj).encode("utf-8")
    return httpx.Response(status_code, request=req, content=content, headers={"Content-Type": "application/json"})


class _StubClient(httpx.Client):
    def __init__(self, post_resp: httpx.Response) -> None:
        super().__init__(timeout=0.1)
        self._post_resp = post_resp
        self.calls: list[dict] = []

    def post(self, url: str, json: dict, params=None, headers=None):
        self.calls.append({"url": url, "json": json, "params": params, "headers": headers})
        return self._post_resp


def test_http_client_post_json_returns_response():
    hc = HttpClient()
    hc._client = _StubClient(_json_response(200, {"value": "ok"}))
    resp = hc.post_json("http://x", {"k": "v"}, params={"pg": "shoes"}, headers={"Authorization": "Bearer t"})
    assert resp.status_code == 200
    assert resp.json() == {"value": "ok"}
    assert hc._client.calls == [
        {"url": "http://x", "json": {"k": "v"}, "params": {"pg": "shoes"}, "headers": {"Authorization": "Bearer t"}}
    ]


def test_http_client_post_json_does_not_raise_on_error_status():
    hc = HttpClient()
    hc._client = _StubClient(_json_response(500, {"error": "boom"}))
    resp = hc.post_json("http://x", {})
    assert resp.status_code == 500


def test_http_client_timeout_is_applied():
    with HttpClient(timeout_seconds=3.5) as hc:
        assert hc._client.timeout.connect == 3.5
        assert hc._client.timeout.read == 3.5


def test_http_client_follows_redirects():
    hc = HttpClient()
    assert hc._client.follow_redirects is True
    hc.close()


def test_http_client_close_closes_underlying_client():
    hc = HttpClient()
    hc.close()
    assert hc._client.is_closed
