import os
import typing as t

import pytest
import requests

BASE_URL_ENV = "CALCULATOR_BACKEND_BASE_URL"

pytestmark = [
    pytest.mark.smoke,
    pytest.mark.skipif(not os.environ.get(BASE_URL_ENV), reason=f"{BASE_URL_ENV} not set"),
]


def _base() -> str:
    """Base URL of a running server, e.g. http://127.0.0.1:3000"""
    return os.environ.get(BASE_URL_ENV, "http://127.0.0.1:3000").rstrip("/")


def _request(session: requests.Session, method: str, path: str, body: dict | None = None) -> t.Tuple[int, t.Any]:
    """
    Send a request and minimally validate:
    - not a 5xx
    - JSON parseable
    Returns: (status_code, parsed_json)
    """
    r = session.request(method=method, url=f"{_base()}{path}", json=body, timeout=15)
    assert r.status_code < 500, f"500+ on {path}: {r.status_code} body={r.text[:500]}"
    try:
        data = r.json()
    except ValueError as exc:
        pytest.fail(f"Non-JSON response for {path}: {exc}\nBody: {r.text[:500]}")
    return r.status_code, data


def test_live_health_and_welcome():
    sess = requests.Session()
    code, data = _request(sess, "GET", "/health")
    assert code == 200 and data["status"] == "healthy"
    code, data = _request(sess, "GET", "/")
    assert code == 200 and "/calculate/sum" in data["endpoints"]


def test_live_calculations():
    sess = requests.Session()
    code, data = _request(sess, "POST", "/calculate/sum", {"a": 2, "b": 3})
    assert code == 200 and data["result"] == 5
    code, data = _request(sess, "POST", "/calculate/product", {"a": -3, "b": -4})
    assert code == 200 and data["result"] == 12
    code, data = _request(sess, "POST", "/calculate/sum", {"a": "x", "b": 3})
    assert code == 400 and data == {"error": "Both a and b must be numbers"}
