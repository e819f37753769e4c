import pytest
from flask import Response

from enquiry_intake.config import DEFAULT_ALLOWED_ORIGINS
from enquiry_intake.cors import apply_cors_headers

URL = "/submit-contact-enquiry"


@pytest.mark.parametrize("origin", DEFAULT_ALLOWED_ORIGINS)
def test_allowed_origin_is_echoed(client, origin):
    r = client.options(URL, headers={"Origin": origin})
    assert r.headers["Access-Control-Allow-Origin"] == origin
    assert r.headers["Vary"] == "Origin"


@pytest.mark.parametrize(
    "origin",
    ["https://evil.example", "https://realcalm.com.au.evil.example", "http://localhost:8080", "null"],
)
def test_unknown_origin_gets_no_allow_origin(client, origin):
    r = client.options(URL, headers={"Origin": origin})
    assert r.status_code == 204
    assert "Access-Control-Allow-Origin" not in r.headers
    assert r.headers["Access-Control-Allow-Methods"] == "POST, OPTIONS"
    assert r.headers["Access-Control-Allow-Headers"] == "Content-Type"


def test_fixed_headers_without_origin(client):
    r = client.options(URL)
    assert "Access-Control-Allow-Origin" not in r.headers
    assert r.headers["Access-Control-Allow-Methods"] == "POST, OPTIONS"
    assert r.headers["Access-Control-Allow-Headers"] == "Content-Type"


def test_headers_on_not_found(client):
    r = client.get("/nope", headers={"Origin": "http://localhost:5173"})
    assert r.status_code == 404
    assert r.get_json() == {"error": "Not found"}
    assert r.headers["Access-Control-Allow-Origin"] == "http://localhost:5173"


def test_custom_allow_list(app, client):
    app.config["CORS_ALLOWED_ORIGINS"] = frozenset({"https://staging.example"})
    r = client.options(URL, headers={"Origin": "https://staging.example"})
    assert r.headers["Access-Control-Allow-Origin"] == "https://staging.example"
    r = client.options(URL, headers={"Origin": "https://realcalm.com.au"})
    assert "Access-Control-Allow-Origin" not in r.headers


def test_apply_cors_headers_ignores_empty_origin():
    response = apply_cors_headers(Response(), "", {""})
    assert "Access-Control-Allow-Origin" not in response.headers
