import pytest
from flask.testing import FlaskClient

from app import app as flask_app


@pytest.fixture
def client() -> FlaskClient:
    flask_app.config["TESTING"] = True
    return flask_app.test_client()


def test_get_shows_form(client: FlaskClient) -> None:
    res = client.get("/")
    assert res.status_code == 200
    assert b"JSON to Lua Table" in res.data
    assert b"JSON error" not in res.data


def test_post_converts(client: FlaskClient) -> None:
    res = client.post("/", data={"input_code": '{"a": [1, 2]}', "indent": "2"})
    assert res.status_code == 200
    assert "{\n  a = {\n    1,\n    2\n  }\n}\n" in res.get_data(as_text=True)


def test_post_invalid_json(client: FlaskClient) -> None:
    res = client.post("/", data={"input_code": "{oops"})
    assert res.status_code == 200
    assert b"JSON error" in res.data


def test_unknown_indent_falls_back_to_tab(client: FlaskClient) -> None:
    res = client.post("/", data={"input_code": "[true]", "indent": "8"})
    assert "{\n\ttrue\n}\n" in res.get_data(as_text=True)
