import json
from unittest.mock import MagicMock

import pytest
import requests

from todo_frontend.api_client import ClientError, TodoApiClient


def _response(status=200, payload=None, reason="OK"):
    resp = requests.Response()
    resp.status_code = status
    resp.reason = reason
    if payload is not None:
        resp._content = json.dumps(payload).encode()
    else:
        resp._content = b""
    return resp


@pytest.fixture()
def session():
    return MagicMock()


@pytest.fixture()
def api(session):
    return TodoApiClient("http://api.test/todos/", timeout=3, session=session)


def test_list_plain_and_fresh(api, session):
    session.request.return_value = _response(payload=[{"id": "1", "title": "a"}])

    assert api.list_todos() == [{"id": "1", "title": "a"}]
    method, url = session.request.call_args.args
    assert (method, url) == ("GET", "http://api.test/todos")
    assert session.request.call_args.kwargs["params"] is None
    assert session.request.call_args.kwargs["timeout"] == 3

    api.list_todos(fresh=True)
    assert "_" in session.request.call_args.kwargs["params"]


def test_create_sends_only_given_fields(api, session):
    session.request.return_value = _response(201, {"id": "1", "title": "a"})
    api.create_todo("a")
    assert session.request.call_args.kwargs["json"] == {"title": "a"}


def test_update_and_delete_urls(api, session):
    session.request.return_value = _response(200, {"id": "9", "title": "b"})
    api.update_todo("9", "b", "desc")
    assert session.request.call_args.args == ("PUT", "http://api.test/todos/9")
    assert session.request.call_args.kwargs["json"] == {"title": "b", "description": "desc"}

    session.request.return_value = _response(204)
    api.delete_todo("9")
    assert session.request.call_args.args == ("DELETE", "http://api.test/todos/9")


def test_http_error_carries_server_message(api, session):
    session.request.return_value = _response(400, {"message": "Alert must have date, time, and phone."}, "BAD REQUEST")
    with pytest.raises(ClientError) as excinfo:
        api.create_todo("a", alert={"date": "2024-01-01"})
    assert excinfo.value.status_code == 400
    assert str(excinfo.value) == "Alert must have date, time, and phone."


def test_transport_error(api, session):
    session.request.side_effect = requests.ConnectionError("refused")
    with pytest.raises(ClientError) as excinfo:
        api.list_todos()
    assert excinfo.value.status_code is None


def test_non_json_success_body_is_a_client_error(api, session):
    resp = _response()
    resp._content = b"<html>not the api</html>"
    session.request.return_value = resp
    with pytest.raises(ClientError) as excinfo:
        api.list_todos()
    assert excinfo.value.status_code == 200


def test_wrong_json_shape_is_a_client_error(api, session):
    session.request.return_value = _response(payload={"items": []})
    with pytest.raises(ClientError):
        api.list_todos()


def test_view_reports_a_page_that_is_not_the_api(session):
    from todo_frontend.view import TodoView

    resp = _response()
    resp._content = b"<html>not the api</html>"
    session.request.return_value = resp
    view = TodoView(TodoApiClient("http://proxy.test/todos", session=session))

    view.load()

    assert view.todos == []
    assert view.notice.is_error
