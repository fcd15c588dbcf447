"""HTTP client for the /todos API."""

import logging
import time

import requests

logger = logging.getLogger(__name__)


class ClientError(Exception):
    """Transport failure or non-2xx answer from the API."""

    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.status_code = status_code


class TodoApiClient:
    def __init__(self, base_url, timeout=10, session=None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def _request(self, method, url, **kwargs):
        try:
            resp = self.session.request(method, url, timeout=self.timeout, **kwargs)
            resp.raise_for_status()
        except requests.HTTPError as exc:
            message = _error_message(exc.response)
            logger.warning("%s %s failed: %s", method, url, message)
            raise ClientError(message, exc.response.status_code) from exc
        except requests.RequestException as exc:
            logger.warning("%s %s failed: %s", method, url, exc)
            raise ClientError(str(exc)) from exc
        if not resp.content:
            return None
        try:
            return resp.json()
        except ValueError as exc:
            logger.warning("%s %s returned a non-JSON body", method, url)
            raise ClientError(f"Unexpected response from {url}", resp.status_code) from exc

    def list_todos(self, fresh=False):
        """Fetch every todo. ``fresh`` adds a cache-busting query parameter."""
        params = {"_": str(int(time.time() * 1000))} if fresh else None
        return _expect(self._request("GET", self.base_url, params=params), list)

    def create_todo(self, title, description=None, alert=None):
        data = self._request("POST", self.base_url, json=_body(title, description, alert))
        return _expect(data, dict)

    def update_todo(self, todo_id, title, description=None, alert=None):
        data = self._request(
            "PUT", f"{self.base_url}/{todo_id}", json=_body(title, description, alert)
        )
        return _expect(data, dict)

    def delete_todo(self, todo_id):
        self._request("DELETE", f"{self.base_url}/{todo_id}")


def _body(title, description, alert):
    body = {"title": title}
    if description is not None:
        body["description"] = description
    if alert is not None:
        body["alert"] = alert
    return body


def _error_message(resp):
    try:
        data = resp.json()
    except ValueError:
        data = None
    if isinstance(data, dict) and data.get("message"):
        return data["message"]
    return resp.reason or f"HTTP {resp.status_code}"


def _expect(data, kind):
    if not isinstance(data, kind):
        raise ClientError(f"Expected a JSON {kind.__name__} from the API")
    return data
