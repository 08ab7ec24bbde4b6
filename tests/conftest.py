import json

import pytest

all_transport_dependencies = ["requests"]


def pytest_configure(config):
    for transport in all_transport_dependencies:
        config.addinivalue_line(
            "markers",
            f"{transport}: mark test as necessitating the {transport} dependency",
        )


class FakeServer:
    """Answers the requests sent with requests.Session.request
    and keeps a record of them."""

    def __init__(self, status_code=200, text="{}", reason="OK", headers=None):
        self.status_code = status_code
        self.text = text
        self.reason = reason
        self.headers = headers or {}
        self.calls = []

    def answer(self, method, url, **kwargs):
        import requests

        self.calls.append((method, url, kwargs))

        response = requests.Response()
        response.status_code = self.status_code
        response.reason = self.reason
        response.url = url
        response.encoding = "utf-8"
        response._content = self.text.encode("utf-8")
        response.headers.update(self.headers)
        return response

    @property
    def last_kwargs(self):
        return self.calls[-1][2]

    @property
    def sent_payload(self):
        return json.loads(self.last_kwargs["data"])


@pytest.fixture
def fake_server(monkeypatch):
    """Patch requests.Session.request with the answer method of a FakeServer.

    The fixture is a factory receiving the FakeServer arguments."""

    def _fake_server(**kwargs):
        import requests

        server = FakeServer(**kwargs)

        def request(session, method, url, **request_kwargs):
            return server.answer(method, url, **request_kwargs)

        monkeypatch.setattr(requests.Session, "request", request)
        return server

    return _fake_server
