import pytest
import requests

from uniqseq import client as client_module
from uniqseq.app import app


class _Reply:
    def __init__(self, response):
        self.response = response

    def raise_for_status(self):
        if self.response.status_code >= 400:
            raise requests.HTTPError(f"{self.response.status_code}")

    def json(self):
        return self.response.get_json()


@pytest.fixture
def routed(monkeypatch):
    test_client = app.test_client()

    def fake_get(url, params=None, timeout=None):
        return _Reply(test_client.get(url.replace(client_module.ORACLE, ''), query_string={k: str(v) for k, v in params.items()}))

    def fake_post(url, json=None, timeout=None):
        return _Reply(test_client.post(url.replace(client_module.ORACLE, ''), json=json))

    monkeypatch.setattr(client_module.requests, 'get', fake_get)
    monkeypatch.setattr(client_module.requests, 'post', fake_post)


def test_fetch_sequence(routed):
    assert client_module.fetch_sequence(10, 10, seed=1) == [3, 9, 2, 8, 4, 6, 0, 1, 5, 7]


def test_fetch_sequence_baseline(routed):
    values = client_module.fetch_sequence(30, 30, seed=4, mode='bitmap')
    assert sorted(values) == list(range(30))


def test_fetch_error_raises(routed):
    with pytest.raises(requests.HTTPError):
        client_module.fetch_sequence(0, 1)


def test_validate_remote(routed):
    assert client_module.validate_remote([1, 2, 3])['ok'] is True
    assert client_module.validate_remote([7, 7])['second'] == 1
