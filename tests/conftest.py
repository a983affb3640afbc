import os

import pytest
import requests

from hnitems.client import HackerNewsClient

BASE_URL = "https://hn.test/v0"


class FakeResp:
    def __init__(self, payload=None, status_code=200, body_error=None):
        self.payload = payload
        self.status_code = status_code
        self.body_error = body_error

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")

    def json(self):
        if self.body_error is not None:
            raise self.body_error
        return self.payload


def pytest_collection_modifyitems(config, items):
    if os.getenv("HACKERNEWS_LIVE") == "1":
        return
    skip_live = pytest.mark.skip(reason="set HACKERNEWS_LIVE=1 to hit the real API")
    for item in items:
        if "live" in item.keywords:
            item.add_marker(skip_live)


@pytest.fixture
def client():
    return HackerNewsClient(base_url=BASE_URL)


class FakeApi:
    """Serves JSON payloads by path, e.g. api.routes["/item/1.json"] = {...}.

    A route may also hold a FakeResp to control status or body errors.
    Unknown paths answer with null, like Firebase does.
    """

    def __init__(self):
        self.routes = {}
        self.requested = []

    def get(self, url, timeout=None):
        path = url[len(BASE_URL):]
        self.requested.append(path)
        answer = self.routes.get(path)
        return answer if isinstance(answer, FakeResp) else FakeResp(answer)


@pytest.fixture
def fake_api(monkeypatch, client):
    api = FakeApi()
    monkeypatch.setattr(client.http.session, "get", api.get)
    return api


@pytest.fixture
def story_json():
    return {
        "by": "dhouston",
        "descendants": 71,
        "id": 8863,
        "kids": [9224, 8917, 8952],
        "score": 104,
        "time": 1175714200,
        "title": "My YC app: Dropbox - Throw away your USB drive",
        "type": "story",
        "url": "http://www.getdropbox.com/u/2/screencast.html",
    }


@pytest.fixture
def job_json():
    return {
        "by": "justin",
        "id": 192327,
        "score": 6,
        "text": "Justin.tv is the biggest live video site online.",
        "time": 1210981217,
        "title": "Justin.tv is looking for a Lead Flash Engineer!",
        "type": "job",
    }


@pytest.fixture
def poll_json():
    return {
        "by": "pg",
        "descendants": 54,
        "id": 126809,
        "kids": [126822, 126823],
        "parts": [126810, 126811, 126812],
        "score": 46,
        "time": 1204403652,
        "title": "Poll: What would happen if News.YC had explicit support for polls?",
        "type": "poll",
    }


@pytest.fixture
def pollopt_json():
    return {
        "by": "pg",
        "id": 160705,
        "poll": 160704,
        "score": 335,
        "text": "Yes, ban them; I'm tired of seeing Valleywag stories on News.YC.",
        "time": 1207886576,
        "type": "pollopt",
    }


@pytest.fixture
def comment_json():
    return {
        "by": "norvig",
        "id": 2921983,
        "kids": [2922097, 2922429],
        "parent": 2921506,
        "text": "Aw shucks, guys ... you make me blush with your compliments.",
        "time": 1314211127,
        "type": "comment",
    }


@pytest.fixture
def item_json(story_json, job_json, poll_json, pollopt_json, comment_json):
    return {
        "story": story_json,
        "job": job_json,
        "poll": poll_json,
        "pollopt": pollopt_json,
        "comment": comment_json,
    }
