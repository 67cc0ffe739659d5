from __future__ import annotations

import threading

import pytest

from stateful_api import load_client
from stateful_api.counter import CounterHandler
from stateful_api.database import CourseStore
from stateful_api.models import CourseBase


class FakeResponse:
    def __init__(self, status_code: int = 200, text: str = "", payload=None):
        self.status_code = status_code
        self.text = text
        self._payload = payload

    def raise_for_status(self):
        if self.status_code >= 400:
            raise RuntimeError(f"HTTP {self.status_code}")

    def json(self):
        return self._payload


class FakeSession:
    """Responde como los servicios reales, sobre el mismo estado en memoria."""

    def __init__(self):
        self.counter = CounterHandler()
        self.store = CourseStore.from_seed()
        self.urls: list[str] = []
        self._lock = threading.Lock()

    def get(self, url):
        with self._lock:
            self.urls.append(url)
        n = self.counter.increment()
        return FakeResponse(text=f"This endpoint was called {n} times\n")

    def post(self, url, json=None):
        with self._lock:
            self.urls.append(url)
        course = self.store.create(CourseBase(**json))
        return FakeResponse(status_code=201, payload=course.model_dump())


def test_hammer_counter_collects_every_value():
    session = FakeSession()
    values = load_client.hammer_counter("http://svc/", 200, 8, session=session)
    assert sorted(values) == list(range(1, 201))
    assert load_client.check_unique(values)
    assert set(session.urls) == {"http://svc/count"}


def test_hammer_courses_returns_new_ids():
    session = FakeSession()
    ids = load_client.hammer_courses("http://svc", 50, 8, session=session)
    assert sorted(ids) == list(range(4, 54))
    assert set(session.urls) == {"http://svc/courses"}


def test_check_unique_detects_duplicates():
    assert load_client.check_unique([1, 2, 3])
    assert not load_client.check_unique([1, 2, 2])


def test_unexpected_counter_body_raises():
    class Garbled(FakeSession):
        def get(self, url):
            return FakeResponse(text="hola")

    with pytest.raises(ValueError):
        load_client.hammer_counter("http://svc", 1, 1, session=Garbled())


def test_main_reports_no_duplicates(monkeypatch: pytest.MonkeyPatch, capsys):
    monkeypatch.setattr(load_client, "hammer_counter", lambda url, n, c: list(range(1, n + 1)))
    assert load_client.main(["-n", "10", "-c", "2"]) == 0
    out = capsys.readouterr().out
    assert "Duplicados: 0" in out
    assert "Máximo reportado: 10" in out


def test_main_fails_on_duplicates(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(load_client, "hammer_courses", lambda url, n, c: [4, 4, 5])
    assert load_client.main(["--target", "courses", "-n", "3"]) == 1
