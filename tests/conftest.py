from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from stateful_api.counter import CounterHandler, create_counter_app
from stateful_api.courses import create_courses_app
from stateful_api.database import CourseStore


@pytest.fixture
def store() -> CourseStore:
    return CourseStore.from_seed()


@pytest.fixture
def courses_app(store: CourseStore):
    return create_courses_app(store)


@pytest.fixture
def courses_client(courses_app) -> TestClient:
    return TestClient(courses_app)


@pytest.fixture
def counter() -> CounterHandler:
    return CounterHandler()


@pytest.fixture
def counter_app(counter: CounterHandler):
    return create_counter_app(counter)


@pytest.fixture
def counter_client(counter_app) -> TestClient:
    return TestClient(counter_app)
