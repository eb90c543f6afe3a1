"""Shared fixtures: a TestClient over a throwaway SQLite database."""

import os
import tempfile
from datetime import datetime, timedelta, timezone

import pytest

# db.py reads DATABASE_URL at import time
_DB_DIR = tempfile.mkdtemp(prefix="trivia-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_DB_DIR, 'test.db')}"

from fastapi.testclient import TestClient  # noqa: E402


@pytest.fixture
def client():
    from db import Base, engine
    from main import app

    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    with TestClient(app) as c:
        yield c
    Base.metadata.drop_all(bind=engine)


def iso(delta: timedelta) -> str:
    return (datetime.now(timezone.utc) + delta).isoformat()


@pytest.fixture
def make_user(client):
    def _make(login):
        resp = client.post("/api/users", json={"login": login})
        assert resp.status_code == 201, resp.text
        return resp.json()
    return _make


@pytest.fixture
def make_question(client):
    counter = {"n": 0}

    def _make(correct_answer=1, time=30):
        counter["n"] += 1
        resp = client.post("/api/questions", json={
            "question": f"Question #{counter['n']}?",
            "answer1": "A",
            "answer2": "B",
            "answer3": "C",
            "answer4": "D",
            "correctAnswer": correct_answer,
            "time": time,
        })
        assert resp.status_code == 201, resp.text
        return resp.json()
    return _make


@pytest.fixture
def make_trivia(client):
    def _make(start_delta=timedelta(hours=-1), duration=600, level=5, question_ids=()):
        resp = client.post("/api/trivias", json={
            "start": iso(start_delta),
            "duration": duration,
            "level": level,
            "questions": [{"id": q} for q in question_ids],
        })
        assert resp.status_code == 201, resp.text
        return resp.json()
    return _make


@pytest.fixture
def answer(client):
    def _answer(user_id, question_id, correct=True, time=10):
        resp = client.post("/api/client-answers", json={
            "correct": correct,
            "time": time,
            "question": {"id": question_id},
            "user": {"id": user_id},
        })
        assert resp.status_code == 201, resp.text
        return resp.json()
    return _answer
