from datetime import datetime

import pytest

from golf.app import create_app
from golf.config import TestConfig
from golf.extensions import db
from golf.models.solution import Solution
from golf.models.user import User


@pytest.fixture
def app():
    app = create_app(TestConfig)
    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def user(app):
    user = User(id=42, login="gopher")
    db.session.add(user)
    db.session.commit()
    return user


@pytest.fixture
def login(client):
    def _login(user):
        with client.session_transaction() as sess:
            sess["_user_id"] = str(user.id)
            sess["_fresh"] = True
    return _login


@pytest.fixture
def add_solution(app):
    def _add(user_id, hole, lang, code, success=False, submitted=None):
        solution = Solution(
            user_id=user_id,
            hole=hole,
            lang=lang,
            code=code,
            success=success,
            submitted=submitted or datetime(2017, 1, 1),
        )
        db.session.add(solution)
        db.session.commit()
        return solution
    return _add
