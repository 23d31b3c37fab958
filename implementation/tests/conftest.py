import os
import random
import sys
import pytest

# Ensure implementation/src (containing `bubbles` and `leaderboard`) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
SRC_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..', 'src'))
if SRC_ROOT not in sys.path:
    sys.path.insert(0, SRC_ROOT)

from bubbles.config import Settings
from bubbles.grid import Grid
from bubbles.lattice import Lattice
from bubbles.simulation import Simulation
from bubbles.store import RoundState
from leaderboard import create_app, db


class TestConfig:
    TESTING = True
    SECRET_KEY = 'test-secret'
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SCORES_DEFAULT_LIMIT = 20
    SCORES_MAX_LIMIT = 30
    CORS_ORIGINS = ['*']


@pytest.fixture()
def settings():
    return Settings()


@pytest.fixture()
def lattice(settings):
    return Lattice.centered(settings.rows, settings.cols, settings.radius, settings.grid_top, settings.window_width)


@pytest.fixture()
def grid(settings):
    return Grid(settings.rows, settings.cols)


@pytest.fixture()
def state(settings):
    return RoundState(lives=settings.lives)


@pytest.fixture()
def sim(settings):
    return Simulation(settings=settings, rng=random.Random(1234))


@pytest.fixture()
def empty_sim(sim):
    sim.grid.reset()
    return sim


@pytest.fixture()
def flask_app():
    application = create_app(TestConfig)
    with application.app_context():
        yield application
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()
