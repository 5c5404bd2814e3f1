import os

# Must be set before app.py reads its configuration
os.environ['FLASK_ENV'] = 'testing'

import pytest

from app import app as flask_app
from models import db


@pytest.fixture
def app(tmp_path):
    flask_app.config['UPLOAD_FOLDER'] = str(tmp_path)
    with flask_app.app_context():
        db.create_all()
        yield flask_app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()
