import importlib.util
import os
from pathlib import Path

import pytest

os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")
os.environ.setdefault("SECRET_KEY", "test-secret-key")

from alembic.operations import Operations  # noqa: E402
from alembic.runtime.migration import MigrationContext  # noqa: E402
from sqlalchemy import create_engine, inspect  # noqa: E402

from app import create_app, db as _db  # noqa: E402


VERSIONS_DIR = Path(__file__).resolve().parent.parent / "migrations" / "versions"

BASELINE = "3c1f0a9d2b7e"
DROP_STATUS = "8e4b6d2a91f5"


def load_revision(revision):
    """Import a revision script by its id; the file names are not valid module names."""
    path, = VERSIONS_DIR.glob(f"{revision}_*.py")
    spec = importlib.util.spec_from_file_location(f"revision_{revision}", path)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def columns_of(bind, table="snapshot"):
    return {col["name"]: col for col in inspect(bind).get_columns(table)}


@pytest.fixture
def engine(tmp_path):
    engine = create_engine(f"sqlite:///{tmp_path / 'migrations.db'}")
    yield engine
    engine.dispose()


@pytest.fixture
def run_step(engine):
    """Run one direction of one revision against ``engine``, outside the runner."""

    def run(revision, direction):
        module = load_revision(revision)
        with engine.begin() as connection:
            ctx = MigrationContext.configure(connection)
            with Operations.context(ctx):
                getattr(module, direction)()

    return run


@pytest.fixture
def app(tmp_path):
    app = create_app({
        "TESTING": True,
        "SQLALCHEMY_DATABASE_URI": f"sqlite:///{tmp_path / 'app.db'}",
    })
    with app.app_context():
        yield app
        _db.session.remove()
        _db.engine.dispose()


@pytest.fixture
def db(app):
    return _db
