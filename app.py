# app.py
from flask import Flask, current_app
from flask.cli import with_appcontext
from flask.logging import default_handler
from flask_sqlalchemy import SQLAlchemy
from flask_migrate import Migrate, upgrade
from alembic.runtime.migration import MigrationContext
from sqlalchemy import inspect
from dotenv import load_dotenv
from datetime import datetime
import logging
import click
import os


# --- Load environment variables first ---
load_dotenv()

basedir = os.path.abspath(os.path.dirname(__file__))
MIGRATIONS_DIR = os.path.join(basedir, 'migrations')

db = SQLAlchemy()
migrate = Migrate()


# ---------- Config ----------
def database_url():
    db_url = os.getenv("DATABASE_URL")
    if not db_url:
        return 'sqlite:///' + os.path.join(basedir, 'snapshots.db')
    if db_url.startswith("postgres://"):
        db_url = db_url.replace("postgres://", "postgresql://", 1)
    return db_url


def configure_logging(app):
    level = getattr(logging, app.config["LOG_LEVEL"], logging.INFO)
    default_handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s"))
    app.logger.setLevel(level)


# ---------- Models ----------
class Snapshot(db.Model):
    id = db.Column(db.String(255), primary_key=True)
    version = db.Column(db.Integer, nullable=False)
    # storage descriptors, JSON encoded
    original = db.Column(db.Text)
    preview = db.Column(db.Text)
    text = db.Column(db.Text)
    thumbnail = db.Column(db.Text)
    task_id = db.Column(db.String(255))
    language = db.Column(db.String(64))
    create_time = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)
    update_time = db.Column(db.DateTime, onupdate=datetime.utcnow)


# ---------- helpers ----------
def snapshot_columns():
    """Columns currently on the snapshot table, in table order.

    Reads the live schema rather than the model, so it reflects whichever
    revision has been applied. Empty when the table does not exist.
    """
    inspector = inspect(db.engine)
    if not inspector.has_table(Snapshot.__tablename__):
        return []
    return [col['name'] for col in inspector.get_columns(Snapshot.__tablename__)]


def current_revision():
    with db.engine.connect() as connection:
        return MigrationContext.configure(connection).get_current_revision()


# ---------- CLI Utilities ----------
@click.command("init-db")
@with_appcontext
def init_db():
    current_app.logger.info("Applying migrations from %s", MIGRATIONS_DIR)
    upgrade(directory=MIGRATIONS_DIR)
    print(f"Initialized the database at revision {current_revision()}.")


@click.command("schema-status")
@with_appcontext
def schema_status():
    revision = current_revision()
    print(f"Revision: {revision or 'none'}")
    columns = snapshot_columns()
    if not columns:
        print("Table 'snapshot' does not exist.")
        return
    print("snapshot: " + ", ".join(columns))


def create_app(test_config=None):
    app = Flask(__name__)
    app.config['SECRET_KEY'] = os.getenv("SECRET_KEY", 'change-this-to-a-random-secret-key')
    app.config['SQLALCHEMY_DATABASE_URI'] = database_url()
    app.config['SQLALCHEMY_TRACK_MODIFICATIONS'] = False
    app.config['LOG_LEVEL'] = os.getenv("LOG_LEVEL", "INFO").upper()
    if test_config:
        app.config.update(test_config)

    configure_logging(app)
    db.init_app(app)
    migrate.init_app(app, db, directory=MIGRATIONS_DIR)

    app.cli.add_command(init_db)
    app.cli.add_command(schema_status)

    return app


app = create_app()


if __name__ == '__main__':
    app.run(debug=True)
