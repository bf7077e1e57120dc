"""Flask CLI commands for site maintenance"""

import click
from app import db
import logging

logger = logging.getLogger(__name__)


def init_app(app):
    """Register CLI commands with the Flask app"""

    @app.cli.command("init-db")
    def init_db():
        """
        Create the database tables.
        Safe to run repeatedly; existing tables are left untouched.
        """
        click.echo("Creating database tables...")

        with app.app_context():
            db.create_all()

        logger.info(f"Database tables ready at {app.config['SQLALCHEMY_DATABASE_URI']}")
        click.echo("Done.")
