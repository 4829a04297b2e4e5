"""
CLI Commands

Registered on the Flask CLI, e.g. ``flask --app app make-admin someone@example.com``.
"""

import click

from classbook.errors import NotFound
from classbook.extensions import db
from classbook.services import accounts


def register_commands(app):

    @app.cli.command('init-db')
    def init_db():
        """Create all database tables."""
        db.create_all()
        click.echo('Database tables created')

    @app.cli.command('make-admin')
    @click.argument('email')
    def make_admin(email):
        """Promote an existing user to administrator."""
        try:
            user = accounts.promote_to_admin(email)
        except NotFound as e:
            raise click.ClickException(e.message)
        click.echo(f'User {user.email} is now an administrator')
