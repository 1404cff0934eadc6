import click
from flask.cli import AppGroup, with_appcontext

from impact_api.application.auth.login import normalize_email
from impact_api.extensions import db
from impact_api.models.user import User

users_cli = AppGroup("users", help="Manage admin dashboard users.")


@users_cli.command("create")
@click.option("--email", required=True)
@click.option("--password", required=True, prompt=True, hide_input=True, confirmation_prompt=True)
@click.option("--first-name", default=None)
@click.option("--last-name", default=None)
@click.option("--admin", is_flag=True, help="Allow editing report content.")
def create_user(email, password, first_name, last_name, admin):
    """Create a login for the admin dashboard."""
    email = normalize_email(email)
    if User.query.filter_by(email=email).first():
        raise click.ClickException(f"User {email} already exists")

    user = User()
    user.email = email
    user.first_name = first_name
    user.last_name = last_name
    user.is_admin = admin
    user.set_password(password)

    db.session.add(user)
    db.session.commit()
    click.secho(f"Created user {email} (admin={admin})", fg="green")


@click.command("init-db")
@with_appcontext
def init_db():
    """Create all tables (for deployments that don't run migrations)."""
    db.create_all()
    click.secho("Tables created", fg="green")


def register_cli(app):
    app.cli.add_command(users_cli)
    app.cli.add_command(init_db)
