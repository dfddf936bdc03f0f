# Overview: Flask CLI command groups for bootstrap, inspection, and the gRPC server.

# backend/pvz/cli.py
# Commands Legend (run from the backend directory):
# Prereqs:
# - Activate your virtualenv.
# - Set FLASK_APP to wsgi.py (PowerShell: $env:FLASK_APP="wsgi.py").
# - Use: python -m flask <group> <command> [options]
#
# Database:
# - python -m flask db-admin init
#   Create all tables (development; production uses `flask db upgrade`).
# - python -m flask db-admin reset --yes
#   DEV/TEST only: drop and recreate all tables (deletes all data).
#
# Users:
# - python -m flask users create --email mod@pvz.local --password secret1 --role moderator
#
# Pickup points:
# - python -m flask pvz create --city "Москва"
# - python -m flask pvz list --limit 20
#
# gRPC:
# - python -m flask grpc serve [--port 3000]
#   Serve pvz.v1.PVZService/GetPVZList (blocks).

import click
from flask import current_app
from flask.cli import with_appcontext

from .extensions import db
from .models.pickup_points import CITIES
from .permissions import Role
from .services import auth_service, pvz_service
from .validation import ConflictError, ValidationError


@click.group('db-admin')
def db_admin_group():
    """Schema bootstrap commands."""


@db_admin_group.command('init')
@with_appcontext
def init_db():
    db.create_all()
    click.echo("PASS Tables created")


@db_admin_group.command('reset')
@click.option('--yes', is_flag=True, help='Confirm dropping all data')
@with_appcontext
def reset_db(yes):
    if not yes:
        click.echo("FAIL Refusing to drop tables without --yes")
        return
    db.drop_all()
    db.create_all()
    click.echo("PASS Tables dropped and recreated")


@click.group('users')
def users_group():
    """User bootstrap commands."""


@users_group.command('create')
@click.option('--email', prompt=True)
@click.option('--password', prompt=True, hide_input=True, confirmation_prompt=True)
@click.option('--role', type=click.Choice(Role.ALL), prompt=True)
@with_appcontext
def create_user_cli(email, password, role):
    try:
        user = auth_service.register_user(email, password, role)
    except (ValidationError, ConflictError) as e:
        click.echo(f"FAIL {e}")
        return
    click.echo(f"PASS Created user: {user.email} (ID: {user.id}, role: {user.role})")


@click.group('pvz')
def pvz_group():
    """Pickup point inspection/bootstrap commands."""


@pvz_group.command('create')
@click.option('--city', type=click.Choice(CITIES), required=True)
@with_appcontext
def create_pvz_cli(city):
    pickup_point = pvz_service.create_pickup_point(city)
    click.echo(f"PASS Created pvz: {pickup_point.id} ({pickup_point.city})")


@pvz_group.command('list')
@click.option('--limit', type=int, default=20)
@with_appcontext
def list_pvz_cli(limit):
    pickup_points = pvz_service.list_all_pickup_points(limit=limit)
    if not pickup_points:
        click.echo("No pickup points found.")
        return
    for pickup_point in pickup_points:
        data = pickup_point.to_dict()
        click.echo(f"{data['id']}  {data['registrationDate']}  {data['city']}")


@click.group('grpc')
def grpc_group():
    """gRPC server commands."""


@grpc_group.command('serve')
@click.option('--port', type=int, default=None, help='Defaults to GRPC_PORT')
@with_appcontext
def serve_grpc(port):
    from .grpc_server import serve

    app = current_app._get_current_object()
    address = f"[::]:{port}" if port else None
    serve(app, address)


def register_commands(app):
    app.cli.add_command(db_admin_group)
    app.cli.add_command(users_group)
    app.cli.add_command(pvz_group)
    app.cli.add_command(grpc_group)
