"""
Custom Flask CLI commands.

These commands are registered with the app in the application factory.
Run them with ``flask <command_name>``.

Usage::

    flask db-check              # Verify database connectivity and tables
    flask seed-directory        # Load the reference dataset into the database
    flask seed-directory --reset
    flask org-info 1            # Print an organization as JSON
"""

import json

import click
from flask import current_app
from flask.cli import with_appcontext
from sqlalchemy import func, select

from hrdirectory.connections import SqlConnection
from hrdirectory.exceptions import DirectoryError
from hrdirectory.extensions import db
from hrdirectory.models.organization import (
    DepartmentRecord,
    EmployeeRecord,
    OrganizationRecord,
)
from hrdirectory.seed import build_seed_organizations, load_seed_data
from hrdirectory.services.commands import GetOrgInfoCommand
from hrdirectory.services.facade_registry import current_registry


@click.command("db-check")
@with_appcontext
def db_check_command():
    """
    Verify database connectivity and report directory table row counts.

    Useful for confirming DATABASE_URL is correct before switching
    STORAGE_BACKEND to ``sql``.
    """
    click.echo("=" * 60)
    click.echo("  HR Directory — Database Connectivity Check")
    click.echo("=" * 60)

    click.echo(f"\n  Database: {db.engine.url.render_as_string(hide_password=True)}")
    click.echo(f"  Active backend: {current_app.config['STORAGE_BACKEND']}\n")

    # -- Step 1: Basic connectivity ----------------------------------------
    click.echo("[1/2] Testing connection...")
    try:
        db.session.execute(db.text("SELECT 1"))
        click.secho("      ✓ Connected successfully.", fg="green")
    except Exception as exc:  # pylint: disable=broad-exception-caught
        click.secho(f"      ✗ Connection failed: {exc}", fg="red")
        raise SystemExit(1)

    # -- Step 2: Directory tables ------------------------------------------
    click.echo("[2/2] Counting directory rows...")
    try:
        for label, model in (
            ("organizations", OrganizationRecord),
            ("departments", DepartmentRecord),
            ("employees", EmployeeRecord),
        ):
            count = db.session.scalar(select(func.count()).select_from(model))
            click.echo(f"      {label:>13}: {count}")
    except Exception as exc:  # pylint: disable=broad-exception-caught
        click.secho(f"      ✗ Table check failed: {exc}", fg="red")
        click.echo("        Have you run `flask seed-directory`?")
        raise SystemExit(1)

    click.secho("\n  All checks passed.", fg="green", bold=True)


@click.command("seed-directory")
@click.option(
    "--reset",
    is_flag=True,
    help="Drop and recreate the directory tables before seeding.",
)
@with_appcontext
def seed_directory_command(reset: bool):
    """Create the directory tables and load the reference dataset."""
    if reset:
        db.drop_all()
        click.echo("Dropped directory tables.")
    db.create_all()

    added = load_seed_data(SqlConnection(db.engine), build_seed_organizations())
    click.secho(f"Seeded {added} organization(s).", fg="green")


@click.command("org-info")
@click.argument("org_id", type=int)
@with_appcontext
def org_info_command(org_id: int):
    """Print an organization as JSON, read through the facade registry."""
    try:
        result = GetOrgInfoCommand(org_id).execute(current_registry())
    except DirectoryError as exc:
        click.secho(f"Error: {exc}", fg="red", err=True)
        raise SystemExit(1)
    click.echo(json.dumps(result, indent=2))


def register_commands(app):
    """Register all custom CLI commands with the Flask application."""
    app.cli.add_command(db_check_command)
    app.cli.add_command(seed_directory_command)
    app.cli.add_command(org_info_command)
