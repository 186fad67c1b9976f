"""
Directory blueprint — JSON API over organizations, departments and
employees.  Every route runs a command against the app's facade
registry.
"""

from flask import Blueprint

bp = Blueprint("directory", __name__)

from hrdirectory.blueprints.directory import routes  # noqa: E402, F401
