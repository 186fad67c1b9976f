"""
Routes for the main blueprint — health check.
"""

from hrdirectory.blueprints.main import bp
from hrdirectory.services.facade_registry import current_registry


@bp.route("/health")
def health_check():
    """
    Health check endpoint for monitoring and load balancers.

    Returns 200 if a storage connection is configured, 503 otherwise.
    """
    registry = current_registry()
    connection = registry.connection
    if connection is None:
        return {"status": "unhealthy", "storage": "not configured"}, 503
    return {
        "status": "healthy",
        "storage": connection.backend_name,
        "cached_organizations": registry.cached_organization_ids(),
    }, 200
