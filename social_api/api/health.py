"""Health check endpoints."""
import logging
from flask import Blueprint, jsonify, current_app

from social_api.infrastructure.database import DatabaseEngineFactory
from social_api.infrastructure.service_container import get_service_container

health_blueprint = Blueprint("health", __name__)
_logger = logging.getLogger(__name__)


@health_blueprint.route("/health", methods=["GET"])
def health_check():
    """
    Basic health check endpoint.

    Returns:
        JSON response with health status
    """
    return jsonify({
        "status": "healthy",
        "service": current_app.config.get("SERVICE_NAME")
    }), 200


@health_blueprint.route("/health/ready", methods=["GET"])
def readiness_check():
    """
    Readiness check endpoint (checks the database).

    Returns:
        JSON response with readiness status
    """
    checks = {
        "database": False,
        "overall": False
    }

    try:
        engine = get_service_container().engine
        checks["database"] = DatabaseEngineFactory.check_connection(engine)
    except RuntimeError as e:
        _logger.error(f"Database health check failed: {e}")

    checks["overall"] = checks["database"]

    status_code = 200 if checks["overall"] else 503

    return jsonify({
        "status": "ready" if checks["overall"] else "not_ready",
        "checks": checks
    }), status_code
