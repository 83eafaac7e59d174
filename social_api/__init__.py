"""Flask application factory with dependency injection."""
import logging
import sys
from flask import Flask

from social_api.config.settings import Config, get_config
from social_api.infrastructure.database import DatabaseEngineFactory
from social_api.infrastructure.service_container import ServiceContainer
from social_api.middleware.monitoring import register_metrics_middleware
from social_api.middleware.error_handler import init_error_handlers
from social_api.api import accounts_blueprint, messages_blueprint, health_blueprint


def create_app(config_class=None) -> Flask:
    """
    Create and configure the Flask application.

    Args:
        config_class: Optional configuration class (for testing)

    Returns:
        Configured Flask application
    """
    _logger = logging.getLogger(__name__)

    config = config_class or get_config()
    config.validate()

    app = Flask(__name__)
    app.config.from_object(config)

    _configure_logging(config.DEBUG)

    app.register_blueprint(accounts_blueprint)
    app.register_blueprint(messages_blueprint)
    app.register_blueprint(health_blueprint)

    _initialize_middleware(app)
    _initialize_services(app, config)

    _logger.info(f"Application ready - routes: {[str(rule) for rule in app.url_map.iter_rules()]}")
    return app


def _configure_logging(debug: bool = Config.DEBUG) -> None:
    """Configure application logging to stdout."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stdout,
        force=True
    )


def _initialize_middleware(app: Flask) -> None:
    """
    Initialize middleware (monitoring, error handling).

    Args:
        app: Flask application instance
    """
    register_metrics_middleware(app)
    init_error_handlers(app)


def _initialize_services(app: Flask, config) -> None:
    """
    Create the database engine and the service container.

    Args:
        app: Flask application instance
        config: Configuration class
    """
    engine = DatabaseEngineFactory.create_engine(
        url=config.DATABASE_URL,
        echo=config.DATABASE_ECHO,
        pool_size=config.DATABASE_POOL_SIZE
    )
    DatabaseEngineFactory.initialize_schema(engine)

    app.config['service_container'] = ServiceContainer(engine)
