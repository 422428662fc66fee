"""HTTP gateway exposing block rewards and sync duties per slot."""

import sys
from collections.abc import Awaitable, Callable
from functools import wraps
from typing import Any

from flask import Flask, jsonify
from waitress import serve

from src.api.service import RewardsService
from src.helpers.config import ClientConfig, ServerConfig
from src.helpers.errors import (
    FutureSlotError,
    InvalidInputError,
    NotFoundError,
    ParseError,
    UpstreamError,
)
from src.helpers.logging import get_logger, set_log_level
from src.helpers.parsers import parse_slot


logger = get_logger(__name__)


def _with_error_handling(
    failure_message: str,
) -> Callable[[Callable[..., Awaitable[Any]]], Callable[..., Awaitable[Any]]]:
    """Map gateway errors raised by a view onto JSON error responses.

    Upstream and parse failures are logged with their detail and answered with
    the message of the failed step, or ``failure_message`` when none was
    attached.
    """

    def decorator(func: Callable[..., Awaitable[Any]]) -> Callable[..., Awaitable[Any]]:
        @wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return await func(*args, **kwargs)
            except (InvalidInputError, FutureSlotError) as exc:
                return jsonify({"error": str(exc)}), 400
            except NotFoundError as exc:
                return jsonify({"error": str(exc)}), 404
            except (UpstreamError, ParseError) as exc:
                public_message = exc.public_message or failure_message
                logger.error("%s: %s", public_message, exc)  # noqa: TRY400
                return jsonify({"error": public_message}), 500

        return wrapper

    return decorator


def _register_health_route(app: Flask) -> None:
    @app.get("/health")
    def health():
        return jsonify({"status": "ok"})


def _register_reward_routes(app: Flask, service: RewardsService) -> None:
    @app.get("/blockreward/<slot>")
    @_with_error_handling("failed to get block reward")
    async def block_reward(slot: str):
        result = await service.get_block_reward(parse_slot(slot))
        return jsonify(result.to_response())


def _register_sync_duty_routes(app: Flask, service: RewardsService) -> None:
    @app.get("/syncduties/<slot>")
    @_with_error_handling("failed to get sync committee duties")
    async def sync_duties(slot: str):
        validators = await service.get_sync_duties(parse_slot(slot))
        return jsonify({"validators": validators})


def _register_error_handlers(app: Flask) -> None:
    @app.errorhandler(404)
    def not_found(_error: Exception):
        return jsonify({"error": "not found"}), 404

    @app.errorhandler(500)
    def internal_error(_error: Exception):
        return jsonify({"error": "internal server error"}), 500


def create_app(service: RewardsService | None = None) -> Flask:
    """Build the Flask application.

    Args:
        service: Query service to use; built from the environment when omitted

    Returns:
        Configured Flask app
    """
    if service is None:
        service = RewardsService(ClientConfig.from_env())

    app = Flask(__name__)
    app.json.sort_keys = False  # type: ignore[attr-defined]

    _register_health_route(app)
    _register_reward_routes(app, service)
    _register_sync_duty_routes(app, service)
    _register_error_handlers(app)

    return app


def main() -> None:
    """Main entry point."""
    try:
        server_config = ServerConfig.from_env()
        client_config = ClientConfig.from_env()
        set_log_level(server_config.log_level)
    except ValueError:
        logger.exception("Invalid configuration")
        sys.exit(1)

    app = create_app(RewardsService(client_config))

    logger.info(
        "Serving on %s:%d (upstream timeout %.1fs)",
        server_config.host,
        server_config.port,
        client_config.timeout,
    )
    serve(app, host=server_config.host, port=server_config.port)


if __name__ == "__main__":
    main()
