"""
Flask REST API exposing the research memory tools.

Each tool is reachable at POST /tools/<name> with a JSON body of
{"arguments": {...}} and answers {"text": "..."}.
"""
import logging

import pydantic
from flask import Flask, request, jsonify
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address

from .app import ResearchMemoryApp
from .exceptions import RetrievalError, VectorIndexError
from .security import ValidationError


logger = logging.getLogger(__name__)


def create_app(memory_app: ResearchMemoryApp) -> Flask:
    """
    Build the Flask application around an initialized ResearchMemoryApp.

    :param memory_app: Facade whose tools are exposed
    :return: Flask application
    """
    app = Flask(__name__)
    config = memory_app.config

    limiter = Limiter(
        get_remote_address,
        app=app,
        default_limits=[config.rate_limit],
        storage_uri="memory://",
        enabled=config.rate_limit_enabled,
    )
    if config.rate_limit_enabled:
        logger.info(f"Rate limiting enabled: {config.rate_limit}")

    @app.route("/health", methods=["GET"])
    @limiter.exempt
    def health():
        """Liveness plus store reachability."""
        return jsonify({"status": "ok", "store": memory_app.is_healthy()})

    @app.route("/tools", methods=["GET"])
    def list_tools():
        """List registered tools."""
        return jsonify([
            {"name": tool.name, "description": tool.description}
            for tool in memory_app.tools
        ])

    @app.route("/tools/<name>", methods=["POST"])
    def call_tool(name: str):
        """Invoke one tool."""
        tool = memory_app.get_tool(name)
        if tool is None:
            return jsonify({"error": f"Unknown tool '{name}'"}), 404

        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            return jsonify({"error": "Request body must be a JSON object"}), 400

        arguments = data.get("arguments", {})
        if not isinstance(arguments, dict):
            return jsonify({"error": "'arguments' must be a JSON object"}), 400

        try:
            text = memory_app.call_tool(name, arguments)
        except (ValidationError, pydantic.ValidationError) as e:
            logger.warning(f"Invalid arguments for {name}: {e}")
            return jsonify({"error": str(e)}), 400
        except (RetrievalError, VectorIndexError) as e:
            logger.error(f"Tool {name} failed to read or write its store: {e}", exc_info=True)
            return jsonify({"error": str(e)}), 503
        except Exception as e:
            logger.error(f"Tool {name} error: {str(e)}", exc_info=True)
            return jsonify({"error": str(e)}), 500

        return jsonify({"text": text})

    return app
