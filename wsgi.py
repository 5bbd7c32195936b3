"""WSGI entry point for local development and production WSGI servers.

This module provides a standard WSGI application that can be used with
development servers (Flask's built-in) or production WSGI servers (Gunicorn).
"""

import logging
import os

from dotenv import load_dotenv

load_dotenv()

os.environ.setdefault("FLASK_ENV", "development")

from app import create_app  # noqa: E402

logger = logging.getLogger(__name__)

app = create_app()
application = app

logger.info(f"Application started with FLASK_ENV={os.environ.get('FLASK_ENV')}")


if __name__ == "__main__":
    host = os.environ.get("HOST", "127.0.0.1")
    port = int(os.environ.get("PORT", "5000"))
    application.run(host=host, port=port, debug=app.debug)
