"""Flask app factory for the thread preview server."""

import sys
from pathlib import Path

from flask import Flask

# Ensure the project root is on sys.path for module imports
_project_root = Path(__file__).resolve().parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))


def create_app(settings=None):
    from core.settings import load_settings

    app = Flask(__name__)
    app.config["THREAD_SETTINGS"] = settings or load_settings()

    from web.routes import bp
    app.register_blueprint(bp)

    return app
