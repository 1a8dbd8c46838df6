# casetracker/__init__.py
import logging
from pathlib import Path
from flask import Flask
from casetracker.extensions import db, migrate
from .config import Config
from .errors import register_error_handlers


def create_app(overrides=None):
    project_root = Path(__file__).resolve().parent.parent
    templates_dir = project_root / "templates"
    static_dir = project_root / "static"

    app = Flask(
        __name__,
        template_folder=str(templates_dir),
        static_folder=str(static_dir)
    )

    # ----- Config -----
    app.config.from_object(Config)
    if overrides:
        app.config.update(overrides)

    # app.logger es el logger "casetracker": sus hijos (servicios, sequencer) heredan el nivel
    app.logger.setLevel(getattr(logging, str(app.config["LOG_LEVEL"]).upper(), logging.INFO))

    # ----- Extensiones -----
    db.init_app(app)
    migrate.init_app(app, db)

    # ----- Filtros Jinja -----
    from .filters import register_filters
    register_filters(app)

    # ----- Blueprints -----
    from .blueprints.auth_admin import auth_bp
    from .blueprints.casos import casos_bp
    from .blueprints.api import api_bp

    app.register_blueprint(auth_bp)                 # /admin/login, /admin/logout
    app.register_blueprint(casos_bp)                # /casos/
    app.register_blueprint(api_bp, url_prefix="/api")

    from .routes_root import init_root_routes
    init_root_routes(app)

    # ----- Crear tablas solo si lo activas por config -----
    if app.config.get("INIT_DB"):
        with app.app_context():
            from casetracker import models  # noqa: F401
            db.create_all()

    register_error_handlers(app)

    return app
