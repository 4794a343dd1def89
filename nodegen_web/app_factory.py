from __future__ import annotations

import logging
from typing import Optional

from flask import Flask

from nodegen_web.config.ini_config import AppSettings, IniConfig
from nodegen_web.log_setup import setup_logging
from nodegen_web.repositories.resource_repository import ResourceRepository
from nodegen_web.repositories.workspace_repository import WorkspaceRepository
from nodegen_web.services.generator_service import GeneratorService
from nodegen_web.services.project_service import ProjectService
from nodegen_web.services.spec_classifier import JsonOrYamlSpecClassifier
from nodegen_web.web.routes import create_blueprint


def create_app(settings: Optional[AppSettings] = None) -> Flask:
    if settings is None:
        settings = IniConfig.from_env_or_default().load_settings()

    setup_logging(settings.log_level)

    generator = GeneratorService(
        generator_path=settings.generator_path,
        template_dir=settings.template_dir,
        timeout_seconds=settings.timeout_seconds,
        use_template=settings.use_template,
        logger=logging.getLogger("nodegen_web.generator"),
    )

    workspaces = WorkspaceRepository(
        base_dir=settings.scratch_base,
        logger=logging.getLogger("nodegen_web.workspace"),
    )

    project_service = ProjectService(
        generator=generator,
        classifier=JsonOrYamlSpecClassifier(),
        resources=ResourceRepository(),
        workspaces=workspaces,
        logger=logging.getLogger("nodegen_web.project"),
    )

    app = Flask(__name__)
    app.register_blueprint(create_blueprint(project_service))

    app.config["MAX_CONTENT_LENGTH"] = settings.max_spec_bytes
    app.config["HOST"] = settings.flask_host
    app.config["PORT"] = settings.flask_port
    app.config["DEBUG"] = settings.flask_debug

    return app
