## routes.py
from __future__ import annotations

import io

from flask import Blueprint, current_app, jsonify, request, send_file

from nodegen_web.domain.errors import GenerationFailedError, GeneratorLaunchError

ARCHIVE_NAME = "nodejs-express-project.zip"


def _zip_response(data: bytes):
    return send_file(
        io.BytesIO(data),
        mimetype="application/octet-stream",
        as_attachment=True,
        download_name=ARCHIVE_NAME,
    )


def create_blueprint(project_service) -> Blueprint:
    bp = Blueprint("generate", __name__, url_prefix="/api/v1/generate")

    @bp.get(f"/{ARCHIVE_NAME}")
    def example_project():
        data = project_service.build_example()
        return _zip_response(data)

    @bp.post(f"/{ARCHIVE_NAME}")
    def generate_project():
        # Declared as application/json, but YAML bodies are accepted too.
        spec = request.get_data(cache=False)
        current_app.logger.info("Generate request: %d bytes", len(spec))

        data = project_service.generate(spec)
        return _zip_response(data)

    @bp.errorhandler(GenerationFailedError)
    def generation_failed(e: GenerationFailedError):
        current_app.logger.warning("Generation failed: status=%s exit=%s", e.result.status, e.result.exit_code)
        return jsonify(error=str(e), status=e.result.status, exit_code=e.result.exit_code), 500

    @bp.errorhandler(GeneratorLaunchError)
    def generator_unavailable(e: GeneratorLaunchError):
        current_app.logger.error("Generator could not be started: %s", e)
        return jsonify(error="Code generator is not available.", status="launch_failed"), 500

    return bp
