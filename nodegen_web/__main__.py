#############################################
# composition root (wiring)
#
#   nodegen_web.ini                 # generator path, template dir, limits, flask
#   nodegen_web/
#     __main__.py                   # python -m nodegen_web
#     app_factory.py                # create_app(): settings -> services -> blueprint
#     config/ini_config.py          # INI -> AppSettings
#     domain/                       # GenerationResult + exceptions, no I/O
#     services/
#       spec_classifier.py          # JSON vs YAML (by elimination)
#       generator_service.py        # runs the generator, reads "Done!" from output
#       archive_builder.py          # named blobs -> zip bytes
#       project_service.py          # example archive / generate-from-spec use cases
#     repositories/
#       resource_repository.py      # bundled template files (package data)
#       workspace_repository.py     # per-request scratch directories
#     web/routes.py                 # GET/POST /api/v1/generate/nodejs-express-project.zip
#     resources/                    # nodejs-express-project-template/
#
# Request flow (POST)
#   routes.generate_project -> ProjectService.generate
#     -> classify spec -> scratch workspace -> write "spec" -> GeneratorService.run
#     -> ArchiveBuilder(spec + workspace tree) -> zip bytes -> send_file
#   The workspace is removed before the response is returned.
#############################################

from nodegen_web.app_factory import create_app

if __name__ == "__main__":
    app = create_app()
    app.run(host=app.config["HOST"], port=app.config["PORT"], debug=app.config["DEBUG"])
