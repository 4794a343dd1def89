from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Union

from nodegen_web.domain.errors import GenerationFailedError
from nodegen_web.repositories.resource_repository import ResourceRepository
from nodegen_web.repositories.workspace_repository import WorkspaceRepository
from nodegen_web.services.archive_builder import ArchiveBuilder
from nodegen_web.services.generator_service import GeneratorService
from nodegen_web.services.spec_classifier import SpecClassifier

TEMPLATE_NAMESPACE = "nodejs-express-project-template"
SPEC_FILE_NAME = "spec"


@dataclass
class ProjectService:
    """
    Service layer: builds the project archives served by the web layer.
    Keeps controllers/routes thin.
    """
    generator: GeneratorService
    classifier: SpecClassifier
    resources: ResourceRepository
    workspaces: WorkspaceRepository
    template_namespace: str = TEMPLATE_NAMESPACE
    logger: logging.Logger = field(default_factory=lambda: logging.getLogger(__name__))

    def build_example(self) -> bytes:
        archive = ArchiveBuilder(resources=self.resources, logger=self.logger)
        count = archive.add_resource_directory(self.template_namespace)
        self.logger.info("Built example archive with %d template files", count)
        return archive.serialize()

    def generate(self, spec: Union[str, bytes]) -> bytes:
        """
        Runs the generator on `spec` and returns a zip holding the spec
        (as openapi.json or openapi.yml) plus everything the generator wrote.

        Raises GenerationFailedError when the generator does not report success.
        The scratch workspace is removed on every exit path.
        """
        spec_bytes = spec.encode("utf-8") if isinstance(spec, str) else bytes(spec)
        spec_name = self.classifier.filename_for(spec_bytes)

        with self.workspaces.scratch() as workspace:
            spec_file = workspace / SPEC_FILE_NAME
            spec_file.write_bytes(spec_bytes)
            try:
                result = self.generator.run(spec_file, workspace)
            finally:
                spec_file.unlink(missing_ok=True)

            if not result.ok:
                raise GenerationFailedError(result)

            archive = ArchiveBuilder(resources=self.resources, logger=self.logger)
            archive.add_bytes(spec_bytes, spec_name)
            count = archive.add_directory_tree(workspace)
            self.logger.info("Generated project archive: %s + %d generated files", spec_name, count)
            return archive.serialize()
