from .archive_builder import ArchiveBuilder
from .generator_service import GeneratorService
from .project_service import ProjectService
from .spec_classifier import JsonOrYamlSpecClassifier, SpecClassifier

__all__ = [
    "ArchiveBuilder",
    "GeneratorService",
    "ProjectService",
    "SpecClassifier",
    "JsonOrYamlSpecClassifier",
]
