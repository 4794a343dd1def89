from __future__ import annotations

from nodegen_web.domain.models import STATUS_TEMPLATE_MISSING, STATUS_TIMEOUT, GenerationResult


class GenerationError(RuntimeError):
    """Base class for code generation failures surfaced to the web layer."""


class GeneratorLaunchError(GenerationError):
    """The generator executable could not be started."""


class GenerationFailedError(GenerationError):
    def __init__(self, result: GenerationResult):
        self.result = result
        if result.status == STATUS_TEMPLATE_MISSING:
            message = "Code generation template directory is not available."
        elif result.status == STATUS_TIMEOUT:
            message = "Code generation timed out."
        else:
            message = "Code generation failed."
        super().__init__(message)


class ArchiveFinalizedError(RuntimeError):
    """Raised when a serialized archive is modified or serialized again."""
