from .errors import ArchiveFinalizedError, GenerationError, GenerationFailedError, GeneratorLaunchError
from .models import GenerationResult

__all__ = [
    "ArchiveFinalizedError",
    "GenerationError",
    "GenerationFailedError",
    "GeneratorLaunchError",
    "GenerationResult",
]
