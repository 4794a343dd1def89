from .resource_repository import ResourceRepository
from .workspace_repository import WorkspaceRepository

__all__ = [
    "ResourceRepository",
    "WorkspaceRepository",
]
