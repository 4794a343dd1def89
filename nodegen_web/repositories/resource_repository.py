from __future__ import annotations

from dataclasses import dataclass, field
from importlib import resources
from importlib.resources.abc import Traversable
from typing import Dict, List, Tuple

RESOURCE_PACKAGE = "nodegen_web.resources"


def _walk(node: Traversable, prefix: str) -> List[str]:
    names: List[str] = []
    for child in sorted(node.iterdir(), key=lambda c: c.name):
        if child.name == "__pycache__":
            continue
        rel = f"{prefix}{child.name}"
        if child.is_dir():
            names.extend(_walk(child, rel + "/"))
        elif child.is_file():
            names.append(rel)
    return names


@dataclass
class ResourceRepository:
    """
    Repository pattern: read-only access to the template files shipped inside the package.
    Each namespace (top-level resource directory) is indexed once and cached.
    """
    package: str = RESOURCE_PACKAGE
    _index: Dict[str, Tuple[str, ...]] = field(default_factory=dict, init=False, repr=False)

    def _root(self, namespace: str) -> Traversable:
        root = resources.files(self.package).joinpath(namespace)
        if not root.is_dir():
            raise FileNotFoundError(f"Resource directory not found: {self.package}/{namespace}")
        return root

    def list_files(self, namespace: str) -> Tuple[str, ...]:
        """Paths relative to the namespace, sorted, '/'-separated."""
        cached = self._index.get(namespace)
        if cached is None:
            cached = tuple(_walk(self._root(namespace), ""))
            self._index[namespace] = cached
        return cached

    def read_bytes(self, namespace: str, relative_path: str) -> bytes:
        node = self._root(namespace)
        for part in relative_path.split("/"):
            node = node.joinpath(part)
        if not node.is_file():
            raise FileNotFoundError(f"Resource not found: {self.package}/{namespace}/{relative_path}")
        return node.read_bytes()
