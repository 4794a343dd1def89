from __future__ import annotations

import io
import logging
import zipfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional, Union

from nodegen_web.domain.errors import ArchiveFinalizedError
from nodegen_web.repositories.resource_repository import ResourceRepository


def normalize_entry_name(name: str) -> str:
    """
    Archive names are relative and '/'-separated.
    Leading separators are stripped; '..' segments are rejected.
    """
    parts = [p for p in (name or "").replace("\\", "/").split("/") if p not in ("", ".")]
    if not parts:
        raise ValueError(f"Invalid archive entry name: {name!r}")
    if ".." in parts:
        raise ValueError(f"Archive entry name escapes the archive root: {name!r}")
    return "/".join(parts)


@dataclass
class ArchiveBuilder:
    """
    Collects named byte blobs and exports them once as a zip.

    Adding a name that already exists replaces its content; the entry keeps
    the position of its first insertion.
    """
    resources: Optional[ResourceRepository] = None
    compression: int = zipfile.ZIP_DEFLATED
    logger: logging.Logger = field(default_factory=lambda: logging.getLogger(__name__))
    _entries: Dict[str, bytes] = field(default_factory=dict, init=False, repr=False)
    _finalized: bool = field(default=False, init=False, repr=False)

    @property
    def names(self) -> list[str]:
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def _put(self, name: str, content: bytes) -> None:
        if self._finalized:
            raise ArchiveFinalizedError("Archive has already been serialized")
        name = normalize_entry_name(name)
        if name in self._entries:
            self.logger.debug("Replacing archive entry %s", name)
        self._entries[name] = content

    def add_bytes(self, content: Union[bytes, str], relative_path: str) -> None:
        if isinstance(content, str):
            content = content.encode("utf-8")
        self._put(relative_path, bytes(content))

    def add_resource(self, namespace: str, relative_path: str) -> None:
        if self.resources is None:
            raise RuntimeError("ArchiveBuilder has no resource repository")
        self._put(relative_path, self.resources.read_bytes(namespace, relative_path))

    def add_resource_directory(self, namespace: str) -> int:
        """Adds every bundled file under `namespace`, named relative to it."""
        if self.resources is None:
            raise RuntimeError("ArchiveBuilder has no resource repository")
        names = self.resources.list_files(namespace)
        for rel in names:
            self.add_resource(namespace, rel)
        return len(names)

    def add_directory_tree(self, root_directory: Path) -> int:
        root = Path(root_directory)
        if not root.is_dir():
            raise NotADirectoryError(f"Not a directory: {root}")

        real_root = root.resolve()
        count = 0
        for path in sorted(root.rglob("*")):
            if not path.is_file():
                continue
            # symlinks may only point at files inside the tree
            if real_root not in path.resolve().parents:
                self.logger.warning("Skipping %s: resolves outside %s", path, root)
                continue
            self._put(path.relative_to(root).as_posix(), path.read_bytes())
            count += 1
        return count

    def serialize(self) -> bytes:
        if self._finalized:
            raise ArchiveFinalizedError("Archive has already been serialized")
        self._finalized = True

        buf = io.BytesIO()
        with zipfile.ZipFile(buf, mode="w", compression=self.compression) as zf:
            for name, content in self._entries.items():
                zf.writestr(name, content)
        return buf.getvalue()
