from __future__ import annotations

import atexit
import logging
import shutil
import tempfile
from contextlib import contextmanager
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, Optional


@dataclass
class WorkspaceRepository:
    """
    Repository pattern: hands out uniquely named scratch directories and removes them again.
    """
    base_dir: Optional[Path] = None
    prefix: str = "codegen"
    logger: logging.Logger = field(default_factory=lambda: logging.getLogger(__name__))

    def create(self) -> Path:
        if self.base_dir is not None:
            self.base_dir.mkdir(parents=True, exist_ok=True)
        return Path(tempfile.mkdtemp(prefix=self.prefix, dir=str(self.base_dir) if self.base_dir else None))

    def discard(self, workspace: Path) -> bool:
        """
        Deletes the workspace tree. Failures are logged and a retry is
        registered for interpreter exit; they are never raised.
        """
        try:
            shutil.rmtree(workspace)
        except FileNotFoundError:
            return True
        except OSError:
            self.logger.exception("Failed to delete scratch workspace %s", workspace)
            atexit.register(shutil.rmtree, str(workspace), ignore_errors=True)
            return False
        return True

    @contextmanager
    def scratch(self) -> Iterator[Path]:
        workspace = self.create()
        self.logger.debug("Created scratch workspace %s", workspace)
        try:
            yield workspace
        finally:
            self.discard(workspace)
