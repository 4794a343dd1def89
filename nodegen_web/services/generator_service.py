from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Sequence

from nodegen_web.domain.errors import GeneratorLaunchError
from nodegen_web.domain.models import (
    STATUS_FAILED,
    STATUS_OK,
    STATUS_TEMPLATE_MISSING,
    STATUS_TIMEOUT,
    GenerationResult,
)

# The generator does not use exit codes reliably; it prints this on its first line when done.
SUCCESS_MARKER = "Done!"


def output_indicates_success(lines: Sequence[str]) -> bool:
    return bool(lines) and SUCCESS_MARKER in lines[0]


def _decode(raw) -> str:
    if raw is None:
        return ""
    if isinstance(raw, bytes):
        return raw.decode("utf-8", errors="replace")
    return raw


@dataclass
class GeneratorService:
    """
    Service layer: runs the external code generator against a spec file.
    Success is read from the generator's output, not from its exit code.
    """
    generator_path: Path
    template_dir: Path
    timeout_seconds: int
    use_template: bool = True
    logger: logging.Logger = field(default_factory=lambda: logging.getLogger(__name__))

    def build_command(self, spec_file: Path, output_dir: Path) -> list[str]:
        cmd = [str(self.generator_path), "-o", str(output_dir.resolve())]
        if self.use_template:
            cmd += ["-t", str(self.template_dir)]
        cmd.append(str(spec_file.resolve()))
        return cmd

    def run(self, spec_file: Path, output_dir: Path) -> GenerationResult:
        if self.use_template and not self.template_dir.is_dir():
            self.logger.warning("Template directory (%s) does not exist", self.template_dir)
            return GenerationResult(status=STATUS_TEMPLATE_MISSING, exit_code=None)

        cmd = self.build_command(spec_file, output_dir)
        self.logger.debug("Running codegen: %s", cmd)

        started = datetime.now()
        try:
            # stderr is folded into stdout so diagnostics end up in the captured lines
            proc = subprocess.run(
                cmd,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                timeout=self.timeout_seconds,
            )
        except subprocess.TimeoutExpired as e:
            lines = tuple(_decode(e.output).splitlines())
            self.logger.warning("Codegen timed out after %s seconds", self.timeout_seconds)
            self._log_output(lines)
            return GenerationResult(
                status=STATUS_TIMEOUT,
                exit_code=None,
                output_lines=lines,
                duration_seconds=(datetime.now() - started).total_seconds(),
            )
        except OSError as e:
            raise GeneratorLaunchError(f"Failed to execute {self.generator_path}: {e}") from e

        duration_seconds = (datetime.now() - started).total_seconds()
        lines = tuple(_decode(proc.stdout).splitlines())

        if output_indicates_success(lines):
            self.logger.info("Codegen succeeded")
            status = STATUS_OK
        else:
            self.logger.warning("Codegen failed, exit code was %s", proc.returncode)
            self._log_output(lines)
            status = STATUS_FAILED

        return GenerationResult(
            status=status,
            exit_code=proc.returncode,
            output_lines=lines,
            duration_seconds=duration_seconds,
        )

    def _log_output(self, lines: Sequence[str]) -> None:
        for line in lines:
            self.logger.warning("Codegen output: %s", line)
