######## models.py
########

from dataclasses import dataclass, field
from typing import Optional, Tuple

STATUS_OK = "ok"
STATUS_FAILED = "failed"
STATUS_TEMPLATE_MISSING = "template_missing"
STATUS_TIMEOUT = "timeout"


@dataclass(frozen=True)
class GenerationResult:
    status: str                 # "ok" | "failed" | "template_missing" | "timeout"
    exit_code: Optional[int]    # None when the process never ran or was killed
    output_lines: Tuple[str, ...] = field(default_factory=tuple)
    duration_seconds: float = 0.0

    @property
    def ok(self) -> bool:
        return self.status == STATUS_OK

    @property
    def output_tail(self) -> str:
        return "\n".join(self.output_lines[-60:])
