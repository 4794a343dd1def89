import json
from dataclasses import dataclass
from typing import Union

SpecText = Union[str, bytes]


class SpecClassifier:
    """Strategy interface."""
    def is_json(self, spec: SpecText) -> bool:
        raise NotImplementedError

    def filename_for(self, spec: SpecText) -> str:
        raise NotImplementedError


def _reject_constant(name: str):
    raise ValueError(f"Not a JSON value: {name}")


def spec_is_valid_json(spec: SpecText) -> bool:
    """
    True iff the whole document parses as JSON.
    Anything else (empty, truncated, YAML, NaN/Infinity) is False; parse errors never escape.
    """
    try:
        json.loads(spec, parse_constant=_reject_constant)
    except (ValueError, TypeError, RecursionError):
        # JSONDecodeError and UnicodeDecodeError are both ValueError
        return False
    return True


@dataclass(frozen=True)
class JsonOrYamlSpecClassifier(SpecClassifier):
    json_filename: str = "openapi.json"
    yaml_filename: str = "openapi.yml"

    def is_json(self, spec: SpecText) -> bool:
        return spec_is_valid_json(spec)

    def filename_for(self, spec: SpecText) -> str:
        # No YAML parsing happens; non-JSON is YAML by elimination.
        return self.json_filename if self.is_json(spec) else self.yaml_filename
