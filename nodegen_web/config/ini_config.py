########## ini_config.py

import os
from configparser import ConfigParser
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

INI_DEFAULT_NAME = "nodegen_web.ini"

DEFAULT_GENERATOR_PATH = "/usr/bin/snc"
DEFAULT_TEMPLATE_DIR = "/rhnodejs-template"


@dataclass(frozen=True)
class AppSettings:
    generator_path: Path
    template_dir: Path
    use_template: bool
    scratch_base: Optional[Path]

    timeout_seconds: int
    max_spec_bytes: int

    log_level: str

    flask_host: str
    flask_port: int
    flask_debug: bool


class IniConfig:
    """
    Adapter around ConfigParser and filesystem resolution.
    Keeps INI handling out of the service code.
    """

    def __init__(self, ini_path: Path):
        self._ini_path = ini_path
        self._cfg = ConfigParser()
        read_ok = self._cfg.read(str(ini_path), encoding="utf-8-sig")
        if not read_ok:
            raise FileNotFoundError(f"INI file not found or unreadable: {ini_path}")

    @staticmethod
    def from_env_or_default() -> "IniConfig":
        ini_raw = (os.getenv("APP_INI") or "").strip()
        # If APP_INI is not set, default to repo-root-relative ini location
        ini_path = Path(ini_raw) if ini_raw else (Path(__file__).resolve().parents[2] / INI_DEFAULT_NAME)
        return IniConfig(ini_path)

    def _cfg_path(self, section: str, key: str, default: str = "") -> Optional[Path]:
        """
        Reads a filesystem path from INI and resolves it.
        Tries [paths] and [path] interchangeably for convenience.
        Returns None when neither the INI nor the default provides a value.
        """
        sections_to_try = [section]
        if section == "paths":
            sections_to_try.append("path")
        if section == "path":
            sections_to_try.append("paths")

        raw = ""
        for sec in sections_to_try:
            if not self._cfg.has_section(sec):
                continue
            raw = (self._cfg.get(sec, key, fallback="") or "").strip()
            if raw:
                break

        raw = raw or default
        if not raw:
            return None
        raw = os.path.expandvars(os.path.expanduser(raw))
        return Path(raw).resolve()

    def load_settings(self) -> AppSettings:
        # Generator
        generator_path = self._cfg_path("paths", "generator_path", DEFAULT_GENERATOR_PATH)
        template_dir = self._cfg_path("paths", "template_dir", DEFAULT_TEMPLATE_DIR)
        scratch_base = self._cfg_path("paths", "scratch_base")
        use_template = self._cfg.getboolean("generator", "use_template", fallback=True)

        # Execution
        timeout_seconds = self._cfg.getint("execution", "timeout_seconds", fallback=300)
        max_spec_bytes = self._cfg.getint("execution", "max_spec_bytes", fallback=5 * 1024 * 1024)

        # Logging
        log_level = (self._cfg.get("logging", "level", fallback="INFO") or "").strip().upper() or "INFO"

        # Flask
        flask_host = (self._cfg.get("flask", "host", fallback="127.0.0.1") or "").strip() or "127.0.0.1"
        flask_port = self._cfg.getint("flask", "port", fallback=5000)
        flask_debug = self._cfg.getboolean("flask", "debug", fallback=False)

        # Validate
        if timeout_seconds <= 0:
            raise ValueError(f"execution.timeout_seconds must be positive, got {timeout_seconds}")
        if max_spec_bytes <= 0:
            raise ValueError(f"execution.max_spec_bytes must be positive, got {max_spec_bytes}")

        if scratch_base is not None:
            scratch_base.mkdir(parents=True, exist_ok=True)

        return AppSettings(
            generator_path=generator_path,
            template_dir=template_dir,
            use_template=use_template,
            scratch_base=scratch_base,
            timeout_seconds=timeout_seconds,
            max_spec_bytes=max_spec_bytes,
            log_level=log_level,
            flask_host=flask_host,
            flask_port=flask_port,
            flask_debug=flask_debug,
        )
