"""Configuration management for regdom."""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml
from dotenv import load_dotenv

from .rules import parse_rule

logger = logging.getLogger(__name__)

DEFAULT_PSL_URL = "https://publicsuffix.org/list/public_suffix_list.dat"
OVERRIDES_FILENAME = "suffixes.yaml"


@dataclass
class Config:
    """Library configuration loaded from environment."""

    # Where the downloaded list and its metadata are cached
    data_dir: Path = field(default_factory=lambda: Path("./data"))
    config_dir: Path = field(default_factory=lambda: Path("./config"))

    # Explicit list file; when set the cache is not used
    psl_file: Optional[Path] = None

    # Download options
    psl_url: str = DEFAULT_PSL_URL
    auto_download: bool = True
    cache_max_age_days: int = 7
    download_timeout: int = 30

    # Cookie matching: reject public suffixes / cross-site registrable domains
    enforce_psl: bool = True

    # Extra rules appended to the list (override via config/suffixes.yaml)
    extra_rules: list[str] = field(default_factory=list)

    def __post_init__(self):
        self.data_dir = Path(self.data_dir)
        self.config_dir = Path(self.config_dir)
        if self.psl_file is not None:
            self.psl_file = Path(self.psl_file)


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}


def _load_overrides(config_dir: Path) -> dict:
    """Load rule overrides from config/suffixes.yaml (optional)."""
    path = Path(config_dir or ".") / OVERRIDES_FILENAME
    if not path.exists():
        return {}

    try:
        data = yaml.safe_load(path.read_text()) or {}
    except Exception as exc:
        logger.warning("Failed to parse %s: %s", OVERRIDES_FILENAME, exc)
        return {}

    if not isinstance(data, dict):
        logger.warning("Ignoring %s: expected a mapping at top level", OVERRIDES_FILENAME)
        return {}

    extra_rules: list[str] = []
    for entry in data.get("extra_rules") or []:
        rule = str(entry or "").strip()
        if rule:
            extra_rules.append(rule)

    return {"extra_rules": extra_rules}


def load_config() -> Config:
    """Load configuration from environment variables."""
    load_dotenv()

    config_dir = Path(os.getenv("REGDOM_CONFIG_DIR", "./config"))
    overrides = _load_overrides(config_dir)
    psl_file = os.getenv("REGDOM_PSL_FILE", "").strip()

    return Config(
        data_dir=Path(os.getenv("REGDOM_DATA_DIR", "./data")),
        config_dir=config_dir,
        psl_file=Path(psl_file) if psl_file else None,
        psl_url=os.getenv("REGDOM_PSL_URL", DEFAULT_PSL_URL).strip() or DEFAULT_PSL_URL,
        auto_download=_env_bool("REGDOM_AUTO_DOWNLOAD", "true"),
        cache_max_age_days=int(os.getenv("REGDOM_CACHE_MAX_AGE_DAYS", "7")),
        download_timeout=int(os.getenv("REGDOM_DOWNLOAD_TIMEOUT", "30")),
        enforce_psl=_env_bool("REGDOM_ENFORCE_PSL", "true"),
        extra_rules=overrides.get("extra_rules", []),
    )


def validate_config(config: Config) -> list[str]:
    """Validate configuration and return list of error messages."""
    errors: list[str] = []
    if config.psl_file is not None and not config.psl_file.exists():
        errors.append(f"REGDOM_PSL_FILE does not exist: {config.psl_file}")
    if config.psl_file is None and not config.psl_url.startswith(("https://", "http://")):
        errors.append("REGDOM_PSL_URL must be an http(s) URL")
    if config.cache_max_age_days < 0:
        errors.append("REGDOM_CACHE_MAX_AGE_DAYS must be >= 0")
    if config.download_timeout <= 0:
        errors.append("REGDOM_DOWNLOAD_TIMEOUT must be > 0")
    for rule in config.extra_rules:
        if parse_rule(rule) is None:
            errors.append(f"Invalid extra suffix rule: {rule}")
    return errors
