import json
import logging
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

ON_ERROR_CHOICES = ("abort", "skip")


@dataclass(frozen=True)
class Settings:
    """Batch run options.

    on_error: "abort" stops at the first bad record, "skip" counts it and moves on.
    check_duplicates: reject records where the same card appears twice.
    workers: number of processes used to evaluate records.
    """

    on_error: str = "abort"
    check_duplicates: bool = False
    workers: int = 1

    def __post_init__(self):
        if self.on_error not in ON_ERROR_CHOICES:
            raise ValueError(f"Invalid on_error: {self.on_error}")
        if not isinstance(self.check_duplicates, bool):
            raise ValueError(f"Invalid check_duplicates: {self.check_duplicates}")
        if not isinstance(self.workers, int) or isinstance(self.workers, bool) or self.workers < 1:
            raise ValueError(f"Invalid workers: {self.workers}")


def _read_file(path: Path) -> dict:
    if not path.exists():
        raise ValueError(f"Config file not found: {path}")
    with open(path) as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"{path} must contain a JSON object")
    section = data.get("batch", {})
    if not isinstance(section, dict):
        raise ValueError(f"'batch' section in {path} must be an object")
    known = {f.name for f in fields(Settings)}
    unknown = set(section) - known
    if unknown:
        raise ValueError(f"Unknown setting(s) in {path}: {', '.join(sorted(unknown))}")
    return section


def load_settings(path: Optional[Path] = None, **overrides) -> Settings:
    settings = Settings()
    if path is not None:
        settings = replace(settings, **_read_file(Path(path)))
        logger.debug("Loaded settings from %s", path)
    explicit = {k: v for k, v in overrides.items() if v is not None}
    if explicit:
        settings = replace(settings, **explicit)
    return settings
