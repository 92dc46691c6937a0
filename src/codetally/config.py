"""Read decoration thresholds from project configuration files."""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass, fields
from pathlib import Path

from codetally.decorations import (
    DEFAULT_CLASS_METHOD_THRESHOLD,
    DEFAULT_METHOD_LOC_THRESHOLD,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Thresholds:
    """Configurable boundaries for the decoration feed."""

    method_loc_threshold: int = DEFAULT_METHOD_LOC_THRESHOLD
    class_method_threshold: int = DEFAULT_CLASS_METHOD_THRESHOLD


def load_config(project_dir: Path) -> Thresholds:
    """Read thresholds from .codetally.toml or [tool.codetally] in pyproject.toml."""
    table = _read_table(project_dir)
    if not table:
        return Thresholds()

    values: dict[str, int] = {}
    for f in fields(Thresholds):
        if f.name not in table:
            continue
        value = table[f.name]
        # bool is an int subclass; reject it explicitly.
        if isinstance(value, int) and not isinstance(value, bool) and value > 0:
            values[f.name] = value
        else:
            logger.warning(
                "Ignoring %s = %r: expected a positive integer", f.name, value
            )
    return Thresholds(**values)


def _read_table(project_dir: Path) -> dict | None:
    codetally_toml = project_dir / ".codetally.toml"
    if codetally_toml.exists():
        try:
            with open(codetally_toml, "rb") as f:
                data = tomllib.load(f)
            return data.get("codetally", None)
        except (OSError, tomllib.TOMLDecodeError) as e:
            logger.warning("Could not read %s: %s", codetally_toml, e)

    pyproject = project_dir / "pyproject.toml"
    if pyproject.exists():
        try:
            with open(pyproject, "rb") as f:
                data = tomllib.load(f)
            return data.get("tool", {}).get("codetally", None)
        except (OSError, tomllib.TOMLDecodeError) as e:
            logger.warning("Could not read %s: %s", pyproject, e)

    return None
