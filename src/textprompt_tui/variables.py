"""Template variable files and value collection.

A variable file lists the values to ask for, each with a prompt label and
an optional default:

    variables:
      - name: project_name
        prompt: Project name
        default: my-app
      - name: use_docker
        default: true

The mapping form is accepted too:

    variables:
      project_name:
        prompt: Project name
        default: my-app
      license: MIT

A file without a ``variables`` section is read as a flat mapping of
name -> default, which is the usual shape of an override file:

    environment: prod
    region: us-east-1

YAML (.yaml, .yml), JSON (.json) and TOML (.toml) are supported.
"""

from __future__ import annotations

import json
import logging
import sys
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from .app import PromptResult
from .errors import PromptCancelled, VariableFileError
from .prompt import stringify

logger = logging.getLogger(__name__)

Asker = Callable[[str, Any], PromptResult]


@dataclass(frozen=True)
class Variable:
    """A value to collect from the user."""

    name: str
    prompt: str = ""
    default: Any = None

    @property
    def label(self) -> str:
        return self.prompt or self.name


def _parse_file(path: Path) -> Any:
    suffix = path.suffix.lower()
    text = path.read_text(encoding="utf-8")
    if suffix in (".yaml", ".yml"):
        return yaml.safe_load(text)
    if suffix == ".json":
        return json.loads(text)
    if suffix == ".toml":
        return tomllib.loads(text)
    raise VariableFileError(
        f"Unsupported file format: {suffix} (supported: .yaml, .yml, .json, .toml)"
    )


def _from_entry(name: str, entry: Any) -> Variable:
    if isinstance(entry, Mapping):
        return Variable(
            name=name,
            prompt=str(entry.get("prompt") or ""),
            default=entry.get("default"),
        )
    # Bare scalar: it is the default
    return Variable(name=name, default=entry)


def load_variables(path: str | Path) -> list[Variable]:
    """Load variable definitions from a YAML, JSON or TOML file."""
    path = Path(path)
    if not path.is_file():
        raise VariableFileError(f"Variable file not found: {path}")

    try:
        data = _parse_file(path)
    except (
        yaml.YAMLError,
        json.JSONDecodeError,
        tomllib.TOMLDecodeError,
        UnicodeDecodeError,
    ) as e:
        raise VariableFileError(f"Failed to parse {path}: {e}") from e

    if not isinstance(data, Mapping):
        raise VariableFileError(f"{path} must contain a mapping")

    # No section: the whole document is name -> default
    raw = data["variables"] if "variables" in data else data
    raw = raw or []
    variables: list[Variable] = []
    if isinstance(raw, Mapping):
        for name, entry in raw.items():
            variables.append(_from_entry(str(name), entry))
    elif isinstance(raw, list):
        for index, entry in enumerate(raw):
            if not isinstance(entry, Mapping) or not entry.get("name"):
                raise VariableFileError(f"Variable #{index + 1} in {path} needs a name")
            variables.append(_from_entry(str(entry["name"]), entry))
    else:
        raise VariableFileError(f"'variables' in {path} must be a list or mapping")

    logger.debug("Loaded %d variables from %s", len(variables), path)
    return variables


def parse_overrides(pairs: Iterable[str]) -> dict[str, str]:
    """Parse ``key=value`` pairs; the value may itself contain '='."""
    overrides: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        key = key.strip()
        if not sep or not key:
            raise VariableFileError(f"Invalid variable override (expected key=value): {pair}")
        overrides[key] = value
    return overrides


def collect_values(
    variables: Iterable[Variable],
    asker: Asker,
    *,
    overrides: Mapping[str, str] | None = None,
    no_input: bool = False,
) -> dict[str, str]:
    """Collect a value for every variable, in order.

    Overrides win over everything. With ``no_input`` the default is used
    without prompting. Otherwise ``asker`` runs a prompt; cancelling it
    aborts the whole collection.
    """
    overrides = overrides or {}
    values: dict[str, str] = {}
    for variable in variables:
        if variable.name in overrides:
            values[variable.name] = overrides[variable.name]
            continue
        if no_input:
            values[variable.name] = stringify(variable.default)
            continue
        result = asker(variable.label, variable.default)
        if result.cancelled:
            raise PromptCancelled(variable.label)
        values[variable.name] = result.value

    # Overrides for names the file does not define are still passed through
    for name, value in overrides.items():
        values.setdefault(name, value)
    return values
