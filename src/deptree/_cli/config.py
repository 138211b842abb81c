"""Configuration loading from pyproject.toml."""

import tomllib
from dataclasses import dataclass
from pathlib import Path

from deptree._render import CycleMode


class ConfigError(Exception):
    """Error in deptree configuration."""


@dataclass(slots=True, frozen=True)
class DeptreeConfig:
    """Configuration loaded from the [tool.deptree] section of pyproject.toml.

    All relative paths are resolved from the project root (directory containing pyproject.toml).
    Unset fields are None so that command-line options and built-in defaults can take over.
    """

    input: Path | None = None
    strict: bool | None = None
    cycle_mode: CycleMode | None = None
    sort_roots: bool | None = None
    project_root: Path | None = None


def find_pyproject_toml(start_dir: Path | None = None) -> Path | None:
    """Find pyproject.toml by walking up from start_dir.

    Args:
        start_dir: Starting directory. Defaults to current working directory.

    Returns:
        Path to pyproject.toml if found, None otherwise.

    """
    if start_dir is None:
        start_dir = Path.cwd()

    current = start_dir.resolve()

    while True:
        candidate = current / "pyproject.toml"
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            # Reached filesystem root
            return None
        current = parent


def _parse_bool(section: dict[str, object], key: str) -> bool | None:
    if key not in section:
        return None
    value = section[key]
    if not isinstance(value, bool):
        msg = f"Invalid [tool.deptree].{key}: expected boolean"
        raise ConfigError(msg)
    return value


def _parse_cycle_mode(section: dict[str, object]) -> CycleMode | None:
    if "cycle_mode" not in section:
        return None
    value = section["cycle_mode"]
    try:
        return CycleMode(value)
    except ValueError as e:
        choices = ", ".join(f"'{m.value}'" for m in CycleMode)
        msg = f"Invalid [tool.deptree].cycle_mode {value!r}. Expected one of: {choices}"
        raise ConfigError(msg) from e


def load_config(pyproject_path: Path) -> DeptreeConfig:
    """Load and validate [tool.deptree] config from pyproject.toml.

    Args:
        pyproject_path: Path to pyproject.toml

    Returns:
        Parsed DeptreeConfig

    Raises:
        ConfigError: If the configuration is invalid

    """
    project_root = pyproject_path.parent

    with pyproject_path.open("rb") as f:
        try:
            data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            msg = f"Invalid TOML in {pyproject_path}: {e}"
            raise ConfigError(msg) from e

    tool_section = data.get("tool", {})
    deptree_section = tool_section.get("deptree", {})

    if not deptree_section:
        return DeptreeConfig(project_root=project_root)

    input_path: Path | None = None
    if "input" in deptree_section:
        input_value = deptree_section["input"]
        if not isinstance(input_value, str):
            msg = "Invalid [tool.deptree].input: expected string path"
            raise ConfigError(msg)
        input_path = Path(input_value)
        if not input_path.is_absolute():
            input_path = project_root / input_path

    return DeptreeConfig(
        input=input_path,
        strict=_parse_bool(deptree_section, "strict"),
        cycle_mode=_parse_cycle_mode(deptree_section),
        sort_roots=_parse_bool(deptree_section, "sort_roots"),
        project_root=project_root,
    )


def get_config() -> DeptreeConfig:
    """Get config from pyproject.toml in current directory or parents.

    Returns:
        DeptreeConfig (may be empty if no pyproject.toml or no [tool.deptree] section)

    """
    pyproject_path = find_pyproject_toml()
    if pyproject_path is None:
        return DeptreeConfig()
    return load_config(pyproject_path)
