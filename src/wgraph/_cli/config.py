"""Configuration loading from pyproject.toml."""

import tomllib
from dataclasses import dataclass
from pathlib import Path

from wgraph._codec import DEFAULT_ARROW
from wgraph._types import VERTEX_TYPE_NAMES, WEIGHT_TYPE_NAMES


class ConfigError(Exception):
    """Error in wgraph configuration."""


@dataclass(slots=True, frozen=True)
class WGraphConfig:
    """Configuration loaded from the [tool.wgraph] section of pyproject.toml.

    Attributes:
        arrow: Separator between the edges of one line in the text format.
        weights: Name of the weight type ("float", "int" or "decimal").
        vertices: Name of the vertex type ("str" or "int").
        auto_declare_destinations: Declare edge destinations as vertices when reading.
        project_root: Directory containing pyproject.toml, if one was found.

    """

    arrow: str = DEFAULT_ARROW
    weights: str = "float"
    vertices: str = "str"
    auto_declare_destinations: bool = False
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


def _parse_choice(section: dict[str, object], key: str, choices: tuple[str, ...], default: str) -> str:
    value = section.get(key, default)
    if not isinstance(value, str) or value not in choices:
        msg = f"Invalid [tool.wgraph].{key}: expected one of {', '.join(choices)}, got {value!r}"
        raise ConfigError(msg)
    return value


def load_config(pyproject_path: Path) -> WGraphConfig:
    """Load and validate [tool.wgraph] config from pyproject.toml.

    Args:
        pyproject_path: Path to pyproject.toml

    Returns:
        Parsed WGraphConfig

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

    # Extract [tool.wgraph] section
    tool_section = data.get("tool", {})
    section = tool_section.get("wgraph", {})

    if not section:
        # No [tool.wgraph] section - return defaults
        return WGraphConfig(project_root=project_root)

    if not isinstance(section, dict):
        msg = "Invalid [tool.wgraph] configuration. Expected a table."
        raise ConfigError(msg)

    arrow = section.get("arrow", DEFAULT_ARROW)
    if not isinstance(arrow, str) or not arrow:
        msg = "Invalid [tool.wgraph].arrow: expected a non-empty string"
        raise ConfigError(msg)

    auto_declare = section.get("auto_declare_destinations", False)
    if not isinstance(auto_declare, bool):
        msg = "Invalid [tool.wgraph].auto_declare_destinations: expected true or false"
        raise ConfigError(msg)

    return WGraphConfig(
        arrow=arrow,
        weights=_parse_choice(section, "weights", WEIGHT_TYPE_NAMES, "float"),
        vertices=_parse_choice(section, "vertices", VERTEX_TYPE_NAMES, "str"),
        auto_declare_destinations=auto_declare,
        project_root=project_root,
    )


def get_config() -> WGraphConfig:
    """Get config from pyproject.toml in current directory or parents.

    Returns:
        WGraphConfig (defaults if no pyproject.toml or no [tool.wgraph] section)

    """
    pyproject_path = find_pyproject_toml()
    if pyproject_path is None:
        return WGraphConfig()
    return load_config(pyproject_path)
