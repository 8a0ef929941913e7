"""Loads .env files with KEY=VALUE format.

Supports:
- Comments (lines starting with #)
- Blank lines
- An optional leading ``export`` so shell-sourceable files work unchanged
- Quoted values (single or double quotes are stripped)
"""

from pathlib import Path


def load_env_file(env_name: str = "local", project_root: Path | None = None) -> dict[str, str]:
    """Load .env/<env_name>.env under *project_root* (default: cwd).

    Returns an empty dict if the file is missing.
    """
    root = project_root or Path.cwd()
    env_file = root / ".env" / f"{env_name}.env"
    if not env_file.exists():
        return {}
    return parse_env_file(env_file)


def parse_env_file(path: Path) -> dict[str, str]:
    result: dict[str, str] = {}
    for raw in path.read_text().splitlines():
        line = raw.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        if line.startswith("export "):
            line = line[len("export "):].lstrip()
        key, _, value = line.partition("=")
        value = value.strip()
        if len(value) >= 2 and value[0] == value[-1] and value[0] in ('"', "'"):
            value = value[1:-1]
        result[key.strip()] = value
    return result
