import os

_TRUTHY = ("true", "1", "yes")


class PlatformConfig:
    """Environment-based configuration with optional overrides."""

    def __init__(self, overrides: dict[str, str] | None = None) -> None:
        self._env = dict(os.environ)
        if overrides:
            self._env.update(overrides)

    def get(self, key: str, default: str = "") -> str:
        return self._env.get(key, default)

    def get_bool(self, key: str, default: bool = False) -> bool:
        value = self._env.get(key)
        if value is None:
            return default
        return value.strip().lower() in _TRUTHY

    def get_int(self, key: str) -> int | None:
        """Integer value for *key*, or None when unset or blank."""
        value = self._env.get(key, "").strip()
        if not value:
            return None
        try:
            return int(value)
        except ValueError as exc:
            raise ValueError(f"{key} must be an integer, got {value!r}") from exc

    def __contains__(self, key: str) -> bool:
        return key in self._env
