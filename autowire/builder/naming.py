import re
from functools import lru_cache

# fooBar -> foo_Bar, v2Api -> v2_Api
_LOWER_UPPER = re.compile(r"([a-z0-9])([A-Z])")
# HTTPClient -> HTTP_Client
_ACRONYM = re.compile(r"([A-Z]+)([A-Z][a-z])")


@lru_cache(maxsize=1024)
def service_key(name: str) -> str:
    """Derive the container key for a constructor parameter name (camelCase -> snake_case)."""
    key = _ACRONYM.sub(r"\1_\2", name)
    key = _LOWER_UPPER.sub(r"\1_\2", key)
    return key.lower()
