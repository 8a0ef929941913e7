import pytest

from autowire.config.context import PlatformConfig


def test_overrides_win_over_environment(monkeypatch):
    monkeypatch.setenv("AUTOWIRE_NAMESPACE", "from-env")
    config = PlatformConfig(overrides={"AUTOWIRE_NAMESPACE": "override"})
    assert config.get("AUTOWIRE_NAMESPACE") == "override"


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("AUTOWIRE_NAMESPACE", "from-env")
    assert PlatformConfig().get("AUTOWIRE_NAMESPACE") == "from-env"


def test_default():
    assert PlatformConfig().get("AUTOWIRE_TEST_UNSET_KEY", "fallback") == "fallback"


@pytest.mark.parametrize("value,expected", [("true", True), ("1", True), ("YES", True), ("no", False), ("", False)])
def test_get_bool(value, expected):
    assert PlatformConfig({"FLAG": value}).get_bool("FLAG") is expected


def test_get_bool_default():
    assert PlatformConfig().get_bool("AUTOWIRE_TEST_UNSET_KEY", default=True) is True


def test_get_int():
    config = PlatformConfig({"TTL": "30", "BLANK": " "})
    assert config.get_int("TTL") == 30
    assert config.get_int("BLANK") is None
    assert config.get_int("AUTOWIRE_TEST_UNSET_KEY") is None


def test_get_int_invalid():
    with pytest.raises(ValueError, match="TTL must be an integer"):
        PlatformConfig({"TTL": "soon"}).get_int("TTL")


def test_contains():
    config = PlatformConfig({"KEY": "v"})
    assert "KEY" in config
    assert "AUTOWIRE_TEST_UNSET_KEY" not in config
