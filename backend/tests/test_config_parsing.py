import pytest

from chapel.auth.roles import AdminRole
from chapel.config import Settings, get_settings, reset_settings, settings

# Tests for Settings.from_env() with different environment values


def test_defaults() -> None:
    """Test that an empty environment yields the built-in defaults."""
    parsed = Settings.from_env()

    assert parsed.app_name == "Chapel Admin"
    assert parsed.debug is False
    assert parsed.log_level == "INFO"
    assert parsed.admin_route_prefix == "/admin"
    assert parsed.role_aliases == {"admin": AdminRole.SUPER_ADMIN}


@pytest.mark.parametrize("raw, expected", [("true", True), ("1", True), ("ON", True), ("no", False), ("", False)])
def test_debug_boolean_words(monkeypatch: pytest.MonkeyPatch, raw: str, expected: bool) -> None:
    monkeypatch.setenv("DEBUG", raw)
    assert Settings.from_env().debug is expected


def test_debug_rejects_garbage(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DEBUG", "maybe")
    with pytest.raises(ValueError, match="DEBUG must be a boolean value"):
        Settings.from_env()


def test_log_level_is_normalized(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", " debug ")
    assert Settings.from_env().log_level == "DEBUG"


def test_log_level_rejects_unknown(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "verbose")
    with pytest.raises(ValueError, match="LOG_LEVEL 'VERBOSE' is not a valid logging level"):
        Settings.from_env()


def test_admin_route_prefix_trailing_slash(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ADMIN_ROUTE_PREFIX", "/console/")
    assert Settings.from_env().admin_route_prefix == "/console"


def test_admin_route_prefix_must_be_absolute(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ADMIN_ROUTE_PREFIX", "admin")
    with pytest.raises(ValueError, match="ADMIN_ROUTE_PREFIX must start with '/'"):
        Settings.from_env()


def test_role_aliases_csv_format(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test that ROLE_ALIASES can be parsed as CSV alias=role pairs."""
    monkeypatch.setenv("ROLE_ALIASES", "Admin=super_admin, editor = content_manager,")

    assert Settings.from_env().role_aliases == {
        "admin": AdminRole.SUPER_ADMIN,
        "editor": AdminRole.CONTENT_MANAGER,
    }


def test_role_aliases_json_object_format(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test that ROLE_ALIASES can be parsed as a JSON object."""
    monkeypatch.setenv("ROLE_ALIASES", '{"pastor": "super_admin", "deacon": "moderator"}')

    assert Settings.from_env().role_aliases == {
        "pastor": AdminRole.SUPER_ADMIN,
        "deacon": AdminRole.MODERATOR,
    }


@pytest.mark.parametrize(
    "raw, message",
    [
        ('{"admin": "super_admin"', "ROLE_ALIASES JSON is malformed"),
        ('{"admin": ["super_admin"]}', "ROLE_ALIASES target .* is not an admin role"),
        ("admin", "ROLE_ALIASES entry 'admin' must be alias=role"),
        ("=super_admin", "ROLE_ALIASES contains an empty alias"),
        ("admin=owner", "ROLE_ALIASES target 'owner' is not an admin role"),
        ("moderator=super_admin", "ROLE_ALIASES cannot redefine the admin role 'moderator'"),
    ],
)
def test_role_aliases_rejects_invalid(monkeypatch: pytest.MonkeyPatch, raw: str, message: str) -> None:
    monkeypatch.setenv("ROLE_ALIASES", raw)
    with pytest.raises(ValueError, match=message):
        Settings.from_env()


def test_role_aliases_json_must_be_object(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ROLE_ALIASES", '["admin"]')
    # A JSON array does not start with "{" and is read as a malformed CSV entry
    with pytest.raises(ValueError, match="must be alias=role"):
        Settings.from_env()


def test_get_settings_is_cached_until_reset(monkeypatch: pytest.MonkeyPatch) -> None:
    first = get_settings()
    monkeypatch.setenv("APP_NAME", "Parish Console")
    assert get_settings() is first
    assert settings.app_name == "Chapel Admin"

    reset_settings()
    assert get_settings() is not first
    assert settings.app_name == "Parish Console"
