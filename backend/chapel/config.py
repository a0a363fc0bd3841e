import json
import logging
import os
import threading

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from .auth.roles import DEFAULT_ROLE_ALIASES, AdminRole, parse_role


load_dotenv()


def _default_role_aliases() -> dict[str, AdminRole]:
    return dict(DEFAULT_ROLE_ALIASES)


class Settings(BaseModel):
    app_name: str = Field(default="Chapel Admin")
    debug: bool = Field(default=False)
    log_level: str = Field(default="INFO")
    admin_route_prefix: str = Field(default="/admin")
    role_aliases: dict[str, AdminRole] = Field(default_factory=_default_role_aliases)

    @classmethod
    def from_env(cls) -> "Settings":
        raw_debug = os.getenv("DEBUG", "false").strip().lower()
        if raw_debug in {"1", "true", "yes", "on"}:
            debug = True
        elif raw_debug in {"0", "false", "no", "off", ""}:
            debug = False
        else:
            raise ValueError("DEBUG must be a boolean value")

        log_level = os.getenv("LOG_LEVEL", cls.model_fields["log_level"].default).strip().upper()
        if not isinstance(logging.getLevelName(log_level), int):
            raise ValueError(f"LOG_LEVEL '{log_level}' is not a valid logging level")

        admin_route_prefix = os.getenv(
            "ADMIN_ROUTE_PREFIX", cls.model_fields["admin_route_prefix"].default
        ).strip()
        if not admin_route_prefix.startswith("/"):
            raise ValueError("ADMIN_ROUTE_PREFIX must start with '/'")
        admin_route_prefix = admin_route_prefix.rstrip("/") or "/"

        raw_role_aliases = os.getenv("ROLE_ALIASES", "").strip()
        role_aliases = (
            _parse_role_aliases(raw_role_aliases)
            if raw_role_aliases
            else _default_role_aliases()
        )

        return cls(
            app_name=os.getenv("APP_NAME", cls.model_fields["app_name"].default),
            debug=debug,
            log_level=log_level,
            admin_route_prefix=admin_route_prefix,
            role_aliases=role_aliases,
        )


def _parse_role_aliases(raw: str) -> dict[str, AdminRole]:
    """Parse ROLE_ALIASES from a JSON object or CSV ``alias=role`` pairs."""
    pairs: list[tuple[str, str]] = []
    if raw.startswith("{"):
        # JSON object format: {"admin": "super_admin"}
        try:
            parsed = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise ValueError(f"ROLE_ALIASES JSON is malformed: {exc}") from exc
        if not isinstance(parsed, dict):
            raise ValueError("ROLE_ALIASES JSON must be an object")
        pairs = [(str(alias), str(role)) for alias, role in parsed.items()]
    else:
        # CSV format: admin=super_admin,editor=content_manager
        for item in raw.split(","):
            if not item.strip():
                continue
            alias, sep, role = item.partition("=")
            if not sep:
                raise ValueError(f"ROLE_ALIASES entry '{item.strip()}' must be alias=role")
            pairs.append((alias, role))

    role_aliases: dict[str, AdminRole] = {}
    for alias, role in pairs:
        alias = alias.strip().lower()
        target = parse_role(role.strip().lower())
        if not alias:
            raise ValueError("ROLE_ALIASES contains an empty alias")
        if target is None:
            raise ValueError(f"ROLE_ALIASES target '{role.strip()}' is not an admin role")
        if parse_role(alias) is not None:
            raise ValueError(f"ROLE_ALIASES cannot redefine the admin role '{alias}'")
        role_aliases[alias] = target
    return role_aliases


# Deferred settings initialization to avoid import-time side effects
_settings_instance: Settings | None = None
_settings_lock = threading.Lock()


def get_settings() -> Settings:
    """Get settings instance, creating it on first access.

    Uses double-checked locking so concurrent first calls build one instance.

    Raises:
        ValueError: If environment variables are invalid
    """
    global _settings_instance

    if _settings_instance is not None:
        return _settings_instance

    with _settings_lock:
        if _settings_instance is None:
            _settings_instance = Settings.from_env()

    return _settings_instance


def reset_settings() -> None:
    """Drop the cached settings so the next access re-reads the environment."""
    global _settings_instance
    with _settings_lock:
        _settings_instance = None


class _SettingsProxy:
    """Proxy to defer settings creation until first attribute access."""

    def __getattr__(self, name: str):
        return getattr(get_settings(), name)


settings = _SettingsProxy()  # type: ignore[assignment]
