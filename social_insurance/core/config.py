"""Configuration system for the contribution calculator."""
from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Mapping, Optional

from dotenv import load_dotenv

# Load .env file from project root
env_path = Path(__file__).parent.parent.parent / ".env"
load_dotenv(dotenv_path=env_path)

DEFAULT_CITY_ALIASES: Mapping[str, str] = MappingProxyType(
    {
        "南山": "佛山",
        "深圳市南山区": "佛山",
        "深圳南山": "佛山",
    }
)


@dataclass(frozen=True)
class DatabaseSettings:
    """Connection details for the relational store."""

    driver: str = "mysql+pymysql"
    host: str = "127.0.0.1"
    port: int = 3306
    user: str = "social"
    password: str = "social"
    name: str = "social_insurance"
    url_override: Optional[str] = None

    @property
    def sqlalchemy_url(self) -> str:
        """Build a SQLAlchemy compatible URL."""

        if self.url_override:
            return self.url_override
        if self.password:
            credentials = f"{self.user}:{self.password}"
        else:
            credentials = self.user
        return f"{self.driver}://{credentials}@{self.host}:{self.port}/{self.name}"

    @property
    def masked_url(self) -> str:
        if self.url_override:
            return self.url_override.split("@")[-1]
        pwd = "***" if self.password else ""
        return f"{self.driver}://{self.user}:{pwd}@{self.host}:{self.port}/{self.name}"


@dataclass(frozen=True)
class LogSettings:
    """Options forwarded to :func:`social_insurance.core.log.init_logging`."""

    level: str = "INFO"
    log_dir: Optional[Path] = Path("logs")
    console: bool = True


@dataclass(frozen=True)
class CalculationSettings:
    """Inputs that shape a contribution run."""

    city_aliases: Mapping[str, str] = field(default_factory=lambda: DEFAULT_CITY_ALIASES)


def _parse_aliases(value: str) -> dict[str, str]:
    """Parse ``alias=canonical`` pairs separated by commas."""

    aliases: dict[str, str] = {}
    for item in value.split(","):
        item = item.strip()
        if not item:
            continue
        if "=" not in item:
            raise ValueError("City aliases must follow '<alias>=<canonical>' format.")
        alias, canonical = (part.strip() for part in item.split("=", 1))
        if not alias or not canonical:
            raise ValueError(f"Invalid city alias definition: {item!r}")
        aliases[alias] = canonical
    return aliases


def _load_alias_file(path: Path) -> dict[str, str]:
    with path.open(encoding="utf-8") as handle:
        payload = json.load(handle)
    if not isinstance(payload, dict):
        raise ValueError(f"City alias file {path} must contain a JSON object.")
    return {str(alias): str(canonical) for alias, canonical in payload.items()}


@dataclass(frozen=True)
class Settings:
    """Top-level application configuration container."""

    database: DatabaseSettings
    logging: LogSettings = field(default_factory=LogSettings)
    calculation: CalculationSettings = field(default_factory=CalculationSettings)
    sqlalchemy_echo: bool = False

    @classmethod
    def from_env(cls) -> "Settings":
        """Load configuration values from environment variables."""

        def _get_env(name: str, default: str) -> str:
            return os.getenv(name, default)

        defaults = DatabaseSettings()
        database = DatabaseSettings(
            driver=_get_env("DB_DRIVER", defaults.driver),
            host=_get_env("DB_HOST", defaults.host),
            port=int(_get_env("DB_PORT", str(defaults.port))),
            user=_get_env("DB_USER", defaults.user),
            password=_get_env("DB_PASSWORD", defaults.password),
            name=_get_env("DB_NAME", defaults.name),
            url_override=os.getenv("DATABASE_URL") or None,
        )

        log_dir = _get_env("LOG_DIR", "logs")
        logging_settings = LogSettings(
            level=_get_env("LOG_LEVEL", "INFO"),
            log_dir=Path(log_dir) if log_dir else None,
            console=_get_env("LOG_CONSOLE", "1") not in {"0", "false", "False"},
        )

        aliases = dict(DEFAULT_CITY_ALIASES)
        alias_file = os.getenv("CITY_ALIASES_FILE")
        if alias_file:
            aliases = _load_alias_file(Path(alias_file))
        aliases.update(_parse_aliases(_get_env("CITY_ALIASES", "")))

        echo_flag = _get_env("SQLALCHEMY_ECHO", "0")
        return cls(
            database=database,
            logging=logging_settings,
            calculation=CalculationSettings(city_aliases=MappingProxyType(aliases)),
            sqlalchemy_echo=echo_flag not in {"0", "false", "False"},
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached ``Settings`` instance."""

    settings = Settings.from_env()

    # Import locally to avoid circular dependencies during module import time.
    from .log import get_logger

    logger = get_logger(__name__)
    logger.debug(
        "Settings initialised",
        extra={
            "sqlalchemy_echo": settings.sqlalchemy_echo,
            "database": settings.database.masked_url,
            "city_aliases": len(settings.calculation.city_aliases),
        },
    )
    return settings
