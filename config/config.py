import os
import yaml
from pathlib import Path
from dataclasses import dataclass, field
from typing import Dict, Optional, Any
from dotenv import load_dotenv


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "INFO"
    colorize: bool = True


@dataclass
class RedisConfig:
    """Redis configuration."""

    host: str = "localhost"
    port: int = 6379
    db: int = 0
    username: Optional[str] = None
    password: Optional[str] = None
    ssl: bool = False
    max_connections: int = 50
    socket_timeout: int = 5


@dataclass
class Config:
    """Main configuration container.

    This is the root config object that contains all sub-configurations.
    Similar to Go's Viper config struct.
    """

    logging: LoggingConfig = field(default_factory=LoggingConfig)
    redis: RedisConfig = field(default_factory=RedisConfig)


class ConfigLoader:
    """Viper-style configuration loader.

    Loads configuration from:
    1. YAML files (lowest priority)
    2. .env files
    3. Environment variables (highest priority)
    """

    def __init__(self, config_paths: Optional[list] = None):
        self.config_name = "config"
        self.config_paths = config_paths or [".", "config", "/etc/rediscache"]
        self.env_prefix = "REDISCACHE"
        self.auto_env = True
        self._raw_config: Dict[str, Any] = {}

    def read_config(self) -> Config:
        """Read configuration from all sources.

        Returns:
            Config object with all settings

        Raises:
            ValueError: If the resulting configuration is invalid
        """
        self._load_yaml()
        self._load_env_files()
        config = self._build_config()
        self._validate(config)
        return config

    def _load_yaml(self) -> None:
        """Load the first config.yaml / config.yml found on the search path."""
        config_file = None

        for path in self.config_paths:
            for ext in ["yaml", "yml"]:
                file_path = Path(path) / f"{self.config_name}.{ext}"
                if file_path.exists():
                    config_file = file_path
                    break
            if config_file:
                break

        if not config_file:
            return

        with open(config_file, "r", encoding="utf-8") as f:
            self._raw_config = yaml.safe_load(f) or {}

    def _load_env_files(self) -> None:
        """Load .env files without overriding the real environment.

        .env.local is read first so its values win over .env.
        """
        for env_file in [".env.local", ".env"]:
            for path in self.config_paths:
                env_path = Path(path) / env_file
                if env_path.exists():
                    load_dotenv(env_path, override=False)

    def _get_env(self, key: str, default: Any = None) -> Any:
        """Get value from environment variable.

        Converts nested key to env var:
        - "redis.host" -> "REDISCACHE_REDIS_HOST"
        """
        if not self.auto_env:
            return default

        env_key = key.replace(".", "_").upper()
        if self.env_prefix:
            env_key = f"{self.env_prefix}_{env_key}"

        return os.getenv(env_key, default)

    def _get_value(self, key: str, default: Any = None) -> Any:
        """Get value with priority: env > yaml > default."""
        env_value = self._get_env(key)
        if env_value is not None:
            # Env values are strings; coerce to the default's type
            default_type = type(default)
            if default_type == bool:
                return env_value.lower() in ("true", "1", "yes")
            elif default_type == int:
                try:
                    return int(env_value)
                except ValueError:
                    return default
            elif default_type == float:
                try:
                    return float(env_value)
                except ValueError:
                    return default
            elif default_type == list:
                return [item.strip() for item in env_value.split(",")]
            else:
                return env_value

        keys = key.split(".")
        value = self._raw_config
        for k in keys:
            if isinstance(value, dict):
                value = value.get(k)
            else:
                return default

        return value if value is not None else default

    def _build_config(self) -> Config:
        """Build Config object from loaded values."""
        return Config(
            logging=LoggingConfig(
                level=self._get_value("logging.level", "INFO"),
                colorize=self._get_value("logging.colorize", True),
            ),
            redis=RedisConfig(
                host=self._get_value("redis.host", "localhost"),
                port=self._get_value("redis.port", 6379),
                db=self._get_value("redis.db", 0),
                username=self._get_value("redis.username", None),
                password=self._get_value("redis.password", None),
                ssl=self._get_value("redis.ssl", False),
                max_connections=self._get_value("redis.max_connections", 50),
                socket_timeout=self._get_value("redis.socket_timeout", 5),
            ),
        )

    def _validate(self, config: Config) -> None:
        """Validate configuration."""
        errors = []

        if not config.redis.host:
            errors.append("redis.host is required")

        if not isinstance(config.redis.port, int) or not 0 < config.redis.port <= 65535:
            errors.append("redis.port must be between 1 and 65535")

        if errors:
            raise ValueError(
                f"Configuration validation failed:\n"
                + "\n".join(f"  - {e}" for e in errors)
            )


def load_config() -> Config:
    """Load configuration.

    Returns:
        Config object
    """
    return ConfigLoader().read_config()
