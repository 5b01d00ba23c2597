"""
Client configuration with validation, plus a TOML loader with environment variable fallbacks.
"""

import re
import tomllib
from pathlib import Path
from typing import Optional

from pydantic import AnyUrl, BaseModel, ConfigDict, Field, SecretStr, TypeAdapter, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from domain.errors import ConfigurationError
from domain.models import Locale, Region

CLIENT_ID_PATTERN = re.compile(r"^[a-z0-9]{32}$")
CLIENT_SECRET_PATTERN = re.compile(r"^[a-zA-Z0-9]{32}$")

# Expected format per field, used in ConfigurationError messages.
FIELD_FORMATS = {
    "client_id": "expected 32 lowercase alphanumeric characters",
    "client_secret": "expected 32 alphanumeric characters",
    "region": f"expected one of {', '.join(r.value for r in Region)}",
    "locale": f"expected one of {', '.join(loc.value for loc in Locale)}",
    "redirect_uri": "expected an absolute URL with a scheme and a host",
}

_url_adapter = TypeAdapter(AnyUrl)


class ClientConfig(BaseModel):
    """Blizzard API client configuration.

    Every assignment is re-validated, so a rejected value leaves the previous one in place.
    """

    model_config = ConfigDict(validate_assignment=True, use_enum_values=True)

    client_id: str
    client_secret: SecretStr
    region: Region
    locale: Optional[Locale] = Field(default=None)
    redirect_uri: Optional[str] = Field(default=None)

    @field_validator("client_id")
    @classmethod
    def validate_client_id(cls, v: str) -> str:
        """Validate the client ID format."""
        if not CLIENT_ID_PATTERN.match(v):
            raise ValueError(FIELD_FORMATS["client_id"])
        return v

    @field_validator("client_secret")
    @classmethod
    def validate_client_secret(cls, v: SecretStr) -> SecretStr:
        """Validate the client secret format."""
        if not CLIENT_SECRET_PATTERN.match(v.get_secret_value()):
            raise ValueError(FIELD_FORMATS["client_secret"])
        return v

    @field_validator("redirect_uri")
    @classmethod
    def validate_redirect_uri(cls, v: Optional[str]) -> Optional[str]:
        """Validate that the redirect URI is absolute. The input string is stored unchanged."""
        if v is None:
            return v
        try:
            url = _url_adapter.validate_python(v)
        except ValidationError:
            raise ValueError(FIELD_FORMATS["redirect_uri"]) from None
        if not url.host:
            raise ValueError(FIELD_FORMATS["redirect_uri"])
        return v


def configuration_error(exc: ValidationError) -> ConfigurationError:
    """Translate a pydantic validation error into a ConfigurationError for its first field."""
    error = exc.errors()[0]
    field = str(error["loc"][-1]) if error["loc"] else "config"
    return ConfigurationError(field, FIELD_FORMATS.get(field, error["msg"]))


class Config(BaseSettings):
    """Main application configuration."""

    model_config = SettingsConfigDict(
        env_prefix="BNET_",
        env_nested_delimiter="__",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    blizzard: ClientConfig


def load_config(config_path: str | Path = "config.toml") -> Config:
    """
    Load configuration from a TOML file, falling back to environment variables.

    The file is expected to hold a ``[blizzard]`` table. Any key the file leaves
    out may come from the environment (or a ``.env`` file):
    - BNET_BLIZZARD__CLIENT_ID
    - BNET_BLIZZARD__CLIENT_SECRET
    - BNET_BLIZZARD__REGION
    - BNET_BLIZZARD__LOCALE
    - BNET_BLIZZARD__REDIRECT_URI

    Args:
        config_path: Path to the TOML configuration file

    Returns:
        Validated Config object

    Raises:
        FileNotFoundError: If config file doesn't exist
        ConfigurationError: If configuration is invalid
    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path, "rb") as f:
        toml_data = tomllib.load(f)

    # File values are passed as init arguments; pydantic-settings merges the
    # environment underneath them key by key.
    try:
        return Config(**toml_data)
    except ValidationError as exc:
        raise configuration_error(exc) from exc
