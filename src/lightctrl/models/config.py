"""Application configuration model."""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from lightctrl.devices.address import parse_address
from lightctrl.utils.persistence import PydanticPersistence

DEFAULT_CONFIG_PATH = Path.home() / ".lightctrl" / "config.json"


class AppConfig(BaseModel):
    """Default device settings used by the command line tool."""

    address: str = Field(
        default="127.0.0.1:1234",
        description="LED device address as host:port",
    )
    led_count: int = Field(
        default=4,
        ge=0,
        description="Number of LEDs the device expects per update",
    )
    frames_per_second: float = Field(
        default=30.0,
        gt=0,
        description="Frame rate for repeated sends (fill, demo)",
    )

    @field_validator("address")
    @classmethod
    def validate_address(cls, v: str) -> str:
        """Ensure the address has a host and a numeric port."""
        parse_address(v)
        return v

    @classmethod
    def load_or_default(cls, path: Path | None = None) -> "AppConfig":
        """
        Load config from file or return default.

        Args:
            path: Path to config file. If None, uses ~/.lightctrl/config.json.

        Raises:
            ConfigFileInvalidError: If config file has invalid JSON syntax
            ConfigValidationError: If config values fail validation
        """
        return PydanticPersistence.load_json_or_default(path or DEFAULT_CONFIG_PATH, cls)

    def save(self, path: Path | None = None) -> None:
        """Save config to file."""
        PydanticPersistence.save_json(self, path or DEFAULT_CONFIG_PATH)
