"""Driver configuration model."""

from pathlib import Path

from pydantic import BaseModel, Field

from buttonshim.utils.persistence import PydanticPersistence

DEFAULT_CONFIG_PATH = Path.home() / ".buttonshim" / "config.json"


class ShimConfig(BaseModel):
    """Button SHIM connection and sampling settings."""

    # Bus
    i2c_bus: int = Field(default=1, ge=0, description="I2C bus number (/dev/i2c-N)")
    address: int = Field(
        default=0x3F, ge=0x03, le=0x77, description="7-bit I2C slave address of the SHIM"
    )

    # Sampling
    poll_interval: float = Field(
        default=0.1, gt=0, description="Seconds between button samples when polling"
    )
    hold_threshold: float = Field(
        default=2.0,
        gt=0,
        description="Seconds a button must stay pressed before it counts as held",
    )
    max_consecutive_failures: int | None = Field(
        default=None,
        ge=1,
        description=(
            "Stop background polling after this many failed samples in a row "
            "(None = keep polling and log every failure)"
        ),
    )

    @classmethod
    def load_or_default(cls, path: Path | None = None) -> "ShimConfig":
        """
        Load config from file or return default.

        Args:
            path: Path to config file. If None, uses ~/.buttonshim/config.json.

        Raises:
            ConfigFileInvalidError: If config file has invalid JSON syntax
            ConfigValidationError: If config values fail validation
        """
        return PydanticPersistence.load_json_or_default(path or DEFAULT_CONFIG_PATH, cls)

    def save(self, path: Path | None = None) -> None:
        """Save config to file."""
        PydanticPersistence.save_json(self, path or DEFAULT_CONFIG_PATH)
