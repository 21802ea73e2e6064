import logging
import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

load_dotenv()

DEFAULT_MESSAGE = "this is something to sign"


class DemoConfig(BaseModel):
    # raw env text is coerced and validated by pydantic (validate_default)
    rsa_modulus_length: int = Field(
        default_factory=lambda: os.getenv("JWKDEMO_RSA_MODULUS_LENGTH", "2048"),
        validate_default=True,
        ge=1024,
    )
    log_level: str = Field(
        default_factory=lambda: os.getenv("JWKDEMO_LOG_LEVEL", "INFO"),
        validate_default=True,
    )
    keys_dir: str = Field(default_factory=lambda: os.getenv("JWKDEMO_KEYS_DIR", "keys"))
    demo_message: str = Field(
        default_factory=lambda: os.getenv("JWKDEMO_DEMO_MESSAGE", DEFAULT_MESSAGE)
    )

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, v: str) -> str:
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {v}")
        return level


def load_config() -> DemoConfig:
    """Read settings from the environment (and .env) on every call."""
    return DemoConfig()
