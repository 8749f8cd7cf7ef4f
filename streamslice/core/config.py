from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..datastructures.type_aliases import ByteValue

DEFAULT_READ_CHUNK_SIZE = 64 * 1024  # 64KB

# loguru's built-in levels
LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


class SliceSettings(BaseSettings):
    """streamslice runtime settings, read from ``STREAMSLICE_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="STREAMSLICE_", env_file=".env", extra="ignore"
    )

    read_chunk_size: int = Field(
        DEFAULT_READ_CHUNK_SIZE,
        gt=0,
        description="Number of bytes requested per read from the input, and per copy on the seek path.",
    )
    line_delimiter: str = Field(
        "\n", description="Single byte that terminates a line in line-counting mode."
    )
    log_level: str = Field(
        "WARNING", description="Log level used when --verbose is not given."
    )

    @field_validator("line_delimiter")
    @classmethod
    def _single_byte_delimiter(cls, value: str) -> str:
        try:
            encoded = value.encode("latin-1")
        except UnicodeEncodeError as e:
            raise ValueError("line_delimiter must be a single byte") from e
        if len(encoded) != 1:
            raise ValueError("line_delimiter must be exactly one byte")
        return value

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level

    @property
    def delimiter_byte(self) -> ByteValue:
        return self.line_delimiter.encode("latin-1")[0]
