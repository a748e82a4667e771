"""Run configuration passed explicitly to the runner."""

from enum import Enum
from pathlib import Path
from typing import Optional, Union

from pydantic import BaseModel, Field, NonNegativeInt, PositiveInt, model_validator


class OutputMode(str, Enum):
    """How results are written to stdout."""

    TABLE = "table"
    READABLE = "readable"
    CSV = "csv"


class TimestampPrecision(str, Enum):
    """Timestamp prefix for log lines."""

    NONE = "none"
    SEC = "sec"
    MS = "ms"
    NS = "ns"


class LoggingConfig(BaseModel):
    """Logging verbosity settings."""

    verbosity: NonNegativeInt = Field(default=0, description="Number of -v flags given")
    quiet: bool = Field(default=False, description="Silence all log output")
    timestamp: TimestampPrecision = Field(
        default=TimestampPrecision.NONE,
        description="Precision of the timestamp prepended to log lines",
    )


class RunConfig(BaseModel):
    """Everything one run needs, resolved from the command line."""

    count: PositiveInt = Field(..., description="Number of results requested")
    catalog_path: Path = Field(..., description="JSON file with all known shows")
    list_path: Path = Field(..., description="JSON file with the candidate show ids")
    hard_fail: bool = Field(default=False, description="Exit with code 1 on any failure")
    output_mode: OutputMode = Field(default=OutputMode.READABLE)
    table_width: Optional[PositiveInt] = Field(
        default=None,
        description="Table width override (table mode only)",
    )
    seed: Optional[Union[int, str]] = Field(
        default=None,
        description="Seed for reproducible draws",
    )
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @model_validator(mode="after")
    def _check_table_width(self) -> "RunConfig":
        if self.table_width is not None and self.output_mode is not OutputMode.TABLE:
            raise ValueError("table_width is only valid with the table output mode")
        return self
