from watermarker.core.exceptions import (
    DecodeError,
    FilesystemError,
    InvalidOptions,
    ProcessSpawnError,
    ToolExecutionError,
    ToolNotFoundError,
    ToolTimeoutError,
    WatermarkError,
)
from watermarker.model.request import Position, WatermarkOptions, WatermarkRequest
from watermarker.model.result import WatermarkResult
from watermarker.service.watermark_service import add_watermark, add_watermark_sync

__all__ = [
    "DecodeError",
    "FilesystemError",
    "InvalidOptions",
    "Position",
    "ProcessSpawnError",
    "ToolExecutionError",
    "ToolNotFoundError",
    "ToolTimeoutError",
    "WatermarkError",
    "WatermarkOptions",
    "WatermarkRequest",
    "WatermarkResult",
    "add_watermark",
    "add_watermark_sync",
]
