"""명령행 진입점.

사용법:
    watermarker input.mp4 logo.png out.mp4 --position top-left --margin 30
"""

import argparse
import sys
from pathlib import Path

from loguru import logger

from watermarker.core.config import settings
from watermarker.core.exceptions import WatermarkError
from watermarker.model.request import Position
from watermarker.service.watermark_service import add_watermark_sync
from watermarker.utility.logger import setup_logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=settings.APP_NAME,
        description="Overlay a watermark image onto an image or video file.",
    )
    parser.add_argument("input", help="source image or video (.mp4/.avi/.mov)")
    parser.add_argument("watermark", help="watermark image")
    parser.add_argument("output", type=Path, help="where to write the result")
    parser.add_argument(
        "--position",
        default=Position.BOTTOM_RIGHT.value,
        help=f"one of {', '.join(p.value for p in Position)} (default: bottom-right)",
    )
    parser.add_argument("--margin", type=int, default=10)
    parser.add_argument("--opacity", type=float, default=0.5)
    parser.add_argument("--scale", type=float, default=10, help="watermark scale percentage")
    parser.add_argument("--timeout", type=float, default=None, help="ffmpeg timeout in seconds")
    parser.add_argument("--log-level", default=None)
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logger(args.log_level)

    options = {
        "position": args.position,
        "margin": args.margin,
        "opacity": args.opacity,
        "watermark_scale_percentage": args.scale,
    }
    try:
        result = add_watermark_sync(args.input, args.watermark, options, timeout=args.timeout)
    except WatermarkError as e:
        logger.error(f"[{e.error_code}] {e.message}")
        return 1

    try:
        args.output.write_bytes(result.buffer)
    except OSError as e:
        logger.error(f"Cannot write {args.output}: {e}")
        return 1
    logger.info(f"Saved {args.output} ({len(result.buffer)} bytes)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
