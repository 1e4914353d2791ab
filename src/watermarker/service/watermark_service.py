import asyncio
from pathlib import Path
from typing import Any, Callable, Literal

from loguru import logger
from pydantic import ValidationError

from watermarker.core.config import settings
from watermarker.core.exceptions import FilesystemError, InvalidOptions, WatermarkError
from watermarker.model.request import WatermarkOptions, WatermarkRequest
from watermarker.model.result import WatermarkOutcome, WatermarkResult
from watermarker.processor import image as image_ops
from watermarker.processor.geometry import overlay_filter
from watermarker.processor.video import build_ffmpeg_args, resolve_ffmpeg, run_ffmpeg
from watermarker.utility.files import ensure_output_dir, output_path_for, read_and_delete
from watermarker.utility.timer import timer

MediaType = Literal["image", "video"]
Callback = Callable[[WatermarkError | None, WatermarkResult | None], None]


def classify_media(input_path: str | Path) -> MediaType:
    """확장자만 보고 분류한다 (파일 내용은 검사하지 않음)."""
    name = str(input_path).lower()
    if name.endswith(tuple(ext.lower() for ext in settings.VIDEO_EXTENSIONS)):
        return "video"
    return "image"


def parse_options(options: WatermarkOptions | dict[str, Any] | None) -> WatermarkOptions:
    if options is None:
        return WatermarkOptions()
    if isinstance(options, WatermarkOptions):
        return options
    try:
        return WatermarkOptions.model_validate(options)
    except ValidationError as e:
        raise InvalidOptions(f"워터마크 옵션이 올바르지 않습니다: {e}") from e


def _render_image(request: WatermarkRequest, output_path: Path) -> None:
    opts = request.options
    base = image_ops.load_image(request.input_path)
    mark = image_ops.load_image(request.watermark_path)
    result = image_ops.composite(
        base,
        mark,
        position=opts.position,
        margin=opts.margin,
        opacity=opts.opacity,
        scale_percentage=opts.watermark_scale_percentage,
    )
    try:
        image_ops.save_jpeg(result, output_path, quality=settings.JPEG_QUALITY)
    except OSError as e:
        raise FilesystemError(f"결과 파일을 쓸 수 없습니다: {output_path} ({e})") from e


async def watermark_image(request: WatermarkRequest, output_dir: Path) -> WatermarkResult:
    """이미지에 워터마크를 합성하고 JPEG 바이트를 반환한다."""
    output_path = output_path_for(request.input_path, output_dir, "jpg")
    await asyncio.to_thread(_render_image, request, output_path)
    return WatermarkResult(buffer=await read_and_delete(output_path))


async def watermark_video(
    request: WatermarkRequest, output_dir: Path, timeout: float | None = None
) -> WatermarkResult:
    """ffmpeg로 비디오에 워터마크를 입히고 mp4 바이트를 반환한다.

    ffmpeg가 없으면 프로세스를 띄우기 전에 ToolNotFoundError.
    """
    ffmpeg_path = resolve_ffmpeg(settings.FFMPEG_BINARY)

    opts = request.options
    output_path = output_path_for(request.input_path, output_dir, "mp4")
    args = build_ffmpeg_args(
        ffmpeg_path,
        request.input_path,
        request.watermark_path,
        overlay_filter(opts.position, opts.margin, opts.watermark_scale_percentage, opts.opacity),
        output_path,
    )
    await run_ffmpeg(args, timeout=timeout)
    return WatermarkResult(buffer=await read_and_delete(output_path))


async def run_watermark(
    input_path: str | Path,
    watermark_path: str | Path,
    options: WatermarkOptions | dict[str, Any] | None = None,
    timeout: float | None = None,
) -> WatermarkOutcome:
    """워터마크 작업을 실행하고 성공/실패를 하나의 결과 타입으로 반환한다."""
    media_type = classify_media(input_path)
    if timeout is None:
        timeout = settings.FFMPEG_TIMEOUT

    with timer(f"{media_type} watermark {Path(input_path).name}") as t:
        try:
            request = WatermarkRequest(
                input_path=str(input_path),
                watermark_path=str(watermark_path),
                options=parse_options(options),
            )
            output_dir = ensure_output_dir(settings.OUTPUT_DIR)
            if media_type == "video":
                result = await watermark_video(request, output_dir, timeout=timeout)
            else:
                result = await watermark_image(request, output_dir)
            t.status = "ok"
        except WatermarkError as e:
            t.status = f"failed [{e.error_code}]"
            logger.warning(f"Watermark failed for {input_path}: [{e.error_code}] {e.message}")
            return WatermarkOutcome.failure(e)

    logger.info(f"Watermarked {input_path} ({media_type}, {len(result.buffer)} bytes)")
    return WatermarkOutcome.success(result)


async def add_watermark(
    input_path: str | Path,
    watermark_path: str | Path,
    options: WatermarkOptions | dict[str, Any] | None = None,
    callback: Callback | None = None,
    *,
    timeout: float | None = None,
) -> WatermarkResult | None:
    """이미지 또는 비디오 파일에 워터마크를 추가한다.

    - callback 없음: 결과(WatermarkResult)를 반환하거나 예외를 raise
    - callback 있음: callback(error, result)로만 전달하고 None 반환
    """
    outcome = await run_watermark(input_path, watermark_path, options, timeout=timeout)

    if callable(callback):
        outcome.deliver(callback)
        return None
    return outcome.unwrap()


def add_watermark_sync(
    input_path: str | Path,
    watermark_path: str | Path,
    options: WatermarkOptions | dict[str, Any] | None = None,
    callback: Callback | None = None,
    *,
    timeout: float | None = None,
) -> WatermarkResult | None:
    """이벤트 루프 밖에서 쓰는 동기 버전."""
    return asyncio.run(
        add_watermark(input_path, watermark_path, options, callback, timeout=timeout)
    )
