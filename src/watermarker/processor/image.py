"""순수 CPU-bound 이미지 합성 함수.

PIL.Image를 받아서 PIL.Image를 반환한다. 파일 I/O는 load_image / save_jpeg만 한다.
"""

import io
from pathlib import Path

from PIL import Image, UnidentifiedImageError

from watermarker.core.exceptions import DecodeError
from watermarker.processor.geometry import overlay_offset, scaled_size


def load_image(path: str | Path) -> Image.Image:
    """이미지를 디코딩한다. 열 수 없거나 손상된 파일은 DecodeError."""
    try:
        with Image.open(path) as img:
            img.load()
            return img.convert("RGBA")
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError, ValueError) as e:
        raise DecodeError(f"이미지 파일을 읽을 수 없습니다: {path} ({e})") from e


def resize(image: Image.Image, scale_percentage: float) -> Image.Image:
    return image.resize(scaled_size(image.size, scale_percentage), Image.LANCZOS)


def apply_opacity(image: Image.Image, opacity: float) -> Image.Image:
    """알파 채널에 opacity를 곱한다."""
    faded = image.convert("RGBA")
    alpha = faded.getchannel("A").point(lambda a: round(a * opacity))
    faded.putalpha(alpha)
    return faded


def composite(
    base: Image.Image,
    watermark: Image.Image,
    position: str,
    margin: int,
    opacity: float,
    scale_percentage: float,
) -> Image.Image:
    """워터마크를 축소해 source-over 방식으로 합성한다."""
    mark = apply_opacity(resize(watermark, scale_percentage), opacity)
    x, y = overlay_offset(position, base.size, mark.size, margin)

    # paste는 음수 좌표를 허용하고 캔버스 밖은 잘라낸다
    layer = Image.new("RGBA", base.size, (0, 0, 0, 0))
    layer.paste(mark, (x, y))

    return Image.alpha_composite(base.convert("RGBA"), layer)


def to_jpeg_ready(image: Image.Image) -> Image.Image:
    return image.convert("RGB")


def encode_jpeg(image: Image.Image, quality: int) -> bytes:
    buf = io.BytesIO()
    to_jpeg_ready(image).save(buf, "JPEG", quality=quality)
    return buf.getvalue()


def save_jpeg(image: Image.Image, path: str | Path, quality: int) -> None:
    to_jpeg_ready(image).save(path, "JPEG", quality=quality)
