"""pytest 공용 fixture.

- 모든 테스트는 tmp_path를 작업 디렉토리로 사용한다 (output/ 이 여기에 생긴다)
- 이미지는 Pillow로 메모리에서 만들어 파일로 저장한다
- ffmpeg는 종료 코드를 고를 수 있는 가짜 셸 스크립트로 대체한다
"""

import stat
import sys
from pathlib import Path

import pytest
from PIL import Image

# src/ 디렉토리를 import path에 추가
sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))

from watermarker.core.config import settings


@pytest.fixture(autouse=True)
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(settings, "OUTPUT_DIR", "output")
    monkeypatch.setattr(settings, "FFMPEG_TIMEOUT", None)
    return tmp_path


def save_image(path: Path, size: tuple[int, int], color, mode: str = "RGB") -> Path:
    Image.new(mode, size, color).save(path)
    return path


@pytest.fixture()
def source_png(tmp_path) -> Path:
    """100x80 빨간 원본 이미지."""
    return save_image(tmp_path / "photo.png", (100, 80), (255, 0, 0))


@pytest.fixture()
def watermark_png(tmp_path) -> Path:
    """40x40 불투명 파란 워터마크."""
    return save_image(tmp_path / "logo.png", (40, 40), (0, 0, 255, 255), mode="RGBA")


@pytest.fixture()
def fake_ffmpeg(tmp_path, monkeypatch):
    """가짜 ffmpeg 실행 파일을 만들고 settings.FFMPEG_BINARY로 지정한다.

    exit_code == 0 이면 마지막 인자(출력 경로)에 b"fake-mp4"를 쓴다.
    받은 인자는 한 줄에 하나씩 args.txt에 기록된다.
    """
    args_file = tmp_path / "args.txt"

    def _make(exit_code: int = 0, body: str = "") -> Path:
        script = tmp_path / "bin" / "ffmpeg"
        script.parent.mkdir(exist_ok=True)
        write_output = (
            'for last in "$@"; do :; done\nprintf "fake-mp4" > "$last"\n' if exit_code == 0 else ""
        )
        script.write_text(
            "#!/bin/sh\n"
            f'printf "%s\\n" "$@" > "{args_file}"\n'
            f"{body}"
            f"{write_output}"
            f"exit {exit_code}\n"
        )
        script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        monkeypatch.setattr(settings, "FFMPEG_BINARY", str(script))
        return script

    _make.args_file = args_file
    return _make
