"""결과 파일 경로 / 읽기-삭제 유틸리티."""

import asyncio
import os
import uuid
from pathlib import Path

from loguru import logger

from watermarker.core.exceptions import FilesystemError


def ensure_output_dir(output_dir: str | Path) -> Path:
    """출력 디렉토리를 (작업 디렉토리 기준으로) 만들고 절대 경로를 반환한다."""
    path = Path(output_dir)
    if not path.is_absolute():
        path = Path.cwd() / path
    try:
        os.makedirs(path, exist_ok=True)
    except OSError as e:
        raise FilesystemError(f"출력 디렉토리를 만들 수 없습니다: {path} ({e})") from e
    return path


def output_path_for(input_path: str | Path, output_dir: Path, ext: str) -> Path:
    """<입력 파일명>.<토큰>.output.<ext> 형태의 호출별 고유 경로.

    같은 파일명을 동시에 처리해도 경로가 겹치지 않는다.
    """
    stem = Path(input_path).stem
    return output_dir / f"{stem}.{uuid.uuid4().hex[:12]}.output.{ext}"


def _read_and_delete(path: Path) -> bytes:
    try:
        data = path.read_bytes()
    except OSError as e:
        raise FilesystemError(f"결과 파일을 읽을 수 없습니다: {path} ({e})") from e
    try:
        path.unlink()
    except OSError as e:
        raise FilesystemError(f"결과 파일을 삭제할 수 없습니다: {path} ({e})") from e
    logger.debug(f"Consumed {path.name} ({len(data)} bytes)")
    return data


async def read_and_delete(path: Path) -> bytes:
    """결과 파일을 메모리로 읽고 디스크에서 지운다."""
    return await asyncio.to_thread(_read_and_delete, path)
