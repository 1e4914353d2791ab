"""ffmpeg 자식 프로세스 실행.

실행 파일 경로는 호출마다 resolve_ffmpeg()로 찾아서 인자로 넘긴다 (전역 상태 없음).
ffmpeg의 성공/실패는 종료 코드로만 판단한다.
"""

import asyncio
import shutil
from pathlib import Path

from loguru import logger

from watermarker.core.exceptions import ProcessSpawnError, ToolExecutionError, ToolNotFoundError, ToolTimeoutError

STDERR_TAIL_CHARS = 2000


def resolve_ffmpeg(binary: str = "ffmpeg") -> str:
    """PATH에서 ffmpeg를 찾는다. 없으면 ToolNotFoundError."""
    path = shutil.which(binary)
    if path is None:
        raise ToolNotFoundError
    return path


def build_ffmpeg_args(
    ffmpeg_path: str,
    input_path: str | Path,
    watermark_path: str | Path,
    filter_graph: str,
    output_path: str | Path,
) -> list[str]:
    return [
        ffmpeg_path,
        "-i", str(input_path),
        "-i", str(watermark_path),
        "-filter_complex", filter_graph,
        "-c:a", "copy",  # 오디오는 재인코딩하지 않음
        "-y",
        str(output_path),
    ]


async def run_ffmpeg(args: list[str], timeout: float | None = None) -> None:
    """ffmpeg를 실행하고 종료를 기다린다.

    - 종료 코드 0: 정상 반환
    - 0이 아닌 종료 코드: ToolExecutionError(exit_code)
    - 프로세스 시작 실패: ProcessSpawnError
    - timeout 초과: 프로세스를 kill 하고 ToolTimeoutError
    """
    logger.debug(f"Running: {' '.join(args)}")
    try:
        proc = await asyncio.create_subprocess_exec(
            *args,
            stdin=asyncio.subprocess.DEVNULL,  # ffmpeg는 stdin에서 키 입력을 읽는다
            stdout=asyncio.subprocess.DEVNULL,
            stderr=asyncio.subprocess.PIPE,
        )
    except OSError as e:
        raise ProcessSpawnError(f"ffmpeg 프로세스를 시작할 수 없습니다: {e}") from e

    try:
        _, stderr = await asyncio.wait_for(proc.communicate(), timeout=timeout)
    except asyncio.TimeoutError:
        proc.kill()
        await proc.wait()
        logger.warning(f"ffmpeg killed after {timeout}s (pid={proc.pid})")
        raise ToolTimeoutError(timeout)

    if proc.returncode != 0:
        tail = (stderr or b"").decode(errors="replace")[-STDERR_TAIL_CHARS:]
        logger.error(f"ffmpeg exited with code {proc.returncode}\n{tail}")
        raise ToolExecutionError(proc.returncode)
