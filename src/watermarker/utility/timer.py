"""워터마크 작업 처리 시간 측정."""

import time
from contextlib import contextmanager

from loguru import logger


@contextmanager
def timer(label: str):
    """블록 실행 시간과 결과 상태를 한 줄로 기록한다.

    블록 안에서 t.status를 바꾸면 로그에 그대로 남는다.
    예외로 빠져나가면 status는 "error"가 된다.
        with timer("image photo.png") as t:
            ...
            t.status = "ok"
    """
    t = WatermarkTiming()
    start = time.perf_counter()
    try:
        yield t
    except BaseException:
        t.status = "error"
        raise
    finally:
        t.elapsed = time.perf_counter() - start
        log = logger.info if t.status == "ok" else logger.warning
        log(f"[{label}] {t.status} in {t.elapsed:.3f}s")


class WatermarkTiming:
    status: str = "unknown"
    elapsed: float = 0.0
