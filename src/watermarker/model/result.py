"""작업 결과 타입.

핵심 로직은 항상 WatermarkOutcome 하나만 만든다.
await 방식 / 콜백 방식 변환은 호출 경계(service)에서만 한다.
"""

from dataclasses import dataclass
from typing import Callable

from watermarker.core.exceptions import WatermarkError


@dataclass(frozen=True)
class WatermarkResult:
    buffer: bytes


@dataclass(frozen=True)
class WatermarkOutcome:
    result: WatermarkResult | None = None
    error: WatermarkError | None = None

    @classmethod
    def success(cls, result: WatermarkResult) -> "WatermarkOutcome":
        return cls(result=result)

    @classmethod
    def failure(cls, error: WatermarkError) -> "WatermarkOutcome":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> WatermarkResult:
        """성공이면 결과를, 실패면 담긴 예외를 그대로 raise한다."""
        if self.error is not None:
            raise self.error
        return self.result

    def deliver(self, callback: Callable[[WatermarkError | None, WatermarkResult | None], None]) -> None:
        """error-first 콜백으로 전달한다."""
        if self.error is not None:
            callback(self.error, None)
        else:
            callback(None, self.result)
