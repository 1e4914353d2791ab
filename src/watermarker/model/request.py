from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Position(str, Enum):
    TOP_RIGHT = "top-right"
    BOTTOM_RIGHT = "bottom-right"
    TOP_LEFT = "top-left"
    BOTTOM_LEFT = "bottom-left"


class WatermarkOptions(BaseModel):
    """워터마크 배치 옵션.

    position은 자유 문자열이다. 알 수 없는 값도 거부하지 않고
    배치 계산 단계에서 bottom-right로 처리된다.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    position: str = Position.BOTTOM_RIGHT.value
    margin: int = Field(default=10, ge=0)
    opacity: float = Field(default=0.5, ge=0, le=1)
    watermark_scale_percentage: float = Field(
        default=10, gt=0, alias="watermarkScalePercentage"
    )


class WatermarkRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    input_path: str
    watermark_path: str
    options: WatermarkOptions = WatermarkOptions()
