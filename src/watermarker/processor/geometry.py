"""워터마크 배치 계산.

이미지 경로는 픽셀 좌표를, 비디오 경로는 ffmpeg overlay 표현식을 쓴다.
두 경로 모두 같은 4방향 표를 따르고, 알 수 없는 position은 bottom-right로 처리한다.
"""

from watermarker.model.request import Position


def scale_factor(scale_percentage: float) -> float:
    return scale_percentage / 100


def scaled_size(size: tuple[int, int], scale_percentage: float) -> tuple[int, int]:
    """퍼센트 비율로 크기를 조정한다. 각 변은 최소 1px."""
    factor = scale_factor(scale_percentage)
    width, height = size
    return max(1, round(width * factor)), max(1, round(height * factor))


def overlay_offset(
    position: str,
    canvas_size: tuple[int, int],
    overlay_size: tuple[int, int],
    margin: int,
) -> tuple[int, int]:
    """워터마크 좌상단 좌표 (x, y)를 계산한다.

    워터마크가 캔버스보다 크면 음수 좌표가 그대로 반환된다.
    """
    canvas_w, canvas_h = canvas_size
    overlay_w, overlay_h = overlay_size

    right = canvas_w - overlay_w - margin
    bottom = canvas_h - overlay_h - margin

    if position == Position.TOP_RIGHT.value:
        return right, margin
    if position == Position.TOP_LEFT.value:
        return margin, margin
    if position == Position.BOTTOM_LEFT.value:
        return margin, bottom
    return right, bottom


def overlay_expression(position: str, margin: int) -> str:
    """ffmpeg overlay 필터의 x:y 표현식 (W/H: 메인 영상, w/h: 워터마크)."""
    right = f"W-w-{margin}"
    bottom = f"H-h-{margin}"

    if position == Position.TOP_RIGHT.value:
        return f"{right}:{margin}"
    if position == Position.TOP_LEFT.value:
        return f"{margin}:{margin}"
    if position == Position.BOTTOM_LEFT.value:
        return f"{margin}:{bottom}"
    return f"{right}:{bottom}"


def _number(value: float) -> str:
    # 0.1 -> "0.1", 1.0 -> "1", 12345.67 -> "12345.67" (자릿수 손실 없음)
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def overlay_filter(position: str, margin: int, scale_percentage: float, opacity: float) -> str:
    """-filter_complex 에 넘길 필터 그래프 문자열을 만든다.

    [1:v] 워터마크를 축소하고 알파 채널에 opacity를 곱한 뒤
    [0:v] 메인 영상 위에 overlay 한다.
    """
    factor = _number(scale_factor(scale_percentage))
    scaled = (
        f"[1:v]scale=iw*{factor}:ih*{factor},"
        f"format=rgba,colorchannelmixer=aa={_number(opacity)}[scaled_overlay]"
    )
    overlay = f"[0:v][scaled_overlay]overlay={overlay_expression(position, margin)}"
    return f"{scaled};{overlay}"
