"""배치 계산 / 필터 그래프 문자열 단위 테스트."""

import pytest

from watermarker.processor.geometry import overlay_expression, overlay_filter, overlay_offset, scaled_size

CANVAS = (640, 480)
MARK = (64, 32)


@pytest.mark.parametrize(
    "position, expected",
    [
        ("top-right", (640 - 64 - 10, 10)),
        ("bottom-right", (640 - 64 - 10, 480 - 32 - 10)),
        ("top-left", (10, 10)),
        ("bottom-left", (10, 480 - 32 - 10)),
    ],
)
def test_overlay_offset_positions(position, expected):
    assert overlay_offset(position, CANVAS, MARK, margin=10) == expected


@pytest.mark.parametrize("position", ["center", "", "Top-Left", "bottom_right"])
def test_unknown_position_falls_back_to_bottom_right(position):
    assert overlay_offset(position, CANVAS, MARK, margin=7) == (640 - 64 - 7, 480 - 32 - 7)
    assert overlay_expression(position, 7) == "W-w-7:H-h-7"


def test_overlay_offset_can_go_negative():
    """워터마크가 원본보다 크면 음수 좌표를 보정 없이 반환한다."""
    assert overlay_offset("bottom-right", (50, 50), (80, 60), margin=10) == (-40, -20)


def test_scaled_size():
    assert scaled_size((200, 120), 100) == (200, 120)
    assert scaled_size((200, 120), 50) == (100, 60)
    assert scaled_size((200, 120), 10) == (20, 12)


def test_scaled_size_never_collapses_to_zero():
    assert scaled_size((5, 5), 1) == (1, 1)


@pytest.mark.parametrize(
    "position, expected",
    [
        ("top-right", "W-w-30:30"),
        ("bottom-right", "W-w-30:H-h-30"),
        ("top-left", "30:30"),
        ("bottom-left", "30:H-h-30"),
    ],
)
def test_overlay_expression(position, expected):
    assert overlay_expression(position, 30) == expected


def test_overlay_filter_defaults():
    assert overlay_filter("bottom-right", 10, 10, 0.5) == (
        "[1:v]scale=iw*0.1:ih*0.1,format=rgba,colorchannelmixer=aa=0.5[scaled_overlay];"
        "[0:v][scaled_overlay]overlay=W-w-10:H-h-10"
    )


def test_overlay_filter_full_scale_and_opacity():
    assert overlay_filter("top-left", 0, 100, 1) == (
        "[1:v]scale=iw*1:ih*1,format=rgba,colorchannelmixer=aa=1[scaled_overlay];"
        "[0:v][scaled_overlay]overlay=0:0"
    )


def test_overlay_filter_keeps_full_precision():
    graph = overlay_filter("bottom-right", 10, 1234567, 0.1234567)
    assert graph.startswith("[1:v]scale=iw*12345.67:ih*12345.67,")
    assert "colorchannelmixer=aa=0.1234567[scaled_overlay]" in graph
