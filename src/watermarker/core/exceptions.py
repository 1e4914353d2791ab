"""워터마크 작업 전역 커스텀 예외 클래스.

WatermarkError를 상속하면 error_code / message 기본값을 클래스 변수로 갖는다.
콜백 방식 호출에서는 이 예외 객체가 그대로 callback(error, None)으로 전달된다.
"""


class WatermarkError(Exception):
    """워터마크 작업 베이스 예외.

    서브클래스에서 error_code, message를 클래스 변수로 정의하고,
    필요하면 생성 시 message만 덮어쓴다.
    """

    error_code: str = "WATERMARK_ERROR"
    message: str = "워터마크 처리 중 오류가 발생했습니다"

    def __init__(self, message: str | None = None):
        if message:
            self.message = message
        super().__init__(self.message)


class InvalidOptions(WatermarkError):
    error_code = "INVALID_OPTIONS"
    message = "워터마크 옵션이 올바르지 않습니다"


# --- 이미지 관련 ---


class DecodeError(WatermarkError):
    error_code = "DECODE_ERROR"
    message = "이미지 파일을 읽을 수 없습니다"


# --- ffmpeg 관련 ---


class ToolNotFoundError(WatermarkError):
    error_code = "TOOL_NOT_FOUND"
    message = "ffmpeg is not installed on the system. Please install it first."


class ToolExecutionError(WatermarkError):
    error_code = "TOOL_EXECUTION_FAILED"
    message = "Error occurred while adding watermark to the video"

    def __init__(self, exit_code: int, message: str | None = None):
        self.exit_code = exit_code
        super().__init__(message or f"{self.message}. Error code: {exit_code}")


class ProcessSpawnError(WatermarkError):
    error_code = "PROCESS_SPAWN_FAILED"
    message = "외부 프로세스를 시작할 수 없습니다"


class ToolTimeoutError(WatermarkError):
    error_code = "TOOL_TIMEOUT"
    message = "ffmpeg 처리 시간이 초과되었습니다"

    def __init__(self, timeout: float, message: str | None = None):
        self.timeout = timeout
        super().__init__(message or f"{self.message} ({timeout}s)")


# --- 파일시스템 관련 ---


class FilesystemError(WatermarkError):
    error_code = "FILESYSTEM_ERROR"
    message = "결과 파일 처리 중 오류가 발생했습니다"
