from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # 앱 설정
    APP_NAME: str = "watermarker"
    APP_VERSION: str = "0.1.0"
    LOG_LEVEL: str = "INFO"
    LOG_FILE: str | None = None

    # 결과 파일 임시 저장 경로 (호출 시점의 작업 디렉토리 기준)
    OUTPUT_DIR: str = "output"

    # ffmpeg 설정
    FFMPEG_BINARY: str = "ffmpeg"
    FFMPEG_TIMEOUT: float | None = None  # 초 단위, None이면 무제한 대기

    # 인코딩 설정
    JPEG_QUALITY: int = 75

    # 확장자 기반 분류 (내용 검사 없음)
    VIDEO_EXTENSIONS: tuple[str, ...] = (".mp4", ".avi", ".mov")

    model_config = {"env_file": ".env", "env_prefix": "WATERMARKER_", "extra": "ignore"}


settings = Settings()
