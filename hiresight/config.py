import logging
import logging.handlers
from pathlib import Path

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # AI provider: "gemini" (REST over httpx) or "anthropic" (SDK)
    ai_provider: str = "gemini"
    gemini_api_key: str = ""
    gemini_model: str = "gemini-2.0-flash"
    gemini_search_grounding: bool = False
    anthropic_api_key: str = ""
    anthropic_model: str = "claude-haiku-4-5-20251001"

    ai_temperature: float = 0.3
    ai_max_output_tokens: int = 8192
    ai_timeout_seconds: float = 60.0

    # Page fetching for the job scraper
    fetch_timeout_seconds: float = 10.0
    fetch_max_bytes: int = 2_097_152  # 2 MB
    content_budget_chars: int = 50_000

    default_region: str = "India"
    job_dataset_path: str = "data/jobDataset.csv"

    # Logging
    log_level: str = "INFO"
    log_dir: str = "logs"
    log_max_bytes: int = 10_485_760  # 10 MB
    log_backup_count: int = 5

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()


NOISY_LOGGERS = ("uvicorn.access", "httpcore", "httpx", "anthropic")

CONSOLE_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
FILE_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s:%(funcName)s:%(lineno)d] %(message)s"


def _file_handler(path: Path, level: int, config: Settings) -> logging.Handler:
    handler = logging.handlers.RotatingFileHandler(
        path, maxBytes=config.log_max_bytes, backupCount=config.log_backup_count, encoding="utf-8"
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    return handler


def setup_logging(config: Settings | None = None) -> None:
    """Route all loggers to stdout plus two rotating files under `log_dir`.

    app.log receives every record at DEBUG and above, error.log only ERROR and
    above. The console follows `log_level`. Calling it again replaces the
    handlers instead of stacking them.
    """
    config = config or settings
    log_dir = Path(config.log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    level = logging.getLevelName(config.log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    console = logging.StreamHandler()
    console.setLevel(level)
    console.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt="%H:%M:%S"))

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(logging.DEBUG)
    for handler in (
        console,
        _file_handler(log_dir / "app.log", logging.DEBUG, config),
        _file_handler(log_dir / "error.log", logging.ERROR, config),
    ):
        root.addHandler(handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.getLogger(__name__).info(
        "Logging to %s (console=%s, rotate at %d bytes, keep %d)",
        log_dir, logging.getLevelName(level), config.log_max_bytes, config.log_backup_count,
    )
