"""로깅 설정 모듈.

Logging setup module. Configures the root stdlib logger once at startup;
modules obtain their own logger with ``logging.getLogger(__name__)``.
"""

import logging
import sys

from app.config import settings

# 로그 포맷: 시간 - 이름 - 레벨 - 메시지 (time - name - level - message)
LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str | None = None) -> None:
    """루트 로거에 콘솔 핸들러를 설정합니다.

    Attach a stdout handler to the root logger. Calling it twice does not
    add a second handler.

    Args:
        level: 로그 레벨, None이면 settings.LOG_LEVEL (Log level override)
    """
    root: logging.Logger = logging.getLogger()
    root.setLevel((level or settings.LOG_LEVEL).upper())

    if not any(getattr(h, "_member_search", False) for h in root.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._member_search = True  # type: ignore[attr-defined]
        root.addHandler(handler)

    # SQL 로그는 DEBUG 설정(echo)으로만 출력 — SQL output only through engine echo
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
