import logging
from typing import Any, Dict


def setup_logger(level: int = logging.INFO) -> logging.Logger:
    """
    Создаёт и настраивает логгер проекта ``pkmeans``.

    :param level: минимальный уровень логирования
    :return: настроенный экземпляр :class:`logging.Logger`
    """
    logger = logging.getLogger("pkmeans")
    logger.setLevel(level)

    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            "[%(asctime)s] %(levelname)s: %(message)s",
            datefmt="%H:%M:%S",
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    # Без дублирования через root-логгер
    logger.propagate = False

    return logger


def format_problem_prefix(meta: Dict[str, Any]) -> str:
    """
    Префикс для логов по размерам задачи.

    Ожидается словарь с ключами ``M``, ``N``, ``K`` и опциональным ``W``
    (число воркеров; для последовательного прогона: 1).
    """
    return f"[M={meta['M']} N={meta['N']} K={meta['K']} W={meta.get('W', 1)}]"


class PrefixedLogger:
    """Обёртка над логгером, добавляющая префикс к каждому сообщению."""

    def __init__(self, base_logger: logging.Logger | None, prefix: str) -> None:
        self._base = base_logger
        self._prefix = prefix

    def info(self, msg: str, *args: Any, **kwargs: Any) -> None:
        if self._base:
            self._base.info(f"{self._prefix} {msg}", *args, **kwargs)

    def warning(self, msg: str, *args: Any, **kwargs: Any) -> None:
        if self._base:
            self._base.warning(f"{self._prefix} {msg}", *args, **kwargs)

    def debug(self, msg: str, *args: Any, **kwargs: Any) -> None:
        if self._base:
            self._base.debug(f"{self._prefix} {msg}", *args, **kwargs)
