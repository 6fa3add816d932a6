import logging
import sys

from yourel.core.config import get_settings

# 每个请求都会在INFO级别输出日志的第三方库
_NOISY_LOGGERS = ("httpx", "httpcore")


def _find_console_handler(root_logger: logging.Logger) -> logging.Handler | None:
    for handler in root_logger.handlers:
        if isinstance(handler, logging.StreamHandler) and handler.stream is sys.stdout:
            return handler
    return None


def setup_logging() -> None:
    """设置Yourel的日志记录配置。

    日志统一输出到标准输出，重复调用只会更新日志级别而不会追加处理器。
    """
    settings = get_settings()
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    # 1.根日志记录器按配置设置级别
    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # 2.已存在标准输出处理器时只同步级别
    console_handler = _find_console_handler(root_logger)
    if console_handler is None:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        root_logger.addHandler(console_handler)
    console_handler.setLevel(log_level)

    # 3.搜索函数的每次HTTP请求都会被httpx记录，调高其级别
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(log_level, logging.WARNING))

    root_logger.info("日志记录器已初始化，日志级别: %s", settings.log_level)
