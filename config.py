import logging
import os
import sys


def _env_int(name, default): # 环境变量覆盖, 格式不对时用默认值
    try:
        return int(os.environ.get(name, default))
    except ValueError:
        return default


class Config:
    SECRET_KEY = os.environ.get("KNIGHT_TOUR_SECRET_KEY", "dev")
    DEBUG = os.environ.get("KNIGHT_TOUR_DEBUG", "").lower() in ("1", "true", "yes")
    TESTING = False
    LOG_LEVEL = os.environ.get("KNIGHT_TOUR_LOG_LEVEL", "INFO")
    MAX_GAMES = _env_int("KNIGHT_TOUR_MAX_GAMES", 1000) # 内存中最多保留的棋局数
    USER_COOKIE = "user"
    PORT = _env_int("KNIGHT_TOUR_PORT", 5000)


class TestConfig(Config):
    TESTING = True
    MAX_GAMES = 3


def setup_logging(level="INFO"):
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)]
    )
