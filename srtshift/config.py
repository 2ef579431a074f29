"""環境変数から設定を読み込むモジュール"""

import logging
import os
from dataclasses import dataclass

DEFAULT_ENCODING = "utf-8"
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass
class Settings:
    """実行時の設定"""

    encoding: str = DEFAULT_ENCODING
    log_level: int = logging.WARNING


def load_settings() -> Settings:
    """
    環境変数から設定を読み込む

    呼び出し前に load_dotenv() で .env を反映しておくこと。

    Returns:
        設定
    """
    level_name = os.getenv("SRTSHIFT_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
    log_level = logging.getLevelName(level_name)
    if not isinstance(log_level, int):
        raise ValueError(f"SRTSHIFT_LOG_LEVELの値が不正です: {level_name}")

    return Settings(
        encoding=os.getenv("SRTSHIFT_ENCODING", DEFAULT_ENCODING),
        log_level=log_level,
    )
