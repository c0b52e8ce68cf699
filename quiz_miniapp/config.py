"""
config.py
=========

アプリ全体で利用する設定値を一元管理する。
API の接続先、表示言語、ホストチャネル、ログレベルなど
すべてこのクラスを通じて取得する。

優先順位:
    環境変数 > .env > config.toml > 既定値
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import toml


# ------------------------------------------------------------
# 基本パス定義
# ------------------------------------------------------------

ROOT_DIR = Path(__file__).resolve().parent.parent
CONFIG_PATH = ROOT_DIR / "config.toml"
ENV_PATH = ROOT_DIR / ".env"

# (環境変数名, config.toml のセクション, キー)
_SOURCES = {
    "api_base_url": ("QUIZ_API_BASE_URL", "api", "base_url"),
    "request_timeout": ("QUIZ_REQUEST_TIMEOUT", "api", "timeout"),
    "language": ("QUIZ_LANGUAGE", "app", "language"),
    "theme": ("QUIZ_THEME", "app", "theme"),
    "host_channel": ("QUIZ_HOST_CHANNEL", "app", "host_channel"),
    "log_level": ("QUIZ_LOG_LEVEL", "logging", "level"),
}


# ------------------------------------------------------------
# AppConfig
# ------------------------------------------------------------

@dataclass
class AppConfig:
    """
    アプリ設定クラス。

    - request_timeout が None の場合はタイムアウトなし
    - host_channel: "auto" / "telegram" / "log"
    """

    api_base_url: str = "http://localhost:8000"
    request_timeout: Optional[float] = None
    language: str = "ru"
    theme: str = "light"
    host_channel: str = "auto"
    log_level: str = "INFO"

    config_path: Path = CONFIG_PATH
    env_path: Path = ENV_PATH

    # ============================================================
    # 初期化処理
    # ============================================================

    def __post_init__(self):
        file_cfg = self.read_toml(self.config_path)
        dotenv = self.read_dotenv(self.env_path)

        for attr, (env_key, section, key) in _SOURCES.items():
            value = os.environ.get(env_key) or dotenv.get(env_key)
            if value is None:
                sect = file_cfg.get(section)
                if isinstance(sect, dict):
                    value = sect.get(key)
            if value is not None and value != "":
                setattr(self, attr, value)

        self.api_base_url = str(self.api_base_url).rstrip("/")
        self.request_timeout = self._parse_timeout(self.request_timeout)
        self.language = str(self.language).lower()
        self.host_channel = str(self.host_channel).lower()
        self.log_level = str(self.log_level).upper()

    # ============================================================
    # 内部関数
    # ============================================================

    @staticmethod
    def _parse_timeout(value: Any) -> Optional[float]:
        if value is None:
            return None
        if isinstance(value, str) and value.strip().lower() in ("", "none", "0"):
            return None
        timeout = float(value)
        return timeout if timeout > 0 else None

    @staticmethod
    def read_toml(path: Path) -> Dict[str, Any]:
        if not path.exists():
            return {}
        return toml.load(path)

    @staticmethod
    def read_dotenv(path: Path) -> Dict[str, str]:
        """ローカル開発用の .env（KEY=VALUE 形式）を読む。"""
        values: Dict[str, str] = {}
        if not path.exists():
            return values
        for line in path.read_text(encoding="utf-8").splitlines():
            line = line.strip()
            if not line or line.startswith("#") or "=" not in line:
                continue
            key, value = line.split("=", 1)
            values[key.strip()] = value.strip().strip('"').strip("'")
        return values
