"""ログ設定。各モジュールは logging.getLogger(__name__) を使う。"""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """
    ルートロガーを設定する。

    Streamlit は操作のたびにスクリプトを再実行するので、
    既にハンドラがある場合はレベルだけ更新する。
    """
    resolved = getattr(logging, str(level).upper(), logging.INFO)
    root = logging.getLogger()
    if root.handlers:
        root.setLevel(resolved)
        return
    logging.basicConfig(level=resolved, format=LOG_FORMAT)
