"""
host.py
======================

ミニアプリを埋め込んでいるホスト（Telegram WebApp）へのメッセージ経路。

- HostChannel:            ready() / expand() / send_data() を持つ共通インターフェース
- TelegramWebAppChannel:  Telegram.WebApp の JS API をブラウザ側で呼び出す実装
- LoggingHostChannel:     ホストが無い場合（ブラウザ単体での確認用）のスタブ。ログに出すだけ
- detect_host_channel():  起動時にどちらを使うかを決める

Streamlit はサーバ側で動くため、Telegram 側の呼び出しは JS を溜めておき、
毎回の描画の最後に render() でまとめて埋め込む。
"""

from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, List, Mapping, Optional

logger = logging.getLogger(__name__)

TELEGRAM_SCRIPT_URL = "https://telegram.org/js/telegram-web-app.js"

HOST_MODES = ("auto", "telegram", "log")


class HostChannel(ABC):
    name = "base"

    @abstractmethod
    def ready(self) -> None:
        ...

    @abstractmethod
    def expand(self) -> None:
        ...

    @abstractmethod
    def send_data(self, data: str) -> None:
        ...

    def start(self) -> None:
        """起動時に 1 回だけ呼ぶ。"""
        self.ready()
        self.expand()

    def render(self) -> None:
        """描画ごとに呼ばれる。溜まった呼び出しがあればブラウザへ送る。"""


class LoggingHostChannel(HostChannel):
    """ホストが無い環境用。送信内容はログに残すだけ。"""

    name = "log"

    def ready(self) -> None:
        logger.debug("Host channel unavailable; ready() skipped")

    def expand(self) -> None:
        logger.debug("Host channel unavailable; expand() skipped")

    def send_data(self, data: str) -> None:
        logger.info("Telegram WebApp API unavailable. Payload: %s", data)


def _emit_with_components(html: str) -> None:
    # streamlit はここで初めて読み込む（コアロジックのテストで不要にするため）
    import streamlit.components.v1 as components

    components.html(html, height=0)


class TelegramWebAppChannel(HostChannel):
    """
    Telegram.WebApp を呼び出すチャネル。

    呼び出しは一旦 pending に積み、render() で 1 つの <script> にまとめて出力する。
    コンポーネントの iframe は親ページと同一オリジンなので、親ページに
    telegram-web-app.js が無ければ読み込んでから呼び出す。
    """

    name = "telegram"

    def __init__(self, emit: Optional[Callable[[str], None]] = None):
        self._emit = emit or _emit_with_components
        self._pending: List[Dict[str, Any]] = []

    @property
    def pending_calls(self) -> List[Dict[str, Any]]:
        return list(self._pending)

    def ready(self) -> None:
        self._queue("ready")

    def expand(self) -> None:
        self._queue("expand")

    def send_data(self, data: str) -> None:
        self._queue("sendData", data)

    def render(self) -> None:
        if not self._pending:
            return
        calls, self._pending = self._pending, []
        self._emit(build_bridge_script(calls))

    def _queue(self, method: str, *args: Any) -> None:
        self._pending.append({"method": method, "args": list(args)})


def build_bridge_script(calls: List[Dict[str, Any]]) -> str:
    """Telegram.WebApp のメソッドを順に呼ぶ HTML スニペットを生成する。"""
    calls_json = json.dumps(calls, ensure_ascii=False).replace("</", "<\\/")
    return f"""
<script>
(function () {{
  var calls = {calls_json};
  var host = window.parent || window;

  function run() {{
    var tg = host.Telegram && host.Telegram.WebApp;
    if (!tg) {{
      console.log("Telegram WebApp API unavailable. Calls:", calls);
      return;
    }}
    calls.forEach(function (c) {{
      try {{
        tg[c.method].apply(tg, c.args);
      }} catch (e) {{
        console.error("Telegram WebApp call failed:", c.method, e);
      }}
    }});
  }}

  if (host.Telegram && host.Telegram.WebApp) {{
    run();
    return;
  }}
  var s = host.document.createElement("script");
  s.src = "{TELEGRAM_SCRIPT_URL}";
  s.onload = run;
  host.document.head.appendChild(s);
}})();
</script>
"""


def is_telegram_context(query_params: Mapping[str, Any]) -> bool:
    """
    Telegram 起動かどうかの判定は ?host=telegram だけで行う。

    Telegram 自身が付ける tgWebApp* パラメータは URL フラグメント（#以降）に入り、
    サーバ側の st.query_params には届かないため使えない。
    ボットの WebApp ボタンの URL に host=telegram を付けておくこと。
    """
    return str(query_params.get("host", "")).lower() == "telegram"


def detect_host_channel(
    mode: str = "auto",
    query_params: Optional[Mapping[str, Any]] = None,
) -> HostChannel:
    """
    mode:
        "telegram" → 常に TelegramWebAppChannel
        "log"      → 常に LoggingHostChannel
        "auto"     → URL のクエリに host=telegram があれば Telegram
    """
    mode = (mode or "auto").lower()
    if mode not in HOST_MODES:
        logger.warning("Unknown host channel mode %r, falling back to auto", mode)
        mode = "auto"

    if mode == "telegram" or (mode == "auto" and is_telegram_context(query_params or {})):
        logger.info("Using Telegram WebApp host channel")
        return TelegramWebAppChannel()

    logger.info("Host channel not detected; results will only be logged")
    return LoggingHostChannel()
