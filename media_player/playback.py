"""メディア再生状態の管理。

ブラウザのメディア要素から送られるイベント（時刻更新・メタデータ読み込み・全画面切り替え）と
利用者の操作（再生/一時停止/シーク/スキップ/音量/速度）を、再生状態に反映する。
デコードやバッファリングはブラウザ側に任せ、ここでは画面に映す状態だけを扱う。
"""

import math
from dataclasses import asdict, dataclass, replace
from enum import StrEnum
from typing import Final

from django.conf import settings
from django.http import HttpRequest

from accounts.signals import register_session_state_key

DEFAULT_SKIP_SECONDS: Final[int] = 10
DEFAULT_PLAYBACK_RATES: Final[tuple[float, ...]] = (0.5, 0.75, 1.0, 1.25, 1.5, 2.0)
PLAYBACK_SESSION_KEY: Final[str] = "media_playback"

_TRUE_VALUES: Final[frozenset[str]] = frozenset({"1", "true", "on", "yes"})
_FALSE_VALUES: Final[frozenset[str]] = frozenset({"0", "false", "off", "no", ""})


class PlaybackAction(StrEnum):
    """再生状態に対する操作・イベント。"""

    PLAY = "play"
    PAUSE = "pause"
    TOGGLE = "toggle"
    SEEK = "seek"
    SKIP_FORWARD = "skip_forward"
    SKIP_BACKWARD = "skip_backward"
    VOLUME = "volume"
    RATE = "rate"
    TIME_UPDATE = "time_update"
    METADATA_LOADED = "metadata_loaded"
    FULLSCREEN_CHANGE = "fullscreen_change"


class PlaybackError(ValueError):
    """操作名や値が不正な場合の例外。"""


@dataclass(frozen=True)
class PlaybackState:
    """画面に映す再生状態。

    Attributes:
        position: 再生位置（秒）。
        duration: 再生時間（秒）。メタデータ読み込み前は0。
        volume: 音量（0〜1）。
        rate: 再生速度。
        playing: 再生中か。
        fullscreen: 全画面表示中か。
    """

    position: float = 0.0
    duration: float = 0.0
    volume: float = 1.0
    rate: float = 1.0
    playing: bool = False
    fullscreen: bool = False

    def as_dict(self) -> dict[str, object]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, object] | None) -> "PlaybackState":
        """セッションに保存した辞書から復元する。壊れた値は既定値に戻す。"""
        if not data:
            return cls()
        try:
            return cls(
                position=float(data.get("position", 0.0)),  # type: ignore[arg-type]
                duration=float(data.get("duration", 0.0)),  # type: ignore[arg-type]
                volume=float(data.get("volume", 1.0)),  # type: ignore[arg-type]
                rate=float(data.get("rate", 1.0)),  # type: ignore[arg-type]
                playing=bool(data.get("playing", False)),
                fullscreen=bool(data.get("fullscreen", False)),
            )
        except (TypeError, ValueError):
            return cls()


def get_skip_seconds() -> float:
    return float(getattr(settings, "MEDIA_SKIP_SECONDS", DEFAULT_SKIP_SECONDS))


def get_playback_rates() -> tuple[float, ...]:
    return tuple(float(rate) for rate in getattr(settings, "MEDIA_PLAYBACK_RATES", DEFAULT_PLAYBACK_RATES))


def clamp(value: float, lower: float, upper: float) -> float:
    return max(lower, min(value, upper))


def parse_action(raw_action: str | None) -> PlaybackAction:
    """操作名を正規化する。

    Raises:
        PlaybackError: 未指定または未知の操作名の場合。
    """
    action = (raw_action or "").strip().lower()
    try:
        return PlaybackAction(action)
    except ValueError:
        raise PlaybackError(f"Unknown playback action: {raw_action!r}") from None


def _parse_number(raw_value: object, *, action: PlaybackAction) -> float:
    if raw_value is None or raw_value == "":
        raise PlaybackError(f"A value is required for {action}")
    try:
        number = float(raw_value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        raise PlaybackError(f"Invalid value for {action}: {raw_value!r}") from None
    if not math.isfinite(number):
        raise PlaybackError(f"Invalid value for {action}: {raw_value!r}")
    return number


def _parse_flag(raw_value: object, *, action: PlaybackAction) -> bool:
    if isinstance(raw_value, bool):
        return raw_value
    value = str(raw_value if raw_value is not None else "").strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise PlaybackError(f"Invalid value for {action}: {raw_value!r}")


def apply_action(
    state: PlaybackState,
    action: PlaybackAction,
    value: object = None,
    *,
    skip_seconds: float = DEFAULT_SKIP_SECONDS,
    rates: tuple[float, ...] = DEFAULT_PLAYBACK_RATES,
) -> PlaybackState:
    """操作・イベントを適用した新しい再生状態を返す。

    - seek / skip_forward / skip_backward は [0, duration] に収める。
    - volume は [0, 1] に収める。
    - rate は rates に含まれる値のみ受け付ける。
    - time_update / metadata_loaded はメディア要素の報告値をそのまま映す（範囲内に収める）。

    Args:
        state: 現在の状態。
        action: 操作。
        value: 操作の値（seek位置、音量、速度など）。
        skip_seconds: スキップ幅（秒）。
        rates: 選択可能な再生速度。

    Returns:
        新しいPlaybackState。

    Raises:
        PlaybackError: 値が欠けている、数値でない、範囲外の速度などの場合。
    """
    if action == PlaybackAction.PLAY:
        return replace(state, playing=True)
    if action == PlaybackAction.PAUSE:
        return replace(state, playing=False)
    if action == PlaybackAction.TOGGLE:
        return replace(state, playing=not state.playing)
    if action == PlaybackAction.SKIP_FORWARD:
        return replace(state, position=clamp(state.position + skip_seconds, 0.0, state.duration))
    if action == PlaybackAction.SKIP_BACKWARD:
        return replace(state, position=clamp(state.position - skip_seconds, 0.0, state.duration))
    if action == PlaybackAction.FULLSCREEN_CHANGE:
        return replace(state, fullscreen=_parse_flag(value, action=action))

    number = _parse_number(value, action=action)

    if action == PlaybackAction.SEEK:
        return replace(state, position=clamp(number, 0.0, state.duration))
    if action == PlaybackAction.VOLUME:
        return replace(state, volume=clamp(number, 0.0, 1.0))
    if action == PlaybackAction.RATE:
        if number not in rates:
            raise PlaybackError(f"Unsupported playback rate: {value!r}")
        return replace(state, rate=number)
    if action == PlaybackAction.TIME_UPDATE:
        upper = state.duration if state.duration > 0 else math.inf
        return replace(state, position=clamp(number, 0.0, upper))
    if action == PlaybackAction.METADATA_LOADED:
        duration = max(number, 0.0)
        return replace(state, duration=duration, position=clamp(state.position, 0.0, duration))

    raise PlaybackError(f"Unknown playback action: {action!r}")


def format_time(seconds: float | int | None) -> str:
    """秒数を 'm:ss' 形式にする（例: 75 → '1:15'）。不正値は '0:00'。"""
    if seconds is None:
        return "0:00"
    try:
        total = float(seconds)
    except (TypeError, ValueError):
        return "0:00"
    if not math.isfinite(total) or total < 0:
        return "0:00"
    minutes = int(total // 60)
    secs = int(total % 60)
    return f"{minutes}:{secs:02d}"


class PlaybackStore:
    """メディアごとの再生状態をセッションに保存する。

    状態はサインイン/サインアウト時に破棄される。
    """

    def __init__(self, request: HttpRequest) -> None:
        self._session = request.session

    def _states(self) -> dict[str, dict[str, object]]:
        return self._session.get(PLAYBACK_SESSION_KEY, {})

    def get(self, media_id: int) -> PlaybackState:
        return PlaybackState.from_dict(self._states().get(str(media_id)))

    def save(self, media_id: int, state: PlaybackState) -> None:
        states = dict(self._states())
        states[str(media_id)] = state.as_dict()
        self._session[PLAYBACK_SESSION_KEY] = states

    def discard(self, media_id: int) -> None:
        states = dict(self._states())
        if states.pop(str(media_id), None) is not None:
            self._session[PLAYBACK_SESSION_KEY] = states


register_session_state_key(PLAYBACK_SESSION_KEY)
