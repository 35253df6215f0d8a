"""アプリケーション全体で使用される列挙型を定義するモジュール。

HTTPリクエストメソッドと、HTMXがやり取りするヘッダ名をまとめる。
"""

from enum import StrEnum


class RequestMethod(StrEnum):
    """ビューが受け付けるHTTPリクエストメソッド。"""

    GET = "GET"
    POST = "POST"
    DELETE = "DELETE"


class HtmxHeader(StrEnum):
    """HTMXのリクエスト/レスポンスヘッダ名。

    Attributes:
        REQUEST: HTMX経由のリクエストであることを示すリクエストヘッダ。
        RETARGET: スワップ先を差し替えるレスポンスヘッダ。
        RESWAP: スワップ方法を差し替えるレスポンスヘッダ。
        TRIGGER: クライアント側イベントを発火するレスポンスヘッダ。
    """

    REQUEST = "HX-Request"
    RETARGET = "HX-Retarget"
    RESWAP = "HX-Reswap"
    TRIGGER = "HX-Trigger"
