#!/usr/bin/env python
"""Django管理コマンドのエントリポイント。"""

import os
import sys


def main() -> None:
    """管理コマンドを実行する。"""
    os.environ.setdefault("DJANGO_SETTINGS_MODULE", "personal_hub.settings")
    try:
        from django.core.management import execute_from_command_line
    except ImportError as exc:
        raise ImportError(
            "Djangoをインポートできませんでした。インストール済みか、仮想環境が有効か確認してください。"
        ) from exc
    execute_from_command_line(sys.argv)


if __name__ == "__main__":
    main()
