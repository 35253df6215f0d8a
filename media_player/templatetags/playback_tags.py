from django import template

from media_player.playback import format_time as _format_time

register = template.Library()


@register.filter
def format_time(seconds):
    """秒数を 'm:ss' 形式で表示する。"""
    return _format_time(seconds)
