import logging
import os
import sys

import coloredlogs
from humanfriendly.terminal import terminal_supports_colors

FORMAT_CONSOLE = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def use_color(stream) -> bool:
    # https://no-color.org/
    if "NO_COLOR" in os.environ:
        return False
    return terminal_supports_colors(stream)


def create_console_formatter(stream) -> logging.Formatter:
    if use_color(stream):
        level_styles = {
            'debug': {'color': 'green'},
            'info': {'color': 'blue'},
            'warning': {'color': 'yellow'},
            'error': {'color': 'red', 'bold': True},
            'critical': {'color': 'red', 'bold': True, 'inverse': True}
        }
        field_styles = {'name': {'color': 'blue'}}
        return coloredlogs.ColoredFormatter(fmt=FORMAT_CONSOLE, level_styles=level_styles, field_styles=field_styles)
    return logging.Formatter(FORMAT_CONSOLE)


def initialize_logging(level=logging.WARNING):
    stream = sys.stderr
    handler = logging.StreamHandler(stream)
    handler.setLevel(level)
    handler.setFormatter(create_console_formatter(stream))

    logging.basicConfig(level=level, handlers=[handler], force=True)
