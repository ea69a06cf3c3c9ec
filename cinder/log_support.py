"""
    Logging setup for the Cinder command line.
    Colors the level name when stderr is a VT-100 compatible terminal.
"""

import logging
import os

# Coloring only makes sense when stderr is attached to a terminal
has_a_tty = os.isatty(2)


def color_me(color):
    """Return a function wrapping a message in the given ANSI foreground color."""
    RESET_SEQ = "\033[0m"
    COLOR_SEQ = "\033[1;%dm"
    color_seq = COLOR_SEQ % (30 + color)

    def closure(msg):
        return color_seq + msg + RESET_SEQ
    return closure


class ColoredFormatter(logging.Formatter):
    """Color the level name of each record by severity."""

    RED, GREEN, YELLOW, BLUE = 1, 2, 3, 4

    colors = {
        'WARNING': color_me(YELLOW),
        'DEBUG': color_me(BLUE),
        'CRITICAL': color_me(RED),
        'ERROR': color_me(RED),
        'INFO': color_me(GREEN)
    }

    def __init__(self, msg, use_color=True, datefmt=None):
        logging.Formatter.__init__(self, msg, datefmt=datefmt)
        self.use_color = use_color

    def format(self, record):
        msg = super().format(record)
        if self.use_color and record.levelname in self.colors:
            return msg.replace(record.levelname, self.colors[record.levelname](record.levelname), 1)
        return msg


def setup_loggers(log_level="WARNING"):
    """Install a single stderr handler on the `cinder` logger."""
    logger = logging.getLogger('cinder')
    level = logging.getLevelName(log_level)
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {log_level}")
    logger.setLevel(level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(ColoredFormatter("%(asctime)s - %(levelname)s - %(name)s - %(message)s",
                                          use_color=has_a_tty))
    logger.addHandler(handler)
    logger.propagate = False
    return logger
