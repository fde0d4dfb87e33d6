"""
Logging for the binrepr package.

Every module logs under ``binrepr.<name>``; codecs only emit DEBUG records
describing why a parse was rejected, so output is silent unless asked for.
"""

import logging
import sys
from typing import Optional, TextIO

ROOT_LOGGER = 'binrepr'

# Per-module logger names accepted by --debug-modules
MODULES = ('array', 'string', 'dump', 'base64', 'formatters', 'config', 'cli')

LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL', 'NONE')


class LoggingManager:
    """Installs the package handler and per-module levels."""

    class ColoredFormatter(logging.Formatter):
        """Formatter that colors the level name with ANSI codes."""

        COLORS = {
            'DEBUG': '\033[36m',     # Cyan
            'INFO': '\033[32m',      # Green
            'WARNING': '\033[33m',   # Yellow
            'ERROR': '\033[31m',     # Red
            'CRITICAL': '\033[35m',  # Magenta
        }
        RESET = '\033[0m'

        def __init__(self, fmt=None, use_color=True):
            super().__init__(fmt)
            self.use_color = use_color

        def format(self, record):
            # Records are shared between handlers; restore the plain name
            levelname = record.levelname
            if self.use_color and levelname in self.COLORS:
                record.levelname = f"{self.COLORS[levelname]}{levelname}{self.RESET}"
            try:
                return super().format(record)
            finally:
                record.levelname = levelname

    FORMAT = '%(levelname)s [%(name)s] %(message)s'

    @classmethod
    def setup(cls, level: str = 'WARNING', module_levels: Optional[dict] = None,
              use_color: bool = True, stream: Optional[TextIO] = None):
        """
        Configure the ``binrepr`` logger tree.

        Calling setup again replaces the handler installed by the previous
        call instead of adding a second one.

        Args:
            level: Default level, one of LEVELS (NONE silences the package)
            module_levels: Levels for individual modules, e.g. {'array': 'DEBUG'}
            use_color: Color level names
            stream: Handler stream (stderr when None)
        """
        root_logger = logging.getLogger(ROOT_LOGGER)
        for existing in list(root_logger.handlers):
            if getattr(existing, '_binrepr_handler', False):
                root_logger.removeHandler(existing)

        if level.upper() == 'NONE':
            root_logger.setLevel(logging.CRITICAL + 1)
            return

        handler = logging.StreamHandler(stream or sys.stderr)
        handler._binrepr_handler = True
        handler.setFormatter(cls.ColoredFormatter(cls.FORMAT, use_color=use_color))
        root_logger.addHandler(handler)
        root_logger.setLevel(getattr(logging, level.upper(), logging.WARNING))

        for module, mod_level in (module_levels or {}).items():
            logging.getLogger(f'{ROOT_LOGGER}.{module}').setLevel(
                getattr(logging, mod_level.upper(), logging.WARNING)
            )

    @staticmethod
    def parse_module_levels(spec: Optional[str], level: str = 'DEBUG') -> dict:
        """
        Turn a comma-separated module list into a module_levels dict.

        Raises:
            ValueError: A name outside MODULES
        """
        if not spec:
            return {}
        modules = [name.strip() for name in spec.split(',') if name.strip()]
        unknown = [name for name in modules if name not in MODULES]
        if unknown:
            raise ValueError(
                f"Unknown module(s) {', '.join(unknown)}. Valid modules: {', '.join(MODULES)}"
            )
        return {name: level for name in modules}

    @staticmethod
    def get_logger(name: str) -> logging.Logger:
        """Logger for one package module, e.g. 'array' -> ``binrepr.array``."""
        return logging.getLogger(f'{ROOT_LOGGER}.{name}')


def setup_logging(level: str = 'WARNING', module_levels: Optional[dict] = None,
                  use_color: bool = True, stream: Optional[TextIO] = None):
    """Shortcut for LoggingManager.setup()."""
    LoggingManager.setup(level, module_levels, use_color, stream)


def get_logger(name: str) -> logging.Logger:
    return LoggingManager.get_logger(name)
