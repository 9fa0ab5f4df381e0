import logging

from rich.console import Console
from rich.theme import Theme
from rich.markup import escape

_formatter = logging.Formatter()


class CounterLogHandler(logging.Handler):
    """Prints log records to a rich console, colored by level."""

    def __init__(self, no_style=False, file=None):
        super().__init__()
        theme = Theme({
            'debug':    'magenta',
            'info':     'blue',
            'warning':  'yellow',
            'error':    'red',
            'critical': 'bold red',
            'name':     'green'
        }, inherit=False)

        if no_style:
            theme = Theme({}, inherit=False)

        self.console = Console(theme=theme, file=file)

    def emit(self, record):
        try:
            level_str = escape(f"[{record.levelname}]")
            level_tag = record.levelname.lower()
            level = f"[{level_tag}]{level_str}[/{level_tag}]"
            name = "[name]" + escape(f"[{record.name}]") + "[/name]"
            msg = escape(record.getMessage())

            self.console.print(f"{level} {name} {msg}", soft_wrap=True)

            if record.exc_info:
                traceback = _formatter.formatException(record.exc_info)
                self.console.print(traceback, markup=False, highlight=False, soft_wrap=True)
        except Exception:
            self.handleError(record)


def setup_logging(debug=False):
    if debug:
        log_level = "DEBUG"
    else:
        log_level = "INFO"

    logging.basicConfig(level=log_level, handlers=[CounterLogHandler()], force=True)
