"""Plain-text logging for the certificate installer.

Lines go to stdout by default. In debug mode they are appended to a log file
instead, so a normal image build leaves nothing behind.
"""

import sys


class InstallLogger:
    """Logger that writes one plain line per message, without level prefixes."""

    def __init__(self, log_file: str = None):
        self.log_file = log_file

    def _emit(self, msg: str) -> None:
        if self.log_file:
            try:
                with open(self.log_file, "a") as f:
                    f.write(msg + "\n")
                return
            except OSError:
                pass
        print(msg, flush=True)

    def info(self, msg: str) -> None:
        self._emit(msg)

    def warn(self, msg: str) -> None:
        self._emit(msg)

    def error(self, msg: str) -> None:
        self._emit(msg)
