from __future__ import annotations

from colorama import just_fix_windows_console

just_fix_windows_console()

RESET = "\033[0m"
BOLD = "\033[1m"
ACCENT = "\033[96m"  # cyan
SUCCESS = "\033[92m"  # green
INFO = "\033[94m"  # blue
WARNING = "\033[93m"  # yellow
ERROR = "\033[91m"  # red
MUTED = "\033[90m"  # dim gray
