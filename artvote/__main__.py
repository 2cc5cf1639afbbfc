from __future__ import annotations

import sys
import traceback
from typing import List, Optional

from artvote_forms.colors import ERROR, RESET, WARNING

from .cli import main


def _execute_command(argv: Optional[List[str]]) -> int:
    try:
        exit_code = main(argv)
    except SystemExit as exc:
        if isinstance(exc.code, int):
            exit_code = exc.code
        else:
            if exc.code:
                print(f"{WARNING}{exc.code}{RESET}", file=sys.stderr)
            exit_code = 1
    except KeyboardInterrupt:
        print(f"\n{WARNING}Command interrupted by user.{RESET}", file=sys.stderr)
        exit_code = 130
    except Exception:
        print(f"{ERROR}Unexpected error running artvote:{RESET}", file=sys.stderr)
        traceback.print_exc()
        exit_code = 1
    return exit_code


if __name__ == "__main__":
    raise SystemExit(_execute_command(sys.argv[1:]))
