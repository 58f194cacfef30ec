"""Command-line entry point.

Usage:
    binding-fixups <path>

The last argument is the target path. There are no options.
"""

import sys

from binding_fixups.patcher import patch


def main(argv: list[str] | None = None) -> int:
    args = sys.argv if argv is None else argv
    if not args:
        return 0

    target = args[-1]
    try:
        patch(target)
    except OSError as e:
        print(f"ERROR: {target}: {e.strerror or e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
