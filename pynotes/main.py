from __future__ import annotations
import sys
from pynotes.app import run_app


def main() -> int:
    """Module entrypoint for `python -m pynotes.main` and the `pynotes` launcher."""
    return run_app(sys.argv)


if __name__ == "__main__":
    raise SystemExit(main())
