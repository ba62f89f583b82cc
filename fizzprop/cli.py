"""fizzprop CLI entrypoint and driver loop."""

from __future__ import annotations

import sys
from typing import Iterator

from .constants import ERR_LINE_FORMAT, OK_LINE_FORMAT, RANGE_START, RANGE_STOP
from .errors import FizzpropError
from .pipeline import fizzbuzz
from .result import Ok, Result


def format_line(index: int, result: Result) -> str:
    """Render one output line.

    Args:
        index: Input value.
        result: Pipeline result for that value.

    Returns:
        `<index> => <value>` on success, `<index> => Error: <kind>` on failure.
    """
    if isinstance(result, Ok):
        return OK_LINE_FORMAT.format(index=index, value=result.value)
    return ERR_LINE_FORMAT.format(index=index, kind=result.kind)


def iter_lines(start: int = RANGE_START, stop: int = RANGE_STOP) -> Iterator[str]:
    """Yield formatted lines for `range(start, stop)` in ascending order."""
    for index in range(start, stop):
        yield format_line(index, fizzbuzz(index))


class FizzpropApplication:
    """Runs the pipeline over the fixed input range."""

    def run(self, argv: list[str]) -> int:
        """Run the CLI from argv.

        Args:
            argv: CLI args excluding program name.

        Returns:
            Exit status code.
        """
        if argv and argv[0] in {"-h", "--help"}:
            self._print_help()
            return 0

        try:
            self._validate_args(argv)
        except FizzpropError as exc:
            print(str(exc), file=sys.stderr)
            return 2

        for line in iter_lines():
            print(line)
        return 0

    @staticmethod
    def _validate_args(argv: list[str]) -> None:
        if argv:
            raise FizzpropError(f"unexpected arguments: {' '.join(argv)}")

    @staticmethod
    def _print_help() -> None:
        """Print command usage."""
        print("usage:")
        print("  python3 -m fizzprop")


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint.

    Args:
        argv: Optional argv vector.

    Returns:
        Exit status code.
    """
    application = FizzpropApplication()
    return application.run(argv if argv is not None else sys.argv[1:])


if __name__ == "__main__":
    raise SystemExit(main())
