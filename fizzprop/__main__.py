"""Module entrypoint for `python -m fizzprop`."""

from .cli import main

raise SystemExit(main())
