"""Allow ``python -m mindbridge`` to start the CLI."""

from .service.cli import main

if __name__ == "__main__":  # pragma: no cover - exercised via console script
    raise SystemExit(main())
