"""Entry point for `python -m patternbook.cli` and the `patternbook` script."""

from __future__ import annotations

from .app import app


def main() -> None:  # pragma: no cover - console script target
    app(prog_name="patternbook")


if __name__ == "__main__":  # pragma: no cover
    main()
