"""Entry point for `python -m report_card_cli` and `report-card` console script."""

from __future__ import annotations

from report_card_cli.app import app


def main() -> None:
    app()


if __name__ == "__main__":
    main()
