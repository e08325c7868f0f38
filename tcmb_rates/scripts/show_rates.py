"""CLI entry point for printing TCMB exchange rates."""

from __future__ import annotations

from tcmb_rates.cli import main

if __name__ == "__main__":  # pragma: no cover - thin wrapper
    raise SystemExit(main())
