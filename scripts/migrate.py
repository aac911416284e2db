#!/usr/bin/env python
"""
Wrapper de Alembic para las migraciones del leaderboard.

Uso:
    python scripts/migrate.py upgrade              # hasta head
    python scripts/migrate.py downgrade -1
    python scripts/migrate.py revision "agregar columna x"
    python scripts/migrate.py current
"""
import argparse
import subprocess
import sys
from pathlib import Path


ROOT_DIR = Path(__file__).resolve().parent.parent

DEFAULT_TARGETS = {"upgrade": "head", "downgrade": "-1"}


def run_alembic(args: list) -> int:
    cmd = ["alembic", *args]
    print(f"Ejecutando: {' '.join(cmd)}")
    return subprocess.run(cmd, cwd=ROOT_DIR).returncode


def build_alembic_args(command: str, value: str = None) -> list:
    """Traduce el comando del wrapper a argumentos de Alembic."""
    if command in DEFAULT_TARGETS:
        return [command, value or DEFAULT_TARGETS[command]]
    if command == "revision":
        if not value:
            raise SystemExit("Falta el mensaje de la revision")
        return ["revision", "-m", value, "--autogenerate"]
    if command == "history":
        return ["history", "--verbose"]
    return [command]


def main() -> int:
    parser = argparse.ArgumentParser(description="Migraciones de base de datos")
    parser.add_argument(
        "command",
        choices=["upgrade", "downgrade", "revision", "current", "history", "heads"],
    )
    parser.add_argument("value", nargs="?", help="target o mensaje de la revision")
    args = parser.parse_args()
    return run_alembic(build_alembic_args(args.command, args.value))


if __name__ == "__main__":
    sys.exit(main())
