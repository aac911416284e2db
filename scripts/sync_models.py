"""
CLI: Artificial Analysis -> ai_models (una corrida del sync).

Uso recomendado:
  - Ejecutar como job (cron/systemd timer) si no se usa SYNC_SCHEDULE_HOURS.
  - Respeta el mismo rate limit (sync_state) que el endpoint.

Variables de entorno requeridas:
  - ARTIFICIAL_ANALYSIS_API_KEY
  - DATABASE_URL (o DATABASE_HOST/PORT/USER/PASSWORD/NAME)

Ejecucion:
  python scripts/sync_models.py
  python scripts/sync_models.py --json
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from pathlib import Path

from loguru import logger
from dotenv import load_dotenv

# Permite ejecutar este script desde cualquier cwd sin configurar PYTHONPATH.
_ROOT = Path(__file__).resolve().parents[1]
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

# Cargar .env antes de importar settings
load_dotenv(_ROOT / ".env", override=False)

from leaderboard.application.use_cases.sync_use_cases import ModelSyncUseCases
from leaderboard.infrastructure.database.session import close_db, session_scope
from leaderboard.shared.exceptions.base import AppException


async def _run() -> dict:
    try:
        async with session_scope() as db:
            result = await ModelSyncUseCases(db).run_sync()
            return result.to_dict()
    finally:
        await close_db()


def main() -> int:
    parser = argparse.ArgumentParser(description="Sincroniza modelos desde Artificial Analysis")
    parser.add_argument(
        "--json",
        action="store_true",
        help="Imprime el resultado {updated, total, skipped} como JSON.",
    )
    args = parser.parse_args()

    try:
        result = asyncio.run(_run())
    except AppException as e:
        logger.error(f"Sync fallido: {e.error_code} - {e.message}")
        if args.json:
            print(json.dumps(e.to_payload(), ensure_ascii=False))
        return 1

    if args.json:
        print(json.dumps(result, ensure_ascii=False, indent=2))
    else:
        logger.info(
            f"Sync OK: updated={result['updated']}, total={result['total']}, "
            f"skipped={len(result['skipped'])}"
        )
        for skip in result["skipped"]:
            logger.info(f"  omitido {skip['id']} ({skip['name']}): {skip['reason']}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
