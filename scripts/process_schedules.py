"""Dispatch due scheduled notifications once or continuously."""

from __future__ import annotations

import argparse
import logging
import sys

from sqlalchemy.exc import SQLAlchemyError

from notifyhub.application.use_cases.schedules import (
    run_dispatch_cycle,
    run_dispatch_forever,
)
from notifyhub.config import get_settings
from notifyhub.infrastructure.database import initialize_database
from notifyhub.infrastructure.logging import setup_logging
from notifyhub.utils import now_in_app_timezone

logger = logging.getLogger("notifyhub.scripts.process_schedules")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments for the dispatcher."""

    settings = get_settings()
    parser = argparse.ArgumentParser(
        description="Envía las notificaciones agendadas cuya hora ya llegó.",
    )
    parser.add_argument(
        "--loop",
        action="store_true",
        help="Ejecuta el despachador de forma continua en lugar de una sola vez.",
    )
    parser.add_argument(
        "--interval",
        type=int,
        default=settings.dispatch_interval_seconds,
        help="Segundos entre ciclos en modo continuo (por defecto: %(default)s)",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=settings.dispatch_max_workers,
        help="Agendamientos procesados en paralelo por ciclo (por defecto: %(default)s)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Nivel de log; por defecto se usa LOG_LEVEL.",
    )
    args = parser.parse_args(argv)
    if args.interval <= 0:
        parser.error("--interval debe ser mayor que cero")
    if args.workers <= 0:
        parser.error("--workers debe ser mayor que cero")
    return args


def main(argv: list[str] | None = None) -> int:
    """Run the dispatcher and return the process exit code."""

    args = parse_args(argv)
    setup_logging(args.log_level)
    initialize_database()

    if args.loop:
        try:
            run_dispatch_forever(interval_seconds=args.interval, max_workers=args.workers)
        except KeyboardInterrupt:
            logger.info("Despachador detenido")
        return 0

    try:
        result = run_dispatch_cycle(now_in_app_timezone(), max_workers=args.workers)
    except SQLAlchemyError as exc:
        raise SystemExit(f"No se pudo consultar los agendamientos pendientes: {exc}") from exc

    print(
        "Agendamientos procesados: "
        f"{result.processed} (enviados: {result.succeeded}, "
        f"omitidos: {result.skipped}, con error: {len(result.failed)})"
    )
    for failure in result.failed:
        print(f"  #{failure.schedule_id}: {failure.error}", file=sys.stderr)
    return 1 if result.has_failures else 0


if __name__ == "__main__":
    sys.exit(main())
