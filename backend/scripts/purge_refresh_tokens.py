"""Delete refresh tokens that expired long ago.

Expired rows are rejected at read time anyway; this only reclaims space and
shortens audit chains. Run by hand or from an operator cron, never from the API.
"""

from __future__ import annotations

import argparse
import datetime as dt
import logging
import sys
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parents[1]
sys.path.append(str(BASE_DIR))

from findw.core.clock import utcnow  # noqa: E402
from findw.core.config import get_settings  # noqa: E402
from findw.core.logging import setup_logging  # noqa: E402
from findw.db.session import build_engine, build_session_factory  # noqa: E402
from findw.services.refresh_tokens import purge_dead_refresh_tokens  # noqa: E402

logger = logging.getLogger("purge_refresh_tokens")


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Purge refresh tokens expired for longer than a grace period")
    parser.add_argument("--older-than-days", type=int, default=30, help="Grace period after expiry, in days")
    return parser.parse_args()


def main() -> int:
    args = parse_args()
    settings = get_settings()
    setup_logging(settings.LOG_LEVEL)
    if args.older_than_days < 0:
        logger.error("--older-than-days must not be negative")
        return 2

    engine = build_engine(settings)
    db = build_session_factory(engine)()
    try:
        deleted = purge_dead_refresh_tokens(db, utcnow(), dt.timedelta(days=args.older_than_days))
    finally:
        db.close()
        engine.dispose()
    print(f"Deleted {deleted} refresh tokens")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
