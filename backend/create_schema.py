"""Create all tables for the configured DATABASE_URL and exit.

Run from the backend directory: python create_schema.py
"""

import asyncio
import sys

from core.config import get_settings
from core.database import dispose_database, get_database_manager, init_database
from core.logging import setup_logging


async def main() -> int:
    settings = get_settings()
    setup_logging(settings)
    await init_database(settings.database_url, echo=settings.db_echo)
    try:
        await get_database_manager().create_schema()
    finally:
        await dispose_database()
    print("schema ok")
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
