import asyncio
from loguru import logger

from habit_tracker.db import get_session, init_db
from habit_tracker.repositories.sql import SqlHabitRepository
from habit_tracker.services.summary_service import SummaryService

async def main():
    await init_db()
    async with get_session() as session:
        rows = await SummaryService(SqlHabitRepository(session)).summarize()

    if not rows:
        logger.info("No days recorded yet")
        return

    for row in rows:
        print(f"{row.date.date().isoformat()}  {row.completed_count}/{row.available_count}")

if __name__ == "__main__":
    asyncio.run(main())
