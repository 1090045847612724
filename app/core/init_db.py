from app.core.db import engine
from app.models import Base


async def init_db() -> None:
    """
    Create the `weather_data` table if it does not exist yet.

    Runs on application startup. Schema migrations are not managed here;
    `create_all` never alters an existing table.
    """
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
