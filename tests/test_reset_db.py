from sqlalchemy import inspect
from sqlalchemy.ext.asyncio import create_async_engine

from scripts.reset_db import recreate_db


async def table_names(db_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{db_path}")
    try:
        async with engine.connect() as conn:
            return set(await conn.run_sync(lambda sync_conn: inspect(sync_conn).get_table_names()))
    finally:
        await engine.dispose()


async def test_recreate_db_creates_schema(tmp_path):
    db_path = tmp_path / "fresh.db"
    await recreate_db(db_path)
    assert db_path.exists()
    assert {"posts", "post_tags", "comments"} <= await table_names(db_path)


async def test_recreate_db_replaces_existing_file(tmp_path):
    db_path = tmp_path / "stale.db"
    db_path.write_bytes(b"not a database")
    await recreate_db(db_path)
    assert {"posts", "post_tags", "comments"} <= await table_names(db_path)
