import argparse
import asyncio
import sys
from pathlib import Path

BACKEND_ROOT = Path(__file__).resolve().parents[1]


async def recreate_db(db_path: Path):
    # Remove existing SQLite file
    if db_path.exists():
        db_path.unlink()

    from app.database import build_engine, create_tables

    engine = build_engine(f"sqlite+aiosqlite:///{db_path}")
    try:
        await create_tables(engine)
    finally:
        await engine.dispose()


def main(argv=None):
    sys.path.insert(0, str(BACKEND_ROOT))
    from app.config import settings

    parser = argparse.ArgumentParser(description="Drop and recreate the blog database")
    parser.add_argument("--path", default=settings.DATABASE_PATH, help="SQLite database file")
    args = parser.parse_args(argv)
    db_path = Path(args.path).resolve()
    asyncio.run(recreate_db(db_path))
    print(f"Database recreated at {db_path}.")


if __name__ == '__main__':
    main()
