from sqlalchemy import event
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, AsyncEngine
from sqlalchemy.orm import sessionmaker, declarative_base
from app.config import settings

DATABASE_URL = settings.database_url


def _unicode_lower(value):
    return value.lower() if value is not None else None


def install_sqlite_functions(target: AsyncEngine):
    """Replace SQLite's ASCII-only lower() on every new connection of ``target``."""

    @event.listens_for(target.sync_engine, "connect")
    def _register(dbapi_conn, connection_record):
        dbapi_conn.create_function("lower", 1, _unicode_lower, deterministic=True)


def build_engine(url: str, **kwargs) -> AsyncEngine:
    new_engine = create_async_engine(url, **kwargs)
    install_sqlite_functions(new_engine)
    return new_engine


engine = build_engine(DATABASE_URL, echo=settings.DATABASE_ECHO)
AsyncSessionLocal = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
Base = declarative_base()


async def get_db():
    async with AsyncSessionLocal() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


async def create_tables(bind: AsyncEngine | None = None):
    # models must be imported so their tables are registered on Base.metadata
    import models.post  # noqa: F401

    async with (bind or engine).begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
