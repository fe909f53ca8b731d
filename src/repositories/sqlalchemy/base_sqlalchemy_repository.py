from abc import ABC
from datetime import datetime
from typing import Generic, List, Sequence, TypeVar

from sqlalchemy import BigInteger, DateTime, String, Text, ForeignKey, Engine, create_engine
from sqlalchemy.dialects.postgresql import insert as postgres_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship, Session

class Base(DeclarativeBase):
    ...

class ChannelTable(Base):
    __tablename__ = 'channels'
    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    title: Mapped[str] = mapped_column(String(512))
    custom_url: Mapped[str | None] = mapped_column(String(512))
    thumbnail_url: Mapped[str | None] = mapped_column(Text)
    country: Mapped[str | None] = mapped_column(String(8))
    etag: Mapped[str | None] = mapped_column(String(128))

    stats: Mapped["ChannelStatsTable"] = relationship(
        back_populates="channel",
        cascade="all, delete-orphan",
    )

class ChannelStatsTable(Base):
    __tablename__ = 'channel_stats'
    channel_id: Mapped[str] = mapped_column(String(64),
                                            ForeignKey("channels.id"),
                                            primary_key=True)
    subscriber_count: Mapped[int | None] = mapped_column(BigInteger)
    view_count: Mapped[int | None] = mapped_column(BigInteger)
    video_count: Mapped[int | None] = mapped_column(BigInteger)
    channel: Mapped["ChannelTable"] = relationship(
        back_populates="stats"
    )

class VideoTable(Base):
    __tablename__ = 'videos'
    video_id: Mapped[str] = mapped_column(String(64), primary_key=True)
    title: Mapped[str] = mapped_column(String(512))
    published_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))


def init_db(engine: Engine) -> None:
    Base.metadata.create_all(engine)


T = TypeVar("T", bound=Base)


class BaseSqlAlchemyRepository(ABC, Generic[T]):
    def __init__(self, engine: Engine):
        self.engine = engine

    def _insert(self, table: type[T]):
        if self.engine.dialect.name == "sqlite":
            return sqlite_insert(table)
        return postgres_insert(table)

    def _upsert_statement(self, table: type[T], entities: List[dict], index_elements: Sequence[str]):
        """Insert rows, overwriting every non-key column when the key already exists."""
        stmt = self._insert(table).values(entities)
        return stmt.on_conflict_do_update(
            index_elements=index_elements,
            set_={
                column.name: stmt.excluded[column.name]
                for column in table.__table__.columns
                if column.name not in index_elements
            },
        )

    def _upsert(self, table: type[T], entities: List[dict], index_elements: Sequence[str]) -> int:
        if not entities:
            return 0
        with Session(self.engine) as session:
            session.execute(self._upsert_statement(table, entities, index_elements))
            session.commit()
            return len(entities)


if __name__ == "__main__":
    import os
    from dotenv import load_dotenv

    load_dotenv()
    engine = create_engine(os.environ["DATABASE_URI"], echo=True)
    init_db(engine)
