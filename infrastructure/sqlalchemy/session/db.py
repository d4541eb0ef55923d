import os

from dotenv import load_dotenv
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

load_dotenv()

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///tasks.db")

Base = declarative_base()


def build_engine(url: str = DATABASE_URL) -> Engine:
    kwargs: dict = {}
    if url.startswith("sqlite"):
        # Las rutas de FastAPI corren en un threadpool
        kwargs["connect_args"] = {"check_same_thread": False}
        if url in ("sqlite://", "sqlite:///:memory:"):
            # Una BDD en memoria solo existe dentro de su conexión
            kwargs["poolclass"] = StaticPool
    return create_engine(url, **kwargs)


engine = build_engine()
SessionLocal = sessionmaker(bind=engine, expire_on_commit=False)


def init_db(bind: Engine = engine) -> None:
    Base.metadata.create_all(bind=bind)
