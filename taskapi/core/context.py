"""Process-wide resources (settings, engine, session factory) bundled into one explicit object."""

from dataclasses import dataclass

from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from taskapi.core.config import Settings
from taskapi.core.database import build_engine, build_session_factory, init_db


@dataclass
class AppContext:
    """
    Runtime context shared by all requests of one application instance.

    Built once by create_app() and stored on app.state.context; dependencies
    read it from the incoming request instead of importing module globals.
    """

    settings: Settings
    engine: Engine
    session_factory: sessionmaker[Session]

    @classmethod
    def from_settings(cls, settings: Settings) -> "AppContext":
        engine = build_engine(settings.DATABASE_URL, echo=settings.DEBUG)
        return cls(
            settings=settings,
            engine=engine,
            session_factory=build_session_factory(engine),
        )

    @property
    def jwt_secret(self) -> str:
        return self.settings.JWT_SECRET.get_secret_value()

    def create_tables(self) -> None:
        init_db(self.engine)

    def dispose(self) -> None:
        self.engine.dispose()
