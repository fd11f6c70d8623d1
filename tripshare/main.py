import logging
from logging.handlers import RotatingFileHandler
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager

from tripshare.core import config
from tripshare.core.database import Database
from tripshare.core.errors import register_error_handlers
from tripshare.api.routers import auth, marks, points, trip_profile, trips, users

logger = logging.getLogger("tripshare_server")


def setup_logging(level: str = config.LOG_LEVEL, logfile: str | None = config.LOG_FILE) -> None:
    logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO))
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    if not logfile or any(isinstance(h, RotatingFileHandler) for h in logger.handlers):
        return
    handler = RotatingFileHandler(logfile, maxBytes=5 * 1024 * 1024, backupCount=3)
    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def create_app(database: Database | None = None) -> FastAPI:
    setup_logging()
    database = database or Database(config.DATABASE_URL)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        database.create_all()
        logger.info(f"Database initialized ({database.engine.url.render_as_string()}).")
        yield
        database.dispose()
        logger.info("Database connection released.")

    app = FastAPI(title="TripShare API", lifespan=lifespan)
    app.state.database = database

    register_error_handlers(app)

    # Mount routers
    app.include_router(users.router)
    app.include_router(auth.router)
    app.include_router(trips.router)
    app.include_router(points.router)
    app.include_router(trip_profile.router)
    app.include_router(marks.router)

    app.add_middleware(
        CORSMiddleware,  # type: ignore
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/")
    def read_root():
        return {"msg": "API Running"}

    @app.get("/health")
    def health_check():
        return {"status": "ok"}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=config.PORT)
