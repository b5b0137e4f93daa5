import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from leavedesk.core.config import settings
from leavedesk.db.init_db import init_db
from leavedesk.db.session import SessionLocal, engine
from leavedesk.services.auth import Authenticator
from leavedesk.services.lifecycle import LeaveRequestManager
from leavedesk.api.endpoints import auth, leave_requests, approvals, reports

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.INIT_DB_ON_STARTUP:
        logger.info("Initializing leave request store")
        init_db(engine, SessionLocal, seed=settings.SEED_DEFAULT_USERS)
    yield


app = FastAPI(
    title="Leave Request Manager",
    description="Submit, review, approve and export employee leave requests",
    version="1.0.0",
    lifespan=lifespan
)

# One session identity per process
app.state.authenticator = Authenticator(SessionLocal)
app.state.leave_manager = LeaveRequestManager(SessionLocal, max_days=settings.MAX_LEAVE_DAYS)


# Include routers
app.include_router(auth.router)
app.include_router(leave_requests.router)
app.include_router(approvals.router)
app.include_router(reports.router)


@app.get("/")
def root():
    return {
        "message": "Leave Request Manager API",
        "login": "/auth/login",
        "docs": "/docs",
        "version": "1.0.0"
    }


@app.get("/health")
def health_check():
    return {"status": "healthy"}


def run():
    """Console entry point: serve on the local machine with a single worker."""
    import uvicorn

    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())
