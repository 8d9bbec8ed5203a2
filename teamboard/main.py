"""Teamboard FastAPI application."""
import logging

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from teamboard.config import settings
from teamboard.database import Base, engine
from teamboard.exceptions import register_exception_handlers
from teamboard.api.v1 import auth, columns, projects, tasks, workspaces

# Configure logging
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger("teamboard")

Base.metadata.create_all(bind=engine)

app = FastAPI(
    title=f"{settings.APP_NAME} API",
    description="Workspaces, projects and kanban boards",
    version=settings.APP_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(auth.router, prefix="/api/auth")
app.include_router(workspaces.router, prefix="/api/workspaces")
app.include_router(projects.router, prefix="/api/workspaces")
app.include_router(columns.router, prefix="/api")
app.include_router(tasks.router, prefix="/api")

logger.info(f"Starting {settings.APP_NAME} API {settings.APP_VERSION}")


@app.get("/")
def root():
    """Root endpoint with server info."""
    return {
        "name": f"{settings.APP_NAME} API",
        "version": settings.APP_VERSION,
        "docs": "/docs",
    }


@app.get("/health")
def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}


def run():
    """Console entry point: serve the API with uvicorn."""
    uvicorn.run("teamboard.main:app", host=settings.HOST, port=settings.PORT, reload=settings.DEBUG)


if __name__ == "__main__":
    run()
