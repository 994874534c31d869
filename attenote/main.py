# /attenote/main.py

import logging
import os

# --- Core FastAPI Imports ---
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager

# --- Application-specific Router Imports ---
from .routers import (
    classes_router,
    students_router,
    notes_router,
    maintenance_router,
)

# --- Database Imports for Startup Logic ---
from .db.base import Base
from .db.database import engine

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)

# --- Application Lifecycle Management ---
@asynccontextmanager
async def lifespan(app: FastAPI):
    # Production schemas are managed by Alembic; this only bootstraps a
    # fresh local SQLite database.
    Base.metadata.create_all(bind=engine)
    yield

# --- FastAPI Application Instance Creation ---
app = FastAPI(
    title="Attenote Backend API",
    description="Permanent deletes and media reclamation for the Attenote attendance and notes app.",
    version="1.0.0",
    lifespan=lifespan
)

# --- Middleware Configuration ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# --- API Router Inclusion ---
app.include_router(classes_router.router, prefix="/api/classes", tags=["Classes"])
app.include_router(students_router.router, prefix="/api/students", tags=["Students"])
app.include_router(notes_router.router, prefix="/api/notes", tags=["Notes"])
app.include_router(maintenance_router.router, prefix="/api/maintenance", tags=["Maintenance"])

# --- Root / Health Check Endpoint ---
@app.get("/", tags=["Health Check"])
async def read_root():
    """A simple health check endpoint to confirm the API is online."""
    return {"status": "Attenote Backend is running!", "version": app.version}
