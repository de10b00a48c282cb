"""FastAPI application for the grid city mobility simulator."""

import logging
import os

from dotenv import load_dotenv
load_dotenv(os.path.join(os.path.dirname(__file__), "..", ".env"))

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.routes import housing, scenarios, simulations

logging.basicConfig(
    level=os.environ.get("MOBILITY_LOG_LEVEL", "INFO"),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(
    title="Grid City Mobility Simulator",
    description=(
        "API for simulating the daily mobility of a synthetic population on a "
        "grid city. Accepts a road and building layout, checks that it can "
        "house, employ and feed the population, routes every resident's "
        "home-work-food-home day and returns distance, time and emissions."
    ),
    version="0.1.0",
)

# CORS middleware - allow localhost origins for development
app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://localhost:3000",
        "http://localhost:5173",
        "http://127.0.0.1:3000",
        "http://127.0.0.1:5173",
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include REST API routers
app.include_router(simulations.router, prefix="/api")
app.include_router(housing.router, prefix="/api")
app.include_router(scenarios.router, prefix="/api")


@app.get("/api/health")
async def health_check() -> dict:
    """Health check endpoint."""
    return {
        "status": "ok",
        "scenarios_loaded": len(scenarios.PREDEFINED_SCENARIOS),
    }
