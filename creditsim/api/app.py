"""FastAPI application entry point."""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from creditsim.api.routes import market, simulator
from creditsim.config import settings

logging.basicConfig(level=settings.log_level)

app = FastAPI(
    title="Credit Simulator",
    description="Loan amortization and borrowing capacity",
    version="0.1.0",
    debug=settings.debug,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(simulator.router)
app.include_router(market.router)


@app.get("/health")
async def health():
    return {"status": "ok"}
