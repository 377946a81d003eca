from importlib import metadata

from fastapi import FastAPI

from src.txguard.api.router import router as appointments_router

try:
    version = metadata.version("txguard")
except metadata.PackageNotFoundError:
    version = "0.1.0"

app = FastAPI(
    title="txguard sample API",
    version=version,
    description="Appointments service exercised by the transactional test harness.",
)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}


app.include_router(appointments_router, prefix="/api", tags=["appointments"])
