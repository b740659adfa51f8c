"""
EcoPulse AI Sustainability Analyst
Main FastAPI Entry Point
"""
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ecopulse import __version__
from ecopulse.api.routes import router as api_router
from ecopulse.config.settings import get_settings

# Configure logging
logging.basicConfig(
    level=get_settings().log_level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

# Create FastAPI application
app = FastAPI(
    title="EcoPulse AI Sustainability Analyst",
    description="Campus energy dashboard with AI sustainability analysis and next-day renewable forecasts",
    version=__version__,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Adjust this in production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router)


# Health check endpoint
@app.get("/health")
async def health_check():
    return {"status": "healthy", "version": __version__}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("ecopulse.main:app", host="0.0.0.0", port=8000, reload=True)
