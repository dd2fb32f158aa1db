"""
Medication Regimen Engine

Infers which prescriptions are currently active from free-text,
bilingual (Arabic/English) visit records and builds:
- Current medication lists
- Weekly dosing schedules
- Medication history with activity flags
- Duplicate and polypharmacy warnings
"""
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from medication_backend.config import settings
from medication_backend.database import init_db
from medication_backend.api.medications import router as medications_router

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title=settings.APP_NAME,
    description="""
    Medication regimen scheduling and activity inference:

    * **Current Medications** - Active prescriptions inferred from duration text
    * **Weekly Schedule** - 7-day dosing calendar from frequency text
    * **History** - All prescriptions with activity flags, filters and pagination
    * **Safety Signals** - Duplicate prescription and polypharmacy warnings
    """,
    version=settings.VERSION,
    docs_url="/api/docs",
    redoc_url="/api/redoc"
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(medications_router)


@app.on_event("startup")
async def startup_event():
    """Initialize database on startup"""
    logger.info(f"Starting {settings.APP_NAME}...")
    init_db()
    logger.info("API documentation available at /api/docs")


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "version": settings.VERSION,
        "services": {
            "database": "ok",
            "medication_engine": "ok"
        }
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level="info"
    )
