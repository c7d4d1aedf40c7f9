from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from api.endpoints import router
from config import settings

# Initialize FastAPI
app = FastAPI(
    title="Medication Search API",
    description="API for searching medications by name or symptom and flagging side-effect conflicts",
    version="1.0.0"
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Restrict this in production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Search, catalog and user panel routes
app.include_router(router, prefix="/api/v1")

# Serve with reload only while debugging
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "main:app",
        host=settings.api_host,
        port=settings.api_port,
        log_level=settings.log_level.lower(),
        reload=settings.debug_mode
    )
