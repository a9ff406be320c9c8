import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from highground.config import settings
from highground.models.request import PlaceSearchRequest
from highground.models.response import PlaceSearchResponse
from highground.services.discovery import PlaceDiscoveryService

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(
    title="HighGround API",
    description="Nearby high-ground discovery for emergency navigation",
    version=settings.api_version,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # In production, specify exact origins
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

discovery_service = PlaceDiscoveryService()


@app.post(
    "/api/v1/places/mid-altitude",
    response_model=PlaceSearchResponse,
    response_model_exclude_none=True,
)
async def find_mid_altitude_places(request: PlaceSearchRequest):
    """Suggest up to three mid-altitude places within 5 km of the user"""
    return await discovery_service.find_places(request.latitude, request.longitude)


@app.get("/health")
async def health_check():
    """Health check"""
    return {"status": "healthy", "version": settings.api_version}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
