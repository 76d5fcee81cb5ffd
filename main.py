from fastapi.middleware.cors import CORSMiddleware
import uvicorn
import logging

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from config import settings
from routers import items
from services.inventory_service import Inventory, InventoryError

# Configure logging
logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title=settings.API_TITLE,
    version=settings.API_VERSION,
    description=settings.API_DESCRIPTION
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# The inventory lives for as long as the app does
app.state.inventory = Inventory()

# Include routers
app.include_router(items.router)


@app.exception_handler(InventoryError)
async def inventory_error_handler(request: Request, exc: InventoryError):
    logger.warning(f"{request.method} {request.url.path} -> {exc.status_code} {exc.message}")
    return PlainTextResponse(exc.message, status_code=exc.status_code)


@app.get("/")
async def root():
    return {
        "message": f"Welcome to {settings.API_TITLE}",
        "version": settings.API_VERSION,
        "description": settings.API_DESCRIPTION,
        "endpoints": {
            "health": "/health",
            "get_item": "/get-item/{item_id}",
            "create_item": "/create-item/{item_id}",
            "update_item": "/update-item/{item_id}",
            "delete_item": "/delete-item/{item_id}"
        }
    }


@app.get("/health")
async def health_check():
    return {
        "status": "healthy",
        "service": settings.API_TITLE,
        "version": settings.API_VERSION
    }


if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL
    )
