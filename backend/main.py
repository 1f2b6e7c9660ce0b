from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from config import settings
from api.dishes import router as dishes_router
from api.orders import router as orders_router
from core.context import init_context
from core.errors import EscapedJSONResponse, register_error_handlers
import logging

# Configure logging
logging.basicConfig(level=logging.DEBUG if settings.debug else settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.app_name,
    description="Restaurant dishes and delivery orders",
    version=settings.version,
    default_response_class=EscapedJSONResponse
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

# Include routers
app.include_router(dishes_router, prefix=settings.api_prefix, tags=["dishes"])
app.include_router(orders_router, prefix=settings.api_prefix, tags=["orders"])

# Load stores
init_context(settings)

@app.get("/")
async def root():
    return {"message": f"{settings.app_name} running"}

@app.get("/health")
async def health_check():
    return {"status": "healthy", "version": settings.version}
