from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from portal_tool import __version__
from portal_tool.config.settings import get_settings
from portal_tool.config.log_setup import setup_logger
from portal_tool.api.portal_api import router as portal_router

settings = get_settings()
logger = setup_logger(settings.log_level)

app = FastAPI(
    title=settings.api_title,
    description="Member and pricing state resolution for the membership portal",
    version=__version__
)

# Enable CORS for frontend development
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include portal resolution API
app.include_router(portal_router)

logger.info("Portal Tool API %s initialised", __version__)


@app.get("/")
async def root():
    return {"status": "online", "message": "Portal Tool API Active", "version": __version__}
