"""
Main application entry point for the TravelGlide reservation API.
"""

import uvicorn

from .api.app import create_app
from .config import get_settings
from .utils.event_log import set_log_path

settings = get_settings()
set_log_path(settings.event_log_path)

# Create the FastAPI application
app = create_app(settings)

if __name__ == "__main__":
    uvicorn.run(
        "travelglide.main:app",
        host="0.0.0.0",
        port=5000,
        reload=True
    )
