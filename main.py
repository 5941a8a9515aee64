"""Main entry point for the PsychoScore API.

Runs the FastAPI application under uvicorn with the configured host and port.
"""

import uvicorn

from psychoscore.core.config import get_settings

settings = get_settings()

if __name__ == "__main__":
    uvicorn.run(
        "psychoscore.api.main:app",
        host=settings.APP_HOST,
        port=settings.APP_PORT,
        reload=settings.is_development(),
        log_config=None,  # Use our custom logging
        access_log=False,  # Handled by middleware
        workers=1 if settings.is_development() else 4,
    )
