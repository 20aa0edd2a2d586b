import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from resume_form.app.api.routes.contact import router as contact_router
from resume_form.app.web.pages import router as web_pages_router

log = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        None

    Returns:
        FastAPI: The configured FastAPI application instance.

    Notes:
        1. Initialize the FastAPI application with the title "Resume Form".
        2. Add CORS middleware to allow requests from any origin (for development only).
        3. Define a health check endpoint at "/health" that returns a JSON object with status "ok".
        4. Include the contact API router under "/api/contact".
        5. Include the web pages router serving the form and the preview.

    """
    _msg = "Creating FastAPI application"
    log.debug(_msg)

    app = FastAPI(title="Resume Form")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        """Report that the application is up."""
        return {"status": "ok"}

    app.include_router(contact_router, prefix="/api/contact", tags=["contact"])
    app.include_router(web_pages_router)

    _msg = "FastAPI application created successfully"
    log.debug(_msg)
    return app


app = create_app()
