"""FastAPI application entry point."""

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from fieldform import __version__
from fieldform.config import Settings, get_settings
from fieldform.routers import analytics, auth, forms, submissions, tasks, work_orders
from fieldform.services.notifications import NotificationService
from fieldform.stores import create_stores


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build an application with its own, freshly seeded stores."""
    settings = settings or get_settings()
    
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    
    app = FastAPI(
        title=settings.app_name,
        description="Custom data-collection forms, field task scheduling, work orders and submission review",
        version=__version__,
        debug=settings.debug,
    )
    
    app.state.settings = settings
    app.state.stores = create_stores(settings)
    app.state.notifier = NotificationService(settings)
    
    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    
    # Include routers
    app.include_router(auth.router, prefix="/api/auth", tags=["Authentication"])
    app.include_router(forms.router, prefix="/api/forms", tags=["Forms"])
    app.include_router(submissions.router, prefix="/api/submissions", tags=["Submissions"])
    app.include_router(tasks.router, prefix="/api/scheduling/tasks", tags=["Scheduling"])
    app.include_router(work_orders.router, prefix="/api/work-orders", tags=["Work Orders"])
    app.include_router(analytics.router, prefix="/api/analytics", tags=["Analytics"])
    
    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy", "service": "fieldform-backend"}
    
    @app.get("/")
    async def root():
        """Root endpoint."""
        return {
            "message": "FieldForm/EDGE Audit API",
            "docs": "/docs",
            "health": "/health",
        }
    
    return app


app = create_app()
