from billing_engine.api.routes.health import router as health_router

__all__ = ["health_router"]
