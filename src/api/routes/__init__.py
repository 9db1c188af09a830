"""API route modules."""

from src.api.routes.auth import router as auth_router
from src.api.routes.customers import router as customers_router
from src.api.routes.dashboard import router as dashboard_router
from src.api.routes.health import router as health_router
from src.api.routes.invoices import router as invoices_router
from src.api.routes.orders import router as orders_router
from src.api.routes.reports import router as reports_router

__all__ = [
    "health_router",
    "auth_router",
    "customers_router",
    "orders_router",
    "invoices_router",
    "reports_router",
    "dashboard_router",
]
