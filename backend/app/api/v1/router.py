"""
API v1 router that aggregates all endpoint routers.
All routes require authentication except health and auth endpoints.
"""

from fastapi import APIRouter, Depends
from app.api.v1.middleware import require_authentication

from app.api.v1.endpoints import (
    health,
    auth,
    clients,
    quotes,
    jobs,
    invoices,
    products,
    dashboard,
    company_profile,
    subscriptions,
)

api_router = APIRouter()

# Public routes (no authentication required)
api_router.include_router(health.router, tags=["health"])
api_router.include_router(auth.router, prefix="/auth", tags=["authentication"])

# Protected routes; endpoints also take the user to scope queries
PROTECTED_ROUTERS = (
    (clients.router, "/clients", "clients"),
    (quotes.router, "/quotes", "quotes"),
    (jobs.router, "/jobs", "jobs"),
    (invoices.router, "/invoices", "invoices"),
    (products.router, "/products", "products"),
    (dashboard.router, "/dashboard", "dashboard"),
    (company_profile.router, "/settings/company", "settings"),
    (subscriptions.router, "/subscriptions", "subscriptions"),
)

for endpoint_router, prefix, tag in PROTECTED_ROUTERS:
    api_router.include_router(
        endpoint_router,
        prefix=prefix,
        tags=[tag],
        dependencies=[Depends(require_authentication)],
    )
