from fastapi import Depends, FastAPI

from dealer_credit.entrypoints.http.auth import require_api_key, warn_if_auth_disabled
from dealer_credit.entrypoints.http.exception_handlers import register_exception_handlers
from dealer_credit.entrypoints.http.routes.credit import router as credit_router
from dealer_credit.entrypoints.http.routes.health import router as health_router
from dealer_credit.entrypoints.http.routes.leasing import router as leasing_router
from dealer_credit.infra.logging import configure_logging


def build_app() -> FastAPI:
    configure_logging()

    app = FastAPI(
        title="Dealer Credit API",
        description="""
        Credit and installment calculations for a motorcycle and car dealership.

        ## Features
        - Simulate flat-rate vehicle credit with policy defaults
        - Price a simulation with a leasing partner's published rate
        - Compare installments across every offered tenor
        - Reducing-balance amortization tables

        ## Authentication
        Send the shared API key in the `X-API-Key` header. When the server
        has no `API_KEY` configured, authentication is disabled.

        ## Money
        All amounts are whole Rupiah sent and returned as strings.

        ## Error Handling
        All errors return structured JSON responses with error codes.
        Validation failures list every failed rule, not just the first.
        """,
        version="0.1.0",
        docs_url="/docs",  # Swagger UI
        redoc_url="/redoc",  # ReDoc alternative
        openapi_url="/openapi.json",  # OpenAPI schema
        contact={
            "name": "Dealer Credit Team",
            "email": "dev@dealer-credit.example",
        },
        license_info={
            "name": "Proprietary",
        },
    )

    register_exception_handlers(app)
    warn_if_auth_disabled()

    app.include_router(health_router)
    app.include_router(credit_router, prefix="/v1", dependencies=[Depends(require_api_key)])
    app.include_router(leasing_router, prefix="/v1", dependencies=[Depends(require_api_key)])

    return app


app = build_app()
