from core.app import create_service_app

from . import repository, router

app = create_service_app(
    "cards",
    schema_sql=repository.SCHEMA_SQL,
    routers=[router.router],
    default_db="cards.db",
)
