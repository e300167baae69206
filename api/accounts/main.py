from core.app import create_service_app

from . import clients, repository, router

app = create_service_app(
    "accounts",
    schema_sql=repository.SCHEMA_SQL,
    routers=[router.router],
    default_db="accounts.db",
    on_startup=clients.attach_clients,
)
