"""
Shared, cross-cutting code for the accounts, cards and loans services.

`core/` should contain small building blocks that every service uses
(DB wiring, settings, logging, correlation ids, the downstream client). Keep
service-specific SQL and business logic in the corresponding service package
(e.g. `cards/`).
"""
