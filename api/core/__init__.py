"""
Shared, cross-cutting code for the customer service.

`core/` holds the small building blocks every feature relies on (settings,
logging, DB wiring). Feature-specific SQL and request handling live in the
feature package (e.g. `customers/`).
"""
