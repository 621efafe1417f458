"""
Shared, cross-cutting code for the API.

`core/` should contain small building blocks that multiple resources use
(DB wiring, settings, paging, the repository base). Keep resource-specific
SQL and business logic in the corresponding package (e.g. `projects/`).
"""
