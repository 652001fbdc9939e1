"""
Infrastructure layer: adapters for the domain ports (DB pool, repositories).

Nothing in domain/application imports from here; wiring happens in
user_accounts.container.
"""
