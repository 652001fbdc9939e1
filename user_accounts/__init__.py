"""
user_accounts: account records with a balance and a status flag.

Layers:
  - domain:          User entity, UserProfile view, UserRepository port
  - application:     one use case per operation + profile mapper
  - infrastructure:  Postgres / in-memory repositories, DB pool
  - crosscutting:    settings, JSON logging, typed exceptions
  - container:       composition root
"""

__version__ = "0.1.0"
