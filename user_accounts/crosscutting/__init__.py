"""Cross-cutting concerns: settings, structured logging, typed exceptions."""
