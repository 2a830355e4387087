"""Request-level dependencies and exception handlers."""
