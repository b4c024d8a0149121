"""Core domain: pagination protocol, settings, exceptions, model base."""
