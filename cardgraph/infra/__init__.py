"""Infrastructure: database engine, logging, metrics."""
