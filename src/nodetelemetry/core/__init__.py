"""Core domain: models, parsers, flattening and encoding."""
