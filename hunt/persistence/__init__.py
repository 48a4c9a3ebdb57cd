"""Persistence layer: table definitions, mappers and repositories."""
