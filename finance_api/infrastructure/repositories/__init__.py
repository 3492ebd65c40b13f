"""Repositorios: backend `postgres` (producción) y `memory` (tests / dev)."""
