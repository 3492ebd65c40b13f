"""Adaptadores de infraestructura: pool Postgres y repositorios."""
