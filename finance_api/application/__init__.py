"""Capa de aplicación: casos de uso y schemas de entrada/salida."""
