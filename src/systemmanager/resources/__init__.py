"""Recursos de la API (agrupados por área)."""
