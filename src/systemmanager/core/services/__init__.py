"""Servicios del Core: validación y pipeline de ejecución de requests."""
