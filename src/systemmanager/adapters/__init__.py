"""Adaptadores de I/O (transporte HTTP)."""
