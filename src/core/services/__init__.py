"""Servicios del Core: clasificación de páginas y orquestación de consultas."""
