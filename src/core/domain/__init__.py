"""Modelos y entidades del dominio.

Por qué:
- Aquí viven las estructuras de datos puras y estrictas (Pydantic v2, dataclasses).
- El dominio no conoce httpx, CLI ni event loops: solo el descriptor de
  request, los esquemas del wire, los resultados y la taxonomía de errores.
"""
