"""Modelos, tipos y errores del dominio.

Por qué:
- Aquí viven las estructuras de datos puras y estrictas (Pydantic v2).
- El dominio no conoce HTTP, ficheros ni entropía: solo conceptos del problema.
"""
