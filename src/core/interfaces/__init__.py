"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) que cumplen los adaptadores y el adaptador diferido.
- Permite invertir dependencias: el Core depende de abstracciones.
"""
