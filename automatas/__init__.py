"""Cellular automata: rule 110, Langton's ant, a multi-colour tape and a Life cell."""

__version__ = "0.1.0"