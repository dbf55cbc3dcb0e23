"""rogueboard: turn-based grid board simulation with procedural levels."""

__version__ = "0.1.0"
