from .units import UnitConstants

__all__ = ['UnitConstants']
