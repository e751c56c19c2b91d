"""Kernel value-object types — public re-export surface.

Modules:
  flaggable.py — FlaggableRef
"""

from mp_featuring.kernel.types.flaggable import FlaggableRef

__all__ = ["FlaggableRef"]
