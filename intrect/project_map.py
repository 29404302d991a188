# Module: project navigation map.
# Main: PROJECT_MAP string with module guide.
# Example: print(PROJECT_MAP)

PROJECT_MAP = """
Core modules (no UI toolkit imports)
- intrect/core/int32.py: 32-bit wrap / clamp / float clip helpers
- intrect/core/bounds.py: overflow-safe algorithms on (x, y, width, height) tuples
- intrect/core/models.py: Point, Size, Rectangle (immutable), MutableRectangle (in place)
- intrect/core/config.py: runtime flags (DEBUG_CLAMP)

UI collaborators
- intrect/core/geometry.py: QRect/QPoint/QSize conversion + virtual_geometry()
- intrect/core/win32.py: LockWindowUpdate + scroll position keep

Typical edits
- Edge-case policy of an operation: intrect/core/bounds.py
- Public method names / constructors: intrect/core/models.py
- Clamp tracing: intrect/core/config.py (INTRECT_DEBUG_CLAMP=1)
"""
