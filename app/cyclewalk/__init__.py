"""cyclewalk - cycle-aware filesystem tree walker.

Walks directory trees while following symbolic links and reports every
link or directory that leads back to an already visited location.
"""

__version__ = "0.1.0"
