"""depgraph: static import/require dependency graphs for JS/TS projects."""

__version__ = "1.0.0"
