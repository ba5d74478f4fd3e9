"""Vector math, containers, logging, frame timing, JSON, UI batching and model bounds for a voxel game engine."""

__version__ = "0.1.0"

__all__ = [
    "vector",
    "numeric",
    "matrix",
    "trie",
    "linkedlist",
    "logs",
    "fps",
    "jsonutil",
    "uigeometry",
    "uibatch",
    "bounds",
]