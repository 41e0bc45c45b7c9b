"""CLI package namespace.

Keep package import side-effect free so submodules can be imported independently.
"""

__all__ = []
