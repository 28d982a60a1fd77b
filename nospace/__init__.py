"""nospace package: replay a ``cd``/``ls`` terminal transcript into a filesystem tree
and report directory sizes.

This package exposes submodules directly; keep __all__ empty to avoid static checks
that expect module-level symbols.
"""

__all__: list[str] = []
