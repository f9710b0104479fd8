"""
Top‑level package for the Event Manager service.

This file makes ``learn`` a Python package so that modules within
``event`` can be imported using fully qualified names like
``learn.event.main``.  The package name is also the scan root used by
the ``public`` documentation group: only endpoints defined somewhere
under ``learn`` appear in that group.

The package provides no public exports; all functionality lives in
submodules under ``event``.
"""

__all__ = []
