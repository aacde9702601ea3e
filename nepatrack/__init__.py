"""
Core package for the NepaTrack project dashboard.

Submodules provide project loading, filtering, and user interface rendering
helpers that are orchestrated by the top-level `app.py`.
"""
