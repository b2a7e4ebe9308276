"""
Core package for the gym dashboard application.

Submodules provide the shell state (navigation, active tab, overlays), demo
data and filters, and user interface rendering helpers that are orchestrated
by the top-level `app.py`.
"""
