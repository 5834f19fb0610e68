"""View modules for manual routing.

Screens are rendered by the custom router in `app.py` from the top of the
navigation stack. Each module exposes a `view()` function; add a new screen
as a module with a `view()` callable, give it a `Screen` member and register
it in `PAGE_REGISTRY` inside `app.py`.
"""
