"""pytest-bdd step definitions and lifecycle hooks.

Runners load these modules as pytest plugins (``-p``), so the step
fixtures they define are visible to every collected feature.
"""
