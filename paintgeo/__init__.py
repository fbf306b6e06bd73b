"""paintgeo — 2D geometry core for the drawing canvas.

The canvas tools (fill, select, transform) call into this package for
three numerical questions:

  angles   — signed angle at a shared vertex between two rays
  polygon  — is a point inside a closed outline (angular winding test)
  lines    — where do two infinite lines meet

Everything lives under ``paintgeo.geometry``; ``paintgeo.config`` holds
the tunable rules and ``python -m paintgeo`` is a thin CLI over both.
"""
