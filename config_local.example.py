# config_local.example.py

"""
Example local overrides.

Usage:
  1) Copy this file to `config_local.py`
  2) Adjust values for your machine
  3) Never commit `config_local.py` (it is gitignored)

Prefer `.env` for anything path-like. This file is for simple switches.
"""

# Example: only save when the app exits
# AUTOSAVE = False
