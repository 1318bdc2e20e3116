"""Composition root for the petition signatures service.

Selects stub or production adapters from configuration and hands the
API layer ready-built services, so neither API nor application code
imports infrastructure directly.
"""
