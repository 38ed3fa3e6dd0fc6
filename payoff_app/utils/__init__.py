"""
Utility functions module.

Rounding and display formatting shared by the curve builder and the
summary metrics.
"""
