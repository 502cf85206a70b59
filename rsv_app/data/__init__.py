"""
Indicator data and instrument module.

Holds the rolling indicator store fed by the host's indicator library and
the instrument price grid used to round stop and target distances.
"""
