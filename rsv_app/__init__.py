"""
RSV App - RSI / Stochastics / VWAP-band Entry Signal Engine

Evaluates, once per closed price bar, whether RSI extremes, a Stochastics %K
threshold cross and the EMA location relative to the VWAP band jointly
license a long or short entry, and derives ATR-based stop and target prices.
"""

__version__ = "0.1.0"
__author__ = "RSV Team"
