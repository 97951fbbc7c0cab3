"""
KuberX - Financial Reasoning Engine

Turns a personal financial profile into scores, salary allocations,
emergency runway, goal SIPs, wealth projections and purchase verdicts.
"""

__version__ = "0.1.0"
