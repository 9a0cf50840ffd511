"""
Line Bridge — Message-to-Point Translation for Time-Series Stores

Converts loosely-structured event messages into line protocol points
and submits them to an InfluxDB-compatible store.
"""

__version__ = "1.0.0"
