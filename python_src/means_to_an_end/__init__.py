"""
Price tracking server: https://protohackers.com/problem/2

Clients stream 9 byte insert/query frames, each connection keeps its own prices.
"""

__version__ = '0.1.0'
