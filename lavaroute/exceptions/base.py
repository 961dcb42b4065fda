from __future__ import annotations


class LavaRouteException(Exception):
    """Base exception for errors in the library"""
