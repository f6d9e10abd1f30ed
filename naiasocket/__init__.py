"""Unreliable, unordered UDP packet sockets for clients and servers, with a link conditioner."""

__version__ = "0.1.0"