"""Xadrez — a two-player chess rule engine with console and Qt front ends."""

__version__ = "0.1.0"
