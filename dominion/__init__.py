"""Rules engine, interactive console and scripted play for the Dominion card game."""

__version__ = "0.1.0"