"""StratBot: conversational analysis of World Bank economic indicators."""

__version__ = "0.1.0"
