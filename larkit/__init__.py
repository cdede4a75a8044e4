"""Card builder and event crypto helpers for Lark/Feishu bots."""

__version__ = "0.1.0"