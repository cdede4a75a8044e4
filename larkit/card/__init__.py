"""Declarative builders for Lark/Feishu interactive message cards."""

__all__ = ["card", "elements", "i18n", "interactive", "layout", "pickers"]