"""Demo — консольная демонстрация обобщённого суммирования."""

from .main import format_report, main

__all__ = [
    "format_report",
    "main",
]
