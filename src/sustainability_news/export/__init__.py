"""Persistence, run report and the command-line entry point."""

__all__ = ["news_exporter", "report", "store"]
