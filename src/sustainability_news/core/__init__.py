"""Core configuration and constants.

Import what you need from `sustainability_news.core.config` and
`sustainability_news.core.constants` to avoid heavy side effects at import time.
"""

__all__ = ["config", "constants"]
