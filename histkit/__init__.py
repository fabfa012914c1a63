"""Building blocks for shell history tools: durations, line editing, list formatting, statistics and ranking."""

__version__ = "0.1.0"
__all__ = ["cursor", "duration", "history", "history_list", "ranking", "stats"]