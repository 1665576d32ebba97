from .normalize import normalize_entries

__all__ = ["normalize_entries"]
