from .normalize import normalize_series, normalize_series_list

__all__ = ["normalize_series", "normalize_series_list"]
