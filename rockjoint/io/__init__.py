from .txt import read_segments_txt

__all__ = ["read_segments_txt"]
