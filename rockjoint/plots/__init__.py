from .rose import plot_rose
from .tracemap import plot_tracemap

__all__ = ["plot_rose", "plot_tracemap"]
