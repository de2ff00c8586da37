# reachability/visualization/__init__.py

from .observers import EfficientObserver, ExperimentObserver, DebugObserver, make_observer

__all__ = ["EfficientObserver", "ExperimentObserver", "DebugObserver", "make_observer"]
