from .flamegraph import FlameGraphReporter

__all__ = ["FlameGraphReporter"]
