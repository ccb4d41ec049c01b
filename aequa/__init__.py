"""Distributed-validator node parts: event bus, cluster-lock loading, service lifecycle, logging, metrics and trace ids."""

__version__ = "0.1.0"
__all__ = ["bus", "config", "lifecycle", "logger", "metrics", "trace"]