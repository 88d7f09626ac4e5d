"""Connectivity services."""

from app.services.network.monitor import NetworkMonitor

__all__ = ["NetworkMonitor"]
