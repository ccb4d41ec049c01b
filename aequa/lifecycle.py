"""Ordered start-up and shutdown of services."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Service(ABC):
    """Something that can be started and stopped."""

    name: str = ""

    @abstractmethod
    def start(self) -> None:
        """Start the service; raise on failure."""

    @abstractmethod
    def stop(self) -> None:
        """Stop the service; raise on failure."""


def _raise_joined(message: str, errors: list[Exception]) -> None:
    if not errors:
        return
    if len(errors) == 1:
        raise errors[0]
    raise ExceptionGroup(message, errors)


class Manager:
    """Starts services in order and stops them in reverse order."""

    def __init__(self) -> None:
        self._services: list[Service] = []

    def add(self, service: Service) -> None:
        """Register a service; services start in the order they are added."""
        self._services.append(service)

    def start_all(self) -> None:
        """Start every service in order.

        If one fails, the already started services are stopped in reverse
        order. The start error is raised alone, or together with any stop
        errors as an ExceptionGroup.
        """
        started: list[Service] = []
        for service in self._services:
            try:
                service.start()
            except Exception as start_err:
                errors: list[Exception] = [start_err]
                for running in reversed(started):
                    try:
                        running.stop()
                    except Exception as stop_err:
                        errors.append(stop_err)
                _raise_joined("start failed", errors)
            started.append(service)

    def stop_all(self) -> None:
        """Stop every service in reverse order, raising all stop errors together."""
        errors: list[Exception] = []
        for service in reversed(self._services):
            try:
                service.stop()
            except Exception as err:
                errors.append(err)
        _raise_joined("stop failed", errors)