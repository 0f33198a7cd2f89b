"""Utility layer errors.

These signal broken wiring found at startup, so nothing catches them.
"""


class UtilError(Exception):
    """Base utility error."""

    pass


class ConfigurationError(UtilError):
    """A setting holds a value the service cannot run with."""

    pass


class DependencyInjectionError(UtilError):
    """The container cannot be assembled."""

    def __init__(self, component: str, kind: str):
        self.component = component
        self.kind = kind
        super().__init__(f"No {kind} implementation for {component}")
