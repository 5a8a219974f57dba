"""
Custom exceptions for the application.
"""


class DependencyNotConfiguredError(RuntimeError):
    """
    Raised when a controller asks for a collaborator (repository,
    schedule service) that the app factory did not register.
    """

    def __init__(self, name: str):
        super().__init__(f"Dependency '{name}' is not configured on this app")
        self.name = name
