"""

Exceptions raised by the FAM client

"""

from .settings import MISSING_REQUIREMENTS


class FamException(Exception):
    """Base class for all FAM client errors"""


class ConfigurationError(FamException):
    """A model was asked to talk to the server without an RDT or a resource"""

    def __init__(self, message=MISSING_REQUIREMENTS):
        super().__init__(message)


class TransportError(FamException):
    """A request made by an RDT failed

    The response is kept when the server answered with an error status.
    """

    def __init__(self, message, response=None):
        super().__init__(message)
        self.response = response

    @property
    def status_code(self):
        return getattr(self.response, "status_code", None)


class CollectionError(FamException):
    """One or more models in a collection reported an error"""

    def __init__(self, errors):
        self.errors = list(errors)
        super().__init__(
            f"{len(self.errors)} model(s) failed: "
            + "; ".join(str(err) for _, err in self.errors)
        )
