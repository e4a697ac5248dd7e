"""

Base class for models of remote resources in FAM

"""

import logging
from collections.abc import Mapping

from ..settings import MODEL_OPTIONS
from ..utils.utils import check_requirements, noop, parse_response, split_callback_args

logger = logging.getLogger(__name__)


class Model:
    """Local representation of a single remote resource

    Attributes live in a plain dict and are only sent to or read from
    the server through an RDT (any object with get, post and destroy).

    Usage without a data source:

        >>> user = Model("user")
        >>> user.get("firstName")
        >>> user.set("firstName", "Bob")
        >>> user.get("firstName")
        'Bob'
        >>> user.fetch()
        Traceback (most recent call last):
        ...
        fam.exceptions.ConfigurationError: Model cannot make changes ...

    Usage with an RDT:

        >>> user = Model("user", rdt=rdt, resource="users/2", json_root="user")
        >>> def data_ready(error, data):
        ...     if error:
        ...         raise error
        ...     user.get("firstName")
        >>> user.fetch(data_ready)

        Args:
            resource_name (string, optional): Label for the resource.
                Defaults to the class resource_name.
            rdt (object, optional): Transport used to reach the server.
            resource (string, optional): Full path to the resource
                (ie. "users/2"). Takes precedence over resource_path/id.
            resource_path (string, optional): Path of the resource type
                (ie. "users"), combined with id.
            id (string, optional): ID of the resource.
            json_root (string, optional): Key under which attributes are
                nested in fetched documents.
    """

    resource_name = None
    defaults: dict = {}

    def __init__(self, resource_name=None, **options):
        unknown = set(options) - set(MODEL_OPTIONS)
        if unknown:
            raise TypeError(f"Unknown model option(s): {', '.join(sorted(unknown))}")
        options = {**self.defaults, **options}

        if resource_name is not None:
            self.resource_name = resource_name
        self.rdt = options.get("rdt")
        self.resource = options.get("resource")
        self.resource_path = options.get("resource_path")
        self.id = options.get("id")
        self.json_root = options.get("json_root")
        self.attributes = {}

    def __repr__(self):
        return f"<{type(self).__name__} {self.resource_name!r} {self.resource_url()!r}>"

    @classmethod
    def extend(cls, resource_name, **members):
        """Build a model class for one kind of resource

        Option names (rdt, resource, resource_path, json_root) become
        defaults for every instance; anything else becomes a class member.

        Usage:

            >>> User = Model.extend("user", resource_path="users",
            ...                     json_root="user", full_name=full_name)
            >>> bob = User(rdt=rdt, id="2")
            >>> bob.resource_url()
            'users/2'

        Returns:
            type: A subclass of this model
        """
        defaults = {k: v for k, v in members.items() if k in MODEL_OPTIONS}
        attrs = {k: v for k, v in members.items() if k not in MODEL_OPTIONS}
        attrs["resource_name"] = resource_name
        attrs["defaults"] = {**cls.defaults, **defaults}
        name = "".join(part.capitalize() for part in resource_name.split("_"))
        return type(name or cls.__name__, (cls,), attrs)

    def get(self, name):
        return self.attributes.get(name)

    def set(self, name, value):
        self.attributes[name] = value

    def resource_url(self):
        """Resolve the URL of the resource

        Returns:
            string: resource if set, else resource_path/id, else None
        """
        if self.resource is not None:
            return self.resource
        if self.resource_path is not None and self.id is not None:
            return f"{self.resource_path}/{self.id}"
        return None

    @check_requirements
    def fetch(self, callback=None):
        """Fetch model data from the server and merge it into the attributes

        Attributes missing from the response are left as they are.

        Args:
            callback (callable, optional): Called as callback(error, data)
                once the attributes are updated. data is the raw response.

        Raises:
            ConfigurationError: If there is no RDT or resource URL
        """
        callback = callback or noop
        url = self.resource_url()

        def on_response(*args):
            error, response = split_callback_args(args)
            if error is not None:
                callback(error, None)
                return
            try:
                self._merge(parse_response(response))
            except ValueError as err:
                logger.debug(f"Could not decode response from {url}: {err}")
                callback(err, None)
                return
            callback(None, response)

        logger.debug(f"Fetching {url}")
        self.rdt.get(url, on_response)

    @check_requirements
    def save(self, callback=None):
        """Save changes on the model to the server

        The request body is currently empty, attributes are not sent.

        Args:
            callback (callable, optional): Passed to the RDT, called as
                callback(error, data).

        Raises:
            ConfigurationError: If there is no RDT or resource URL
        """
        url = self.resource_url()
        logger.debug(f"Saving {url}")
        self.rdt.post(url, {}, callback or noop)

    @check_requirements
    def destroy(self, callback=None):
        """Delete the resource from the server

        The model itself is left untouched.

        Args:
            callback (callable, optional): Passed to the RDT, called as
                callback(error, data).

        Raises:
            ConfigurationError: If there is no RDT or resource URL
        """
        url = self.resource_url()
        logger.debug(f"Destroying {url}")
        self.rdt.destroy(url, callback or noop)

    def _merge(self, document):
        if document is None:
            return
        source = document
        if self.json_root is not None:
            source = document.get(self.json_root) if isinstance(document, Mapping) else None
        if not isinstance(source, Mapping):
            return
        for key, value in source.items():
            self.set(key, value)
