import functools
import json

from ..exceptions import ConfigurationError


def check_requirements(func):
    """Check the model has an RDT and a resolvable resource URL

    Raised before the wrapped call, never passed to a callback.
    """
    @functools.wraps(func)
    def inner(self, *args, **kwargs):
        if self.rdt is None or self.resource_url() is None:
            raise ConfigurationError()
        return func(self, *args, **kwargs)
    return inner


def parse_response(response):
    """Turn a raw transport response into a document

    Args:
        response: JSON text (str or bytes), an object with a json()
            method (eg. requests.Response), a mapping, or None.

    Returns:
        The decoded document, or None if there was nothing to decode.

    Raises:
        ValueError: If the response is not valid JSON.
    """
    if response is None:
        return None
    if isinstance(response, (str, bytes, bytearray)):
        if not response.strip():
            return None
        return json.loads(response)
    if callable(getattr(response, "json", None)):
        content = getattr(response, "content", None)
        if isinstance(content, (str, bytes, bytearray)) and not content.strip():
            return None
        return response.json()
    return response


def split_callback_args(args):
    """Read the (error, data) pair out of a transport callback

    Transports may call back with (error, data), with a lone exception,
    with a lone response, or with nothing at all.

    Returns:
        tuple: (error, data)
    """
    if not args:
        return None, None
    if len(args) == 1:
        if isinstance(args[0], BaseException):
            return args[0], None
        return None, args[0]
    return args[0], args[1]


def noop(*args, **kwargs):
    pass
