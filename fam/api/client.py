"""

Reliable Data Transport (RDT) backed by requests, to be used by ..models

"""

import logging
import os

import requests
from ruamel.yaml import YAML

from ..exceptions import FamException, TransportError
from ..settings import DEFAULT_HEADERS, ENV_HOST_URL, ENV_VERIFY

logger = logging.getLogger(__name__)
logger.setLevel(logging.DEBUG)
ch = logging.StreamHandler()
ch.setLevel(logging.INFO)
formatter = logging.Formatter(
    '%(asctime)s - %(name)s - %(levelname)s : %(message)s')
ch.setFormatter(formatter)
logger.addHandler(ch)


class RDTClient(requests.Session):
    """HTTP transport for FAM models

    get, post and destroy take a callback instead of returning the
    response. The callback is called as callback(error, response)
    before the method returns. get and post called without a callback
    behave as on a plain requests.Session.

    Usage:

        >>> from fam import RDTClient, Model
        >>> rdt = RDTClient(host_url="https://somehost.com")
        >>> user = Model("user", rdt=rdt, resource="users/2")
        >>> user.fetch(data_ready)

        Args:
            host_url (string, optional): Prefixed to relative resource
                paths. Defaults to None (paths must be full URLs).
            verify (bool, optional): Verify certificate on the client-side.
                OR (str): Path to cert bundle (.pem) to verfiy against.
                Defaults to True.
            auth (tuple, optional): Basic auth credentials (<user>, <pass>).
                Defaults to None.
            headers (dict, optional): Extra headers sent with every request.
    """

    def __init__(self, host_url=None, verify=True, auth=None, headers=None):
        super().__init__()
        self.host_url = host_url.strip("/") + "/" if host_url else None
        self.verify = verify
        self.headers.update(DEFAULT_HEADERS)
        if headers:
            self.headers.update(headers)
        if isinstance(auth, tuple):
            self.auth = auth
        elif auth:
            raise TypeError("Basic auth must be a tuple of (<user>, <pass>)")

    @classmethod
    def from_env(cls):
        """Usage:
            >>> from fam import RDTClient
            >>> rdt = RDTClient.from_env() if ENV below is set

            FAM_HOST_URL (required) and FAM_VERIFY (optional, "false"
            turns off certificate verification)
        """
        try:
            host_url = os.environ[ENV_HOST_URL]
        except KeyError as err:
            raise FamException(f"Environment variable {err} not defined!")
        verify = os.environ.get(ENV_VERIFY, "true").lower() not in ("false", "0", "no")
        return cls(host_url=host_url, verify=verify)

    @classmethod
    def from_config(cls, path):
        """Build an RDT from a YAML file

        Usage:

            host_url: https://somehost.com
            verify: false
            auth:
              user: admin
              password: secret
            headers:
              X-Api-Key: abc

        Args:
            path (string): Path to the YAML file

        Raises:
            FamException: If the file has no host_url
        """
        with open(path, "r") as stream:
            yaml = YAML(typ="safe")
            config = yaml.load(stream) or {}
        if not config.get("host_url"):
            raise FamException(f"No host_url defined in {path}")
        auth = config.get("auth")
        if auth:
            try:
                auth = (auth["user"], auth["password"])
            except (KeyError, TypeError):
                raise FamException("auth needs both a user and a password")
        return cls(
            host_url=config["host_url"],
            verify=config.get("verify", True),
            auth=auth,
            headers=config.get("headers"),
        )

    def get(self, url, callback=None, **kwargs):
        """GET a resource

        Without a callback this is the plain requests.Session.get.

        Args:
            url (string): Resource path or full URL
            callback (callable, optional): Called as callback(error, response)
        """
        if callback is None:
            return super().get(url, **kwargs)
        self._send("GET", url, callback)

    def post(self, url, body=None, callback=None, **kwargs):
        """POST a JSON body to a resource

        Without a callback this is the plain requests.Session.post,
        with body as its data argument.

        Args:
            url (string): Resource path or full URL
            body (dict): Sent as JSON
            callback (callable, optional): Called as callback(error, response)
        """
        if callback is None:
            return super().post(url, data=body, **kwargs)
        self._send("POST", url, callback, json=body)

    def destroy(self, url, callback):
        """DELETE a resource

        Args:
            url (string): Resource path or full URL
            callback (callable): Called as callback(error, response)
        """
        self._send("DELETE", url, callback)

    def _url(self, path):
        if path.startswith(("http://", "https://")) or not self.host_url:
            return path
        return self.host_url + path.lstrip("/")

    def _send(self, method, url, callback, **kwargs):
        url = self._url(url)
        logger.debug(f"{method} {url}")
        try:
            resp = self.request(method, url, **kwargs)
            resp.raise_for_status()
        except requests.HTTPError as err:
            logger.error(f"{method} {url} failed: {err}")
            error = TransportError(str(err), response=err.response)
            error.__cause__ = err
            callback(error, None)
            return
        except requests.RequestException as err:
            logger.error(f"{method} {url} failed: {err}")
            error = TransportError(str(err))
            error.__cause__ = err
            callback(error, None)
            return
        callback(None, resp)
