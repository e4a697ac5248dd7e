"""

Collections of models, fanning fetch/save/destroy out to every member

"""

import logging
from typing import Protocol, runtime_checkable

from ..exceptions import CollectionError
from ..utils.utils import noop, split_callback_args

logger = logging.getLogger(__name__)


@runtime_checkable
class Syncable(Protocol):
    """Anything a Collection can hold"""

    def fetch(self, callback=None): ...

    def save(self, callback=None): ...

    def destroy(self, callback=None): ...


class Collection:
    """An ordered group of models

    The list of models is kept by reference, not copied.

    Usage:

        >>> user = Model("user", rdt=rdt, resource="users/2")
        >>> users = Collection(models=[user])
        >>> def all_saved(error, results):
        ...     if error:
        ...         for model, err in error.errors:
        ...             print(model, err)
        >>> users.save(all_saved)

        Args:
            models (list, optional): Objects with fetch, save and destroy.
                Defaults to an empty list.
    """

    def __init__(self, models=None):
        self.models = models if models is not None else []

    def __len__(self):
        return len(self.models)

    def __iter__(self):
        return iter(self.models)

    def __getitem__(self, index):
        return self.models[index]

    def fetch(self, callback=None):
        """Fetch every model from the server

        Args:
            callback (callable, optional): Called once as
                callback(error, results) when all models have been fetched.
        """
        self._fanout("fetch", callback)

    def save(self, callback=None):
        """Save every model to the server

        Args:
            callback (callable, optional): Called once as
                callback(error, results) when all models have been saved.
        """
        self._fanout("save", callback)

    def destroy(self, callback=None):
        """Destroy every model on the server

        Args:
            callback (callable, optional): Called once as
                callback(error, results) when all models have been destroyed.
        """
        self._fanout("destroy", callback)

    def _fanout(self, operation, callback=None):
        """Call operation on each model in order

        Synchronous errors propagate and stop the fanout. Asynchronous
        results are gathered and reported once every model has answered.
        """
        callback = callback or noop
        models = list(self.models)
        results = [None] * len(models)
        errors = {}
        pending = [len(models)]

        def done():
            if errors:
                callback(
                    CollectionError((models[i], errors[i]) for i in sorted(errors)),
                    results,
                )
            else:
                callback(None, results)

        def make_callback(index):
            answered = []

            def on_complete(*args):
                error, data = split_callback_args(args)
                if answered:
                    logger.warning(f"{models[index]!r} answered {operation} more than once")
                    return
                answered.append(True)
                if error is not None:
                    errors[index] = error
                results[index] = data
                pending[0] -= 1
                if pending[0] == 0:
                    done()

            return on_complete

        logger.debug(f"Calling {operation} on {len(models)} model(s)")
        if not models:
            done()
            return
        for index, model in enumerate(models):
            getattr(model, operation)(make_callback(index))
