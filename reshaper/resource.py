"""
Resource transformers.

A resource turns one kind of backend entity into its API shape. Declare a
subclass of Resource and supply ``transform``:

    class UserResource(Resource):
        @classmethod
        def transform(cls, user, options):
            return cls.clean({
                "id": user.id,
                "name": user.name,
                "email": cls.when(options.get("is_admin"), user.email),
                "posts": cls.when_loaded(user, "posts", PostResource.collection),
            })

    UserResource.make(user)                     # None-safe single entity
    UserResource.collection(users, options)     # list of entities
    UserResource.paginate(page_result, {"page": 2, "per_page": 10})

For one-off shapes, define() builds an equivalent transformer from a plain
function without declaring a class.
"""

import inspect
from typing import Any, Callable, Dict, List, Mapping, Optional

from reshaper import conditionals, shaping
from reshaper.accessors import is_sequence
from reshaper.exceptions import TransformNotImplementedError
from reshaper.pagination import paginate_result, wrap
from reshaper.utils.logging_utils import StructuredLogger, transform_context

logger = StructuredLogger(__name__)

Options = Optional[Mapping[str, Any]]


def _options(options: Options) -> Mapping[str, Any]:
    return {} if options is None else options


def _log_ignored_collection(entities: Any) -> None:
    if entities is not None:
        logger.debug(
            "Collection input is not a sequence, returning empty list",
            extra={"input_type": type(entities).__name__},
        )


class Resource:
    """
    Base contract for per-entity transformers.

    Subclasses override the ``transform`` classmethod; every other operation
    is built on it. Resources are used at class level and hold no state.
    """

    # Helpers exposed on the class so transform bodies can use cls.when(...)
    when = staticmethod(conditionals.when)
    when_or_else = staticmethod(conditionals.when_or_else)
    when_loaded = staticmethod(conditionals.when_loaded)
    when_not_null = staticmethod(conditionals.when_not_null)
    clean = staticmethod(shaping.clean)
    merge = staticmethod(shaping.merge)
    pick = staticmethod(shaping.pick)
    omit = staticmethod(shaping.omit)
    rename = staticmethod(shaping.rename)
    wrap = staticmethod(wrap)

    @classmethod
    def transform(cls, entity: Any, options: Options = None) -> Any:
        """
        Shape a single entity. Must be overridden.

        Raises:
            TransformNotImplementedError: always, on the base contract
        """
        logger.error(
            f"{cls.__name__}.transform() called without an override",
            extra={"resource": cls.__name__},
        )
        raise TransformNotImplementedError(cls.__name__)

    @classmethod
    def collection(cls, entities: Any, options: Options = None) -> List[Any]:
        """
        Transform every entity in a list or tuple, preserving order.

        Anything that is not a sequence (including None) yields an empty list.
        """
        if not is_sequence(entities):
            _log_ignored_collection(entities)
            return []

        options = _options(options)
        with transform_context(cls.__name__):
            return [cls.transform(entity, options) for entity in entities]

    @classmethod
    def make(cls, entity: Any, options: Options = None) -> Any:
        """Transform ``entity``, or return None when it is None, ABSENT or otherwise falsy."""
        if not entity:
            return None
        with transform_context(cls.__name__):
            return cls.transform(entity, _options(options))

    @classmethod
    def paginate(cls, result: Any, options: Options = None) -> Dict[str, Any]:
        """
        Build the paginated envelope for ``result``.

        See reshaper.pagination.paginate_result for the accepted container shapes.
        """
        return paginate_result(result, options, cls.collection)

    @staticmethod
    def define(transform_fn: Callable[..., Any]) -> "DefinedResource":
        """Build a transformer from a plain function; see define()."""
        return define(transform_fn)


def _accepts_options(fn: Callable[..., Any]) -> bool:
    """True when ``fn`` can be called as fn(entity, options)."""
    try:
        params = inspect.signature(fn).parameters.values()
    except (TypeError, ValueError):
        # Builtins without a signature (e.g. operator.itemgetter) get the entity only
        return False

    positional = 0
    for param in params:
        if param.kind == param.VAR_POSITIONAL:
            return True
        if param.kind in (param.POSITIONAL_ONLY, param.POSITIONAL_OR_KEYWORD):
            positional += 1
    return positional >= 2


class DefinedResource:
    """
    Transformer built by define() around a plain function.

    Exposes the same operations as a Resource subclass. ``paginate`` runs
    the shared pagination algorithm with this object's ``collection``, so
    both kinds of transformer produce identical envelopes.
    """

    wrap = staticmethod(wrap)

    def __init__(self, transform_fn: Callable[..., Any]):
        self.transform_fn = transform_fn
        self.name = getattr(transform_fn, "__name__", type(self).__name__)
        self._pass_options = _accepts_options(transform_fn)

    def __repr__(self) -> str:
        return f"<DefinedResource {self.name}>"

    def _apply(self, entity: Any, options: Mapping[str, Any]) -> Any:
        if self._pass_options:
            return self.transform_fn(entity, options)
        return self.transform_fn(entity)

    def transform(self, entity: Any, options: Options = None) -> Any:
        if not entity:
            return None
        return self._apply(entity, _options(options))

    def collection(self, entities: Any, options: Options = None) -> List[Any]:
        if not is_sequence(entities):
            _log_ignored_collection(entities)
            return []

        options = _options(options)
        with transform_context(self.name):
            return [self._apply(entity, options) for entity in entities]

    def make(self, entity: Any, options: Options = None) -> Any:
        if not entity:
            return None
        with transform_context(self.name):
            return self._apply(entity, _options(options))

    def paginate(self, result: Any, options: Options = None) -> Dict[str, Any]:
        return paginate_result(result, options, self.collection)


def define(transform_fn: Callable[..., Any]) -> DefinedResource:
    """
    Create a transformer from a function, without declaring a Resource subclass.

    ``transform_fn`` may take ``(entity, options)`` or just ``(entity)``.

    Example:
        SimpleUser = define(lambda user: {"id": user["id"], "name": user["name"]})
        SimpleUser.collection(users)
        SimpleUser.paginate({"rows": users, "count": 40}, {"page": 1})
    """
    return DefinedResource(transform_fn)
