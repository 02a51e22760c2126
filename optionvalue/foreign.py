from typing import *
import inspect
import logging
from .error import InvalidArgumentError
from .option import Option


logger = logging.getLogger(__name__)


# (presence check, accessor) pairs tried in order on objects from other libraries
CAPABILITIES = [
    ("is_present", "get"),
    ("isPresent", "get"),
    ("is_some", "unwrap"),
]


def _query(source, name: str):
    attribute = getattr(source, name)
    if inspect.ismethod(attribute) or inspect.isbuiltin(attribute):
        return attribute()
    return attribute


def _resolve(source) -> Optional[Tuple[str, str]]:
    for presence, accessor in CAPABILITIES:
        if hasattr(source, presence) and hasattr(source, accessor):
            return presence, accessor
    return None


def from_foreign(source,
                 is_present: Optional[Callable[[Any], bool]]=None,
                 get: Optional[Callable[[Any], Any]]=None) -> Option:
    """
    Mirror an optional-like object from another library into an ``Option``.

    With ``is_present`` and ``get`` given, they are called with ``source``.
    Otherwise the first pair from ``CAPABILITIES`` that ``source`` exposes is
    used; each name may be a method, a property or a plain attribute. The
    accessor is only consulted when the presence check is true, and its value
    goes through ``Option.of``.
    """
    if source is None:
        return Option.absent()
    if isinstance(source, Option):
        return source
    if is_present is not None or get is not None:
        if not callable(is_present) or not callable(get):
            raise InvalidArgumentError("is_present and get must be given together as callables")
        logger.debug("adapting %s with explicit accessors", type(source).__name__)
        if is_present(source):
            return Option.of(get(source))
        return Option.absent()
    capability = _resolve(source)
    if capability is None:
        raise InvalidArgumentError("{} does not look like an optional value".format(type(source).__name__))
    presence, accessor = capability
    logger.debug("adapting %s via %s/%s", type(source).__name__, presence, accessor)
    if _query(source, presence):
        return Option.of(_query(source, accessor))
    return Option.absent()


__all__ = ["from_foreign", "CAPABILITIES"]
