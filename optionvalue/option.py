'''
Option 是一个不可变的值容器: 要么持有一个非 None 的值(Present)，要么什么都没有(Absent)

opt = Option.of_nullable(find_user(name))
opt.map(lambda user: user.email).filter(valid_email).or_else("nobody@localhost")

Absent 沿着 map/flat_map/filter 链传播，中间不需要判断 None
'''

from typing import *
from .error import InvalidArgumentError, NoneError


_OT = TypeVar('_OT')
_OU = TypeVar('_OU')


def _check_callable(fn, name: str):
    if fn is None or not callable(fn):
        raise InvalidArgumentError("{} must be callable, got {!r}".format(name, fn))
    return fn


class Option(Generic[_OT]):
    """
    A value that may or may not be present.

    Only the two variants ``Present`` and ``Absent`` exist; build them with
    ``of``, ``of_nullable`` or ``absent``. Instances are immutable and compare
    structurally, so ``Option.of(1) == Option.of(1)`` and every absent option
    equals every other one regardless of the type parameter it was built for.
    """
    __slots__ = ()

    def __new__(cls, *args, **kwargs):
        if cls is Option:
            raise TypeError("Option is abstract, use Option.of, Option.of_nullable or Option.absent")
        return super(Option, cls).__new__(cls)

    def __init_subclass__(cls, **kwargs):
        super(Option, cls).__init_subclass__(**kwargs)
        if cls.__module__ != __name__:
            raise TypeError("Option only has the Present and Absent variants")

    def __setattr__(self, name, value):
        raise AttributeError("Option is immutable")

    def __delattr__(self, name):
        raise AttributeError("Option is immutable")

    @staticmethod
    def absent() -> 'Option[_OT]':
        return Absent()

    empty = absent

    @staticmethod
    def of(value: _OT) -> 'Option[_OT]':
        return Present(value)

    @staticmethod
    def of_nullable(value: Optional[_OT]) -> 'Option[_OT]':
        if value is None:
            return Absent()
        return Present(value)

    from_nullable = of_nullable

    @property
    def is_present(self) -> bool:
        raise NotImplementedError

    @property
    def is_absent(self) -> bool:
        return not self.is_present

    def get(self) -> _OT:
        """Return the contained value, raise ``NoneError`` when absent."""
        raise NotImplementedError

    def or_else(self, default: _OT) -> _OT:
        return self.get() if self.is_present else default

    def or_else_get(self, supplier: Callable[[], _OT]) -> _OT:
        """Return the contained value; only when absent call ``supplier`` and return its result."""
        _check_callable(supplier, "supplier")
        if self.is_present:
            return self.get()
        return supplier()

    def or_get(self, supplier: Callable[[], _OT]) -> _OT:
        """Like ``or_else_get``, but ``supplier`` must not return None."""
        _check_callable(supplier, "supplier")
        if self.is_present:
            return self.get()
        value = supplier()
        if value is None:
            raise InvalidArgumentError("or_get supplier returned None")
        return value

    def or_else_raise(self, error_supplier: Callable[[], BaseException]) -> _OT:
        """
        Return the contained value, or raise the exception built by ``error_supplier``.

        ``error_supplier`` is called only when absent; an exception class works
        as well as a factory function::

            port = config.get_port().or_else_raise(lambda: KeyError("port"))
        """
        _check_callable(error_supplier, "error_supplier")
        if self.is_present:
            return self.get()
        raise error_supplier()

    def or_none(self) -> Optional[_OT]:
        return self.or_else(None)

    def as_tuple(self) -> Tuple:
        if self.is_present:
            return self.get(),
        return ()

    def __iter__(self) -> Iterator[_OT]:
        return iter(self.as_tuple())

    def map(self, fn: Callable[[_OT], Optional[_OU]]) -> 'Option[_OU]':
        """
        Apply ``fn`` to the contained value and wrap the result with ``of_nullable``.

        A ``fn`` that returns None gives ``Absent``; an absent option never calls ``fn``.
        """
        _check_callable(fn, "fn")
        if self.is_absent:
            return Absent()
        return Option.of_nullable(fn(self.get()))

    def transform(self, fn: Callable[[_OT], _OU]) -> 'Option[_OU]':
        """Like ``map``, but ``fn`` must not return None."""
        _check_callable(fn, "fn")
        if self.is_absent:
            return Absent()
        result = fn(self.get())
        if result is None:
            raise InvalidArgumentError("transform function returned None for {!r}".format(self))
        return Present(result)

    def flat_map(self, fn: Callable[[_OT], 'Option[_OU]']) -> 'Option[_OU]':
        _check_callable(fn, "fn")
        if self.is_absent:
            return Absent()
        result = fn(self.get())
        if not isinstance(result, Option):
            raise InvalidArgumentError("flat_map function must return an Option, got {!r}".format(result))
        return result

    def filter(self, predicate: Callable[[_OT], bool]) -> 'Option[_OT]':
        _check_callable(predicate, "predicate")
        if self.is_absent:
            return self
        return self if predicate(self.get()) else Absent()

    def or_(self, second_choice: 'Option[_OT]') -> 'Option[_OT]':
        if not isinstance(second_choice, Option):
            raise InvalidArgumentError("second_choice must be an Option, got {!r}".format(second_choice))
        return self if self.is_present else second_choice

    def if_present(self, action: Callable[[_OT], Any]) -> 'Option[_OT]':
        _check_callable(action, "action")
        if self.is_present:
            action(self.get())
        return self

    def if_absent(self, action: Callable[[], Any]) -> 'Option[_OT]':
        _check_callable(action, "action")
        if self.is_absent:
            action()
        return self

    def to_dict(self) -> Dict[str, Any]:
        if self.is_present:
            return dict(present=True, value=self.get())
        return dict(present=False)

    def to_data(self, dumps):
        return dumps(self.to_dict())

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> 'Option':
        if not isinstance(data, dict):
            raise InvalidArgumentError("expected a dict, got {!r}".format(data))
        present = data.get("present", None)
        if present is True:
            if "value" not in data:
                raise InvalidArgumentError("present option without value: {!r}".format(data))
            return Option.of(data["value"])
        if present is False:
            return Absent()
        raise InvalidArgumentError("malformed option data: {!r}".format(data))

    @staticmethod
    def from_data(data, loads) -> 'Option':
        return Option.from_dict(loads(data))


class Present(Option[_OT]):
    __slots__ = ("_value", )

    def __init__(self, value: _OT):
        if value is None:
            raise InvalidArgumentError("Option.of() requires a value, got None")
        object.__setattr__(self, "_value", value)

    @property
    def is_present(self) -> bool:
        return True

    def get(self) -> _OT:
        return self._value

    def __eq__(self, other):
        if isinstance(other, Present):
            return self._value == other._value
        if isinstance(other, Option):
            return False
        return NotImplemented

    def __hash__(self):
        return 0x598df91c + hash(self._value)

    def __reduce__(self):
        return Present, (self._value, )

    def __repr__(self):
        return "<Option.Present: {!r}>".format(self._value)


class Absent(Option[_OT]):
    __slots__ = ()
    _instance = None

    def __new__(cls):
        return cls._instance

    @property
    def is_present(self) -> bool:
        return False

    def get(self) -> _OT:
        raise NoneError("get() called on Option.absent()")

    def __eq__(self, other):
        if isinstance(other, Option):
            return isinstance(other, Absent)
        return NotImplemented

    def __hash__(self):
        return 0x79a31aac

    def __reduce__(self):
        return Absent, ()

    def __repr__(self):
        return "<Option.Absent>"


Absent._instance = Option.__new__(Absent)


__all__ = ["Option", "Present", "Absent"]
