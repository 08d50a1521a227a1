import abc
from datetime import date, datetime
import json
from typing import Any, ClassVar, Dict, FrozenSet, Mapping, Optional

from opensearchdsl.errors import InvalidArgument


def compile_value(value: Any) -> Any:
    """Turn builders nested anywhere inside a value into plain structures."""
    if isinstance(value, Expr):
        return value.compile()
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    if isinstance(value, dict):
        return {k: compile_value(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [compile_value(v) for v in value]
    return value


class Expr(abc.ABC):
    @abc.abstractmethod
    def compile(self) -> Any:
        ...

    def to_json(self, **kwargs) -> str:
        return json.dumps(self.compile(), **kwargs)


class OptionBag(Expr):
    """
    Ordered mapping of DSL option names to values for one query, aggregation
    or clause definition.

    Subclasses that set ``known_options`` accept only those names through
    :meth:`set` and :meth:`update`; the dedicated setters always write
    names from that set.
    """

    known_options: ClassVar[Optional[FrozenSet[str]]] = None

    def __init__(self, body_type: str, field: Optional[str] = None) -> None:
        self.body_type = body_type
        self._body: Dict[str, Any] = {}
        if field is not None:
            self._body['field'] = field

    def _check_option(self, key: str):
        if self.known_options is not None and key not in self.known_options:
            raise InvalidArgument(f'`{key}` is not a valid option for {type(self).__name__}')

    def get(self, key: str) -> Any:
        return self._body.get(key)

    def set(self, key: str, value: Any):
        self._check_option(key)
        self._body[key] = value
        return self

    def update(self, options: Mapping[str, Any]):
        for key in options:
            self._check_option(key)
        self._body.update(options)
        return self

    def compile_body(self) -> Dict[str, Any]:
        return compile_value(self._body)

    def compile(self):
        return self.compile_body()

    def __repr__(self) -> str:
        return f'{type(self).__name__}({self._body!r})'
