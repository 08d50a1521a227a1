import json
import logging
from typing import Any, Dict, List, Optional, Type, Union

from opensearchdsl.aggs import Aggregation
from opensearchdsl.base import Expr, OptionBag, compile_value
from opensearchdsl.consts import SortMode, parse_choice, parse_direction
from opensearchdsl.model import BaseModel


class Sort(OptionBag):
    """
    Sort on one field. Compiles to the bare field name when no option is set,
    otherwise to ``{field: {...options}}``.
    """

    def __init__(self, field: str, order: Optional[str] = None) -> None:
        super().__init__('sort')
        self.field = field
        if order is not None:
            self.order(order)

    def order(self, direction: str):
        self._body['order'] = parse_direction(direction)
        return self

    def mode(self, mode: str):
        """How a multi-valued field is reduced to one sort value."""
        self._body['mode'] = parse_choice(SortMode, mode, 'mode')
        return self

    def missing(self, value):
        self._body['missing'] = value
        return self

    def unmapped_type(self, field_type: str):
        self._body['unmapped_type'] = field_type
        return self

    def compile(self):
        if not self._body:
            return self.field
        return {self.field: self.compile_body()}


class Highlight(OptionBag):
    def __init__(self, *fields: str) -> None:
        super().__init__('highlight')
        self._fields: Dict[str, Dict[str, Any]] = {f: {} for f in fields}

    def field(self, name: str, **options):
        self._fields[name] = options
        return self

    def pre_tags(self, tags: Union[str, List[str]]):
        self._body['pre_tags'] = [tags] if isinstance(tags, str) else list(tags)
        return self

    def post_tags(self, tags: Union[str, List[str]]):
        self._body['post_tags'] = [tags] if isinstance(tags, str) else list(tags)
        return self

    def fragment_size(self, size: int):
        self._body['fragment_size'] = size
        return self

    def number_of_fragments(self, count: int):
        self._body['number_of_fragments'] = count
        return self

    def type(self, highlighter: str):
        self._body['type'] = highlighter
        return self

    def compile(self):
        body = self.compile_body()
        body['fields'] = compile_value(self._fields)
        return body


class RequestBodySearch(OptionBag):
    """
    The full body of a search request.

    :arg model: optional document model; ``_source`` defaults to its fields
        unless :meth:`source` is called
    """

    def __init__(self, model: Optional[Type[BaseModel]] = None) -> None:
        super().__init__('search')
        self.__model_cls = model
        self.__query: Optional[Expr] = None
        self.__aggs: Dict[str, Aggregation] = {}
        self.__sort: List[Union[str, Sort]] = []
        self.__highlight: Optional[Highlight] = None

    def query(self, query: Expr):
        self.__query = query
        return self

    def agg(self, agg: Aggregation):
        self.__aggs[agg.name] = agg
        return self

    def aggs(self, *aggs: Aggregation):
        for agg in aggs:
            self.agg(agg)
        return self

    def sort(self, *sorts: Union[str, Sort]):
        self.__sort.extend(sorts)
        return self

    def size(self, size: int):
        self._body['size'] = size
        return self

    def from_(self, offset: int):
        self._body['from'] = offset
        return self

    limit = size
    offset = from_

    def source(self, fields: Union[bool, List[str]]):
        self._body['_source'] = fields
        return self

    def highlight(self, highlight: Highlight):
        self.__highlight = highlight
        return self

    def min_score(self, score: float):
        self._body['min_score'] = score
        return self

    def track_total_hits(self, enable: Union[bool, int] = True):
        self._body['track_total_hits'] = enable
        return self

    def compile(self):
        body: Dict[str, Any] = {}
        if self.__query is not None:
            body['query'] = self.__query.compile()
        if self.__aggs:
            body['aggs'] = {}
            for agg in self.__aggs.values():
                body['aggs'].update(agg.compile())
        if self.__sort:
            body['sort'] = compile_value(self.__sort)
        if self.__highlight is not None:
            body['highlight'] = self.__highlight.compile()
        if self.__model_cls is not None and '_source' not in self._body:
            body['_source'] = self.__model_cls.default_fields()
        body.update(self.compile_body())

        if logging.getLogger().isEnabledFor(logging.DEBUG):
            logging.debug('query:\n%s', json.dumps(body))
        return body
