from enum import Enum
import logging
from typing import Any, Callable, Dict, List, Optional, Type, TypeVar, Union

from opensearchdsl.base import Expr, OptionBag, compile_value
from opensearchdsl.consts import BoostMode, ScoreMode, parse_choice
from opensearchdsl.errors import InvalidArgument, MissingRequiredField
from opensearchdsl.model import BaseModel

Model = TypeVar('Model', bound=BaseModel)


class Query(OptionBag):
    """A leaf or compound query, compiled to ``{query_type: {...options}}``."""

    def __init__(self, query_type: str, field: Optional[str] = None) -> None:
        super().__init__(query_type, field)

    def boost(self, factor: float):
        self._body['boost'] = factor
        return self

    def name(self, name: str):
        self._body['_name'] = name
        return self

    def compile(self):
        return {self.body_type: self.compile_body()}


class MatchAllQuery(Query):
    def __init__(self) -> None:
        super().__init__('match_all')


class MatchNoneQuery(Query):
    def __init__(self) -> None:
        super().__init__('match_none')


class FieldQueryBase(Query):
    """
    Queries keyed by the field they search, compiled as::

        {query_type: {field: {value_key: value, ...options}}}
    """

    def __init__(self, query_type: str, value_key: str, field: Optional[str] = None, value: Any = None) -> None:
        super().__init__(query_type)
        self._field = field
        self._value_key = value_key
        if value is not None:
            self._body[value_key] = value

    def field(self, field: str):
        self._field = field
        return self

    def value(self, value):
        self._body[self._value_key] = value
        return self

    def compile(self):
        if self._field is None:
            raise MissingRequiredField(type(self).__name__, 'field')
        if self._value_key not in self._body:
            raise MissingRequiredField(type(self).__name__, self._value_key)

        return {
            self.body_type: {
                self._field: self.compile_body(),
            }
        }


class TermQuery(FieldQueryBase):
    def __init__(self, field: Optional[str] = None, value: Any = None) -> None:
        super().__init__('term', 'value', field, value)


class PrefixQuery(FieldQueryBase):
    def __init__(self, field: Optional[str] = None, value: Optional[str] = None) -> None:
        super().__init__('prefix', 'value', field, value)


class WildcardQuery(FieldQueryBase):
    def __init__(self, field: Optional[str] = None, value: Optional[str] = None) -> None:
        super().__init__('wildcard', 'value', field, value)

    def case_insensitive(self, enable: bool = True):
        self._body['case_insensitive'] = enable
        return self


class RegexpQuery(FieldQueryBase):
    def __init__(self, field: Optional[str] = None, value: Optional[str] = None) -> None:
        super().__init__('regexp', 'value', field, value)

    def flags(self, flags: str):
        self._body['flags'] = flags
        return self


class MatchQuery(FieldQueryBase):
    def __init__(self, field: Optional[str] = None, query: Optional[str] = None) -> None:
        super().__init__('match', 'query', field, query)

    def operator(self, operator: str):
        if not isinstance(operator, str) or operator.lower() not in ('and', 'or'):
            raise InvalidArgument(f'`operator` must be either `and` or `or`, got {operator!r}')
        self._body['operator'] = operator.lower()
        return self

    def fuzziness(self, fuzziness: Union[int, str]):
        self._body['fuzziness'] = fuzziness
        return self


class MatchPhraseQuery(FieldQueryBase):
    def __init__(self, field: Optional[str] = None, query: Optional[str] = None) -> None:
        super().__init__('match_phrase', 'query', field, query)

    def slop(self, slop: int):
        self._body['slop'] = slop
        return self


class MatchPhrasePrefixQuery(FieldQueryBase):
    def __init__(self, field: Optional[str] = None, query: Optional[str] = None) -> None:
        super().__init__('match_phrase_prefix', 'query', field, query)

    def max_expansions(self, limit: int):
        self._body['max_expansions'] = limit
        return self


class TermsQuery(Query):
    def __init__(self, field: Optional[str] = None, values: Optional[list] = None) -> None:
        super().__init__('terms')
        self._field = field
        self._values = list(values) if values is not None else []

    def field(self, field: str):
        self._field = field
        return self

    def values(self, values: list):
        self._values = list(values)
        return self

    def compile(self):
        if self._field is None:
            raise MissingRequiredField(type(self).__name__, 'field')

        body = {self._field: compile_value(self._values)}
        body.update(self.compile_body())
        return {self.body_type: body}


class ExistsQuery(Query):
    def __init__(self, field: Optional[str] = None) -> None:
        super().__init__('exists', field)

    def field(self, field: str):
        self._body['field'] = field
        return self

    def compile(self):
        if 'field' not in self._body:
            raise MissingRequiredField(type(self).__name__, 'field')
        return super().compile()


class IdsQuery(Query):
    def __init__(self, values: Optional[List[str]] = None) -> None:
        super().__init__('ids')
        self._body['values'] = list(values) if values is not None else []

    def values(self, values: List[str]):
        self._body['values'] = list(values)
        return self


class RangeQuery(Query):
    """Dates and datetimes used as bounds are sent as ISO 8601 strings."""

    def __init__(self, field: Optional[str] = None) -> None:
        super().__init__('range')
        self._field = field

    def field(self, field: str):
        self._field = field
        return self

    def gt(self, value):
        self._body['gt'] = value
        return self

    def gte(self, value):
        self._body['gte'] = value
        return self

    def lt(self, value):
        self._body['lt'] = value
        return self

    def lte(self, value):
        self._body['lte'] = value
        return self

    def format(self, fmt: str):
        self._body['format'] = fmt
        return self

    def time_zone(self, tz: str):
        self._body['time_zone'] = tz
        return self

    def compile(self):
        if self._field is None:
            raise MissingRequiredField(type(self).__name__, 'field')

        return {
            'range': {
                self._field: self.compile_body(),
            }
        }


class BoolQuery(Query):
    def __init__(self) -> None:
        super().__init__('bool')
        self._must: List[Expr] = []
        self._filter: List[Expr] = []
        self._should: List[Expr] = []
        self._must_not: List[Expr] = []

    def must(self, *queries: Expr):
        self._must.extend(queries)
        return self

    def filter(self, *queries: Expr):
        self._filter.extend(queries)
        return self

    def should(self, *queries: Expr):
        self._should.extend(queries)
        return self

    def must_not(self, *queries: Expr):
        self._must_not.extend(queries)
        return self

    def minimum_should_match(self, value: Union[int, str]):
        self._body['minimum_should_match'] = value
        return self

    def compile(self):
        body: Dict[str, Any] = {}
        for clause, queries in (
            ('must', self._must),
            ('filter', self._filter),
            ('should', self._should),
            ('must_not', self._must_not),
        ):
            if queries:
                body[clause] = [q.compile() for q in queries]
        body.update(self.compile_body())

        return {'bool': body}


class ConstantScoreQuery(Query):
    def __init__(self, filter_query: Optional[Expr] = None) -> None:
        super().__init__('constant_score')
        self._filter = filter_query

    def filter(self, filter_query: Expr):
        self._filter = filter_query
        return self

    def compile(self):
        if self._filter is None:
            raise MissingRequiredField(type(self).__name__, 'filter')

        body = {'filter': self._filter.compile()}
        body.update(self.compile_body())
        return {'constant_score': body}


class DisMaxQuery(Query):
    def __init__(self, *queries: Expr) -> None:
        super().__init__('dis_max')
        self._queries: List[Expr] = list(queries)

    def queries(self, *queries: Expr):
        self._queries.extend(queries)
        return self

    def tie_breaker(self, factor: float):
        self._body['tie_breaker'] = factor
        return self

    def compile(self):
        if not self._queries:
            raise MissingRequiredField(type(self).__name__, 'queries')

        body: Dict[str, Any] = {'queries': [q.compile() for q in self._queries]}
        body.update(self.compile_body())
        return {'dis_max': body}


class BoostingQuery(Query):
    def __init__(self, positive: Optional[Expr] = None, negative: Optional[Expr] = None,
                 negative_boost: Optional[float] = None) -> None:
        super().__init__('boosting')
        self._positive = positive
        self._negative = negative
        if negative_boost is not None:
            self._body['negative_boost'] = negative_boost

    def positive(self, query: Expr):
        self._positive = query
        return self

    def negative(self, query: Expr):
        self._negative = query
        return self

    def negative_boost(self, factor: float):
        self._body['negative_boost'] = factor
        return self

    def compile(self):
        if self._positive is None:
            raise MissingRequiredField(type(self).__name__, 'positive')
        if self._negative is None:
            raise MissingRequiredField(type(self).__name__, 'negative')
        if 'negative_boost' not in self._body:
            raise MissingRequiredField(type(self).__name__, 'negative_boost')

        body = {'positive': self._positive.compile(), 'negative': self._negative.compile()}
        body.update(self.compile_body())
        return {'boosting': body}


class FunctionScoreQuery(Query):
    """
    Rescore the documents matched by ``query`` with a list of score
    functions. ``score_mode`` combines the functions with each other and
    ``boost_mode`` combines the result with the query score.
    """

    def __init__(self, query: Optional[Expr] = None) -> None:
        super().__init__('function_score')
        self._query = query
        self._functions: List[Expr] = []

    def query(self, query: Expr):
        self._query = query
        return self

    def function(self, function: Expr):
        self._functions.append(function)
        return self

    def functions(self, *functions: Expr):
        self._functions.extend(functions)
        return self

    def score_mode(self, mode: str):
        self._body['score_mode'] = parse_choice(ScoreMode, mode, 'score_mode')
        return self

    def boost_mode(self, mode: str):
        self._body['boost_mode'] = parse_choice(BoostMode, mode, 'boost_mode')
        return self

    def max_boost(self, limit: float):
        self._body['max_boost'] = limit
        return self

    def min_score(self, score: float):
        self._body['min_score'] = score
        return self

    def compile(self):
        body: Dict[str, Any] = {}
        if self._query is not None:
            body['query'] = self._query.compile()
        if self._functions:
            body['functions'] = [f.compile() for f in self._functions]
        body.update(self.compile_body())
        return {'function_score': body}


class Operator(Enum):
    PREFIX = '__prefix'
    REGEXP = '__regexp'
    CONTAINS = '__contains'
    GTE = '__gte'
    GT = '__gt'
    LTE = '__lte'
    LT = '__lt'


def contains(field: str, values: list, min_match: int = 1) -> BoolQuery:
    return BoolQuery().should(*[MatchPhraseQuery(field, v) for v in values]).minimum_should_match(min_match)


OPERATOR_FUNCTIONS: Dict[Operator, Callable[[str, Any], Expr]] = {
    Operator.CONTAINS: lambda field, value: contains(field, value),
    Operator.PREFIX: lambda field, value: MatchPhrasePrefixQuery(field, value),
    Operator.REGEXP: lambda field, value: RegexpQuery(field, value),
    Operator.GTE: lambda field, value: RangeQuery(field).gte(value),
    Operator.GT: lambda field, value: RangeQuery(field).gt(value),
    Operator.LTE: lambda field, value: RangeQuery(field).lte(value),
    Operator.LT: lambda field, value: RangeQuery(field).lt(value),
}


class ModelQuery(BoolQuery):
    """
    Bool query whose clauses may be given as keyword arguments checked
    against the fields of a document model::

        ModelQuery(Article).filter(title__prefix='open', views__gte=10)
    """

    def __init__(self, model_cls: Type[Model]):
        super().__init__()
        self.__model_cls = model_cls

    @property
    def valid_fields(self):
        return set(self.__model_cls.default_fields())

    def check_valid_field(self, field: str):
        if field not in self.valid_fields:
            raise InvalidArgument(f'check field name: {field}')

    def parse_clause(self, raw_field: str, value) -> Expr:
        field = raw_field
        for op in Operator:
            suffix: str = op.value
            if raw_field.endswith(suffix):
                field = raw_field[:-len(suffix)]
                logging.debug('parse field: %s, raw: %s', field, raw_field)
                self.check_valid_field(field)
                return OPERATOR_FUNCTIONS[op](field, value)

        self.check_valid_field(field)
        return MatchPhraseQuery(field, value)

    def parse_clauses(self, **kwargs):
        return [self.parse_clause(k, v) for k, v in kwargs.items()]

    def filter(self, *args: Expr, **kwargs):
        conditions = self.parse_clauses(**kwargs)
        return super().filter(*args, *conditions)

    def union(self, *args: Expr, **kwargs):
        conditions = self.parse_clauses(**kwargs)
        super().should(*args, *conditions)
        return self.minimum_should_match(1)

    def exclude(self, *args: Expr, **kwargs):
        conditions = self.parse_clauses(**kwargs)
        return super().must_not(*args, *conditions)
