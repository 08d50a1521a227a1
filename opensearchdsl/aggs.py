from typing import Any, Dict, Optional

from opensearchdsl.base import Expr, OptionBag, compile_value
from opensearchdsl.consts import parse_direction
from opensearchdsl.errors import MissingRequiredField


class Aggregation(OptionBag):
    """
    A named aggregation. Compiles to::

        {name: {agg_type: {...options}, 'aggs': {...}, 'meta': {...}}}

    where ``aggs`` and ``meta`` only appear when set.
    """

    def __init__(self, name: str, agg_type: str, field: Optional[str] = None) -> None:
        super().__init__(agg_type, field)
        self.name = name
        self.children: Dict[str, 'Aggregation'] = {}
        self._meta: Optional[dict] = None

    def agg(self, child: 'Aggregation'):
        self.children[child.name] = child
        return self

    def aggs(self, *children: 'Aggregation'):
        for child in children:
            self.agg(child)
        return self

    def nested(self, child: 'Aggregation'):
        return self.agg(child)

    def meta(self, meta: dict):
        self._meta = meta
        return self

    def compile(self):
        definition: Dict[str, Any] = {self.body_type: self.compile_body()}
        if self.children:
            definition['aggs'] = {}
            for child in self.children.values():
                definition['aggs'].update(child.compile())
        if self._meta is not None:
            definition['meta'] = compile_value(self._meta)

        return {self.name: definition}


class MetricAggregation(Aggregation):
    def field(self, field: str):
        self._body['field'] = field
        return self

    def script(self, script):
        self._body['script'] = script
        return self

    def missing(self, value):
        self._body['missing'] = value
        return self

    def format(self, fmt: str):
        self._body['format'] = fmt
        return self

    def compile_body(self):
        if 'field' not in self._body and 'script' not in self._body:
            raise MissingRequiredField(type(self).__name__, 'field')
        return super().compile_body()


class AvgAggregation(MetricAggregation):
    def __init__(self, name: str, field: Optional[str] = None) -> None:
        super().__init__(name, 'avg', field)


class SumAggregation(MetricAggregation):
    def __init__(self, name: str, field: Optional[str] = None) -> None:
        super().__init__(name, 'sum', field)


class MinAggregation(MetricAggregation):
    def __init__(self, name: str, field: Optional[str] = None) -> None:
        super().__init__(name, 'min', field)


class MaxAggregation(MetricAggregation):
    def __init__(self, name: str, field: Optional[str] = None) -> None:
        super().__init__(name, 'max', field)


class StatsAggregation(MetricAggregation):
    def __init__(self, name: str, field: Optional[str] = None) -> None:
        super().__init__(name, 'stats', field)


class ExtendedStatsAggregation(MetricAggregation):
    def __init__(self, name: str, field: Optional[str] = None) -> None:
        super().__init__(name, 'extended_stats', field)

    def sigma(self, sigma: float):
        self._body['sigma'] = sigma
        return self


class ValueCountAggregation(MetricAggregation):
    def __init__(self, name: str, field: Optional[str] = None) -> None:
        super().__init__(name, 'value_count', field)


class CardinalityAggregation(MetricAggregation):
    def __init__(self, name: str, field: Optional[str] = None) -> None:
        super().__init__(name, 'cardinality', field)

    def precision_threshold(self, threshold: int):
        """Counts below this threshold are expected to be close to accurate."""
        self._body['precision_threshold'] = threshold
        return self


class BucketAggregation(Aggregation):
    def field(self, field: str):
        self._body['field'] = field
        return self

    def script(self, script):
        self._body['script'] = script
        return self


class TermsAggregation(BucketAggregation):
    def __init__(self, name: str, field: Optional[str] = None, size: Optional[int] = None) -> None:
        super().__init__(name, 'terms', field)
        if size is not None:
            self._body['size'] = size

    def size(self, size: int):
        self._body['size'] = size
        return self

    def shard_size(self, size: int):
        self._body['shard_size'] = size
        return self

    def min_doc_count(self, count: int):
        self._body['min_doc_count'] = count
        return self

    def missing(self, value):
        self._body['missing'] = value
        return self

    def include(self, clause):
        self._body['include'] = clause
        return self

    def exclude(self, clause):
        self._body['exclude'] = clause
        return self

    def order(self, key: str, direction: str = 'desc'):
        self._body['order'] = {key: parse_direction(direction)}
        return self


class FilterAggregation(BucketAggregation):
    def __init__(self, name: str, filter_query: Optional[Expr] = None) -> None:
        super().__init__(name, 'filter')
        self._filter = filter_query

    def filter(self, filter_query: Expr):
        self._filter = filter_query
        return self

    def compile_body(self):
        if self._filter is None:
            raise MissingRequiredField(type(self).__name__, 'filter')
        return self._filter.compile()


class HistogramAggregationBase(BucketAggregation):
    """
    Options shared by the histogram style bucketing aggregations.

    Buckets are built over a fixed numeric ``interval`` for histograms or a
    calendar expression (``day``, ``week``, ``month``, ...) for date
    histograms. None of the setters validate their value except
    :meth:`order`; the cluster rejects malformed values at request time.
    """

    known_options = frozenset([
        'field', 'script', 'interval', 'format', 'offset', 'order',
        'min_doc_count', 'extended_bounds', 'hard_bounds', 'missing', 'keyed',
    ])

    def __init__(self, name: str, agg_type: str, field: Optional[str] = None, interval=None) -> None:
        super().__init__(name, agg_type, field)
        if interval is not None:
            self._body['interval'] = interval

    def interval(self, interval):
        self._body['interval'] = interval
        return self

    def format(self, fmt: str):
        """Format mask for ``key_as_string`` in the response buckets, e.g. ``####.00``."""
        self._body['format'] = fmt
        return self

    def offset(self, offset):
        """
        Shift the start of every bucket by ``offset``.

        A negative offset is not accepted by plain histograms, only by date
        histograms (``-1d``); this is left for the cluster to enforce.
        """
        self._body['offset'] = offset
        return self

    def order(self, key: str, direction: str = 'desc'):
        """
        :arg key: bucket key or metric to order by, e.g. ``_count``

        :arg direction: ``asc`` or ``desc`` in any casing
        """
        self._body['order'] = {key: parse_direction(direction)}
        return self

    def min_doc_count(self, count: int):
        self._body['min_doc_count'] = count
        return self

    def extended_bounds(self, min_bound, max_bound):
        self._body['extended_bounds'] = {'min': min_bound, 'max': max_bound}
        return self

    def hard_bounds(self, min_bound, max_bound):
        """Limit the buckets to this range, unlike ``extended_bounds`` which only widens it."""
        self._body['hard_bounds'] = {'min': min_bound, 'max': max_bound}
        return self

    def missing(self, value):
        self._body['missing'] = value
        return self

    def keyed(self, keyed: bool):
        self._body['keyed'] = keyed
        return self


class HistogramAggregation(HistogramAggregationBase):
    def __init__(self, name: str, field: Optional[str] = None, interval=None) -> None:
        super().__init__(name, 'histogram', field, interval)


class DateHistogramAggregation(HistogramAggregationBase):
    known_options = HistogramAggregationBase.known_options | {'time_zone', 'calendar_interval', 'fixed_interval'}

    def __init__(self, name: str, field: Optional[str] = None, interval=None) -> None:
        super().__init__(name, 'date_histogram', field, interval)

    def time_zone(self, tz: str):
        self._body['time_zone'] = tz
        return self

    def calendar_interval(self, interval: str):
        """Calendar aware interval such as ``month`` or ``1q``."""
        self._body['calendar_interval'] = interval
        return self

    def fixed_interval(self, interval: str):
        """Fixed length interval in SI units such as ``90m`` or ``2d``."""
        self._body['fixed_interval'] = interval
        return self
