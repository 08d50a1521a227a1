import pytest

from opensearchdsl.aggs import (
    AvgAggregation,
    CardinalityAggregation,
    ExtendedStatsAggregation,
    FilterAggregation,
    HistogramAggregation,
    SumAggregation,
    TermsAggregation,
)
from opensearchdsl.errors import InvalidArgument, MissingRequiredField
from opensearchdsl.query import TermQuery


def test_metric_aggregation():
    agg = AvgAggregation('avg_grade', 'grade').missing(10).format('0.0')

    assert agg.compile() == {'avg_grade': {'avg': {'field': 'grade', 'missing': 10, 'format': '0.0'}}}


def test_metric_aggregation_accepts_script_instead_of_field():
    agg = SumAggregation('total').script({'source': "doc['price'].value * 2"})

    assert agg.compile() == {'total': {'sum': {'script': {'source': "doc['price'].value * 2"}}}}


def test_metric_aggregation_requires_field():
    with pytest.raises(MissingRequiredField) as exc:
        AvgAggregation('avg_grade').compile()

    assert exc.value.option == 'field'


def test_cardinality_and_extended_stats():
    assert CardinalityAggregation('users', 'user_id').precision_threshold(100).compile() == {
        'users': {'cardinality': {'field': 'user_id', 'precision_threshold': 100}}
    }
    assert ExtendedStatsAggregation('grades', 'grade').sigma(3).compile() == {
        'grades': {'extended_stats': {'field': 'grade', 'sigma': 3}}
    }


def test_terms_aggregation():
    agg = (
        TermsAggregation('genres', 'genre', size=5)
        .shard_size(20)
        .min_doc_count(2)
        .include('.*sport.*')
        .exclude(['water_.*'])
        .order('_count', 'Asc')
    )

    assert agg.compile() == {
        'genres': {
            'terms': {
                'field': 'genre',
                'size': 5,
                'shard_size': 20,
                'min_doc_count': 2,
                'include': '.*sport.*',
                'exclude': ['water_.*'],
                'order': {'_count': 'asc'},
            }
        }
    }


def test_terms_order_rejects_invalid_direction():
    with pytest.raises(InvalidArgument):
        TermsAggregation('genres', 'genre').order('_count', 'sideways')


def test_sub_aggregations():
    agg = (
        TermsAggregation('genres', 'genre')
        .agg(AvgAggregation('avg_price', 'price'))
        .aggs(HistogramAggregation('prices', 'price', 50), SumAggregation('total', 'price'))
        .meta({'color': 'blue'})
    )

    assert agg.compile() == {
        'genres': {
            'terms': {'field': 'genre'},
            'aggs': {
                'avg_price': {'avg': {'field': 'price'}},
                'prices': {'histogram': {'field': 'price', 'interval': 50}},
                'total': {'sum': {'field': 'price'}},
            },
            'meta': {'color': 'blue'},
        }
    }


def test_nested_is_alias_of_agg():
    agg = TermsAggregation('genres', 'genre').nested(SumAggregation('total', 'price'))

    assert list(agg.children) == ['total']


def test_filter_aggregation():
    agg = FilterAggregation('t_shirts', TermQuery('type', 't-shirt')).agg(AvgAggregation('avg_price', 'price'))

    assert agg.compile() == {
        't_shirts': {
            'filter': {'term': {'type': {'value': 't-shirt'}}},
            'aggs': {'avg_price': {'avg': {'field': 'price'}}},
        }
    }


def test_filter_aggregation_requires_filter():
    with pytest.raises(MissingRequiredField):
        FilterAggregation('t_shirts').compile()
