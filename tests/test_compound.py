import pytest

from opensearchdsl.aggs import AvgAggregation
from opensearchdsl.errors import MissingRequiredField
from opensearchdsl.query import BoostingQuery, ConstantScoreQuery, DisMaxQuery, TermQuery
from opensearchdsl.script import Script


def test_constant_score_query():
    query = ConstantScoreQuery(TermQuery('user', 'kimchy')).boost(1.2)

    assert query.compile() == {
        'constant_score': {'filter': {'term': {'user': {'value': 'kimchy'}}}, 'boost': 1.2}
    }

    with pytest.raises(MissingRequiredField):
        ConstantScoreQuery().compile()


def test_dis_max_query():
    query = DisMaxQuery(TermQuery('title', 'quick')).queries(TermQuery('body', 'quick')).tie_breaker(0.7)

    assert query.compile() == {
        'dis_max': {
            'queries': [
                {'term': {'title': {'value': 'quick'}}},
                {'term': {'body': {'value': 'quick'}}},
            ],
            'tie_breaker': 0.7,
        }
    }

    with pytest.raises(MissingRequiredField):
        DisMaxQuery().compile()


def test_boosting_query():
    query = BoostingQuery(TermQuery('text', 'apple'), TermQuery('text', 'pie'), 0.5)

    assert query.compile() == {
        'boosting': {
            'positive': {'term': {'text': {'value': 'apple'}}},
            'negative': {'term': {'text': {'value': 'pie'}}},
            'negative_boost': 0.5,
        }
    }


def test_boosting_query_requires_all_parts():
    with pytest.raises(MissingRequiredField) as exc:
        BoostingQuery().positive(TermQuery('text', 'apple')).negative_boost(0.2).compile()
    assert exc.value.option == 'negative'

    with pytest.raises(MissingRequiredField) as exc:
        BoostingQuery(TermQuery('text', 'apple'), TermQuery('text', 'pie')).compile()
    assert exc.value.option == 'negative_boost'


def test_script():
    script = Script("doc['price'].value * params.factor", 'painless').params({'factor': 2})

    assert script.compile() == {
        'source': "doc['price'].value * params.factor",
        'lang': 'painless',
        'params': {'factor': 2},
    }


def test_stored_script_replaces_source():
    script = Script('1 + 1').id('calculate-score')

    assert script.compile() == {'id': 'calculate-score'}
    assert script.source('2').compile() == {'source': '2'}


def test_script_requires_source_or_id():
    with pytest.raises(MissingRequiredField):
        Script().lang('painless').compile()


def test_script_inside_aggregation():
    agg = AvgAggregation('avg_price').script(Script("doc['price'].value"))

    assert agg.compile() == {'avg_price': {'avg': {'script': {'source': "doc['price'].value"}}}}
