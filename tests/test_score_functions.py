import pytest

from opensearchdsl.errors import InvalidArgument, MissingRequiredField
from opensearchdsl.query import FunctionScoreQuery, MatchQuery, TermQuery
from opensearchdsl.score_functions import (
    DecayScoreFunction,
    FieldValueFactorFunction,
    RandomScoreFunction,
    ScoreFunction,
    ScriptScoreFunction,
    WeightFunction,
)
from opensearchdsl.script import Script


def test_score_function_filter_and_weight():
    function = ScoreFunction().filter(TermQuery('tag', 'new')).weight(2)

    assert function.compile() == {'filter': {'term': {'tag': {'value': 'new'}}}, 'weight': 2}


def test_weight_function_requires_weight():
    assert WeightFunction(3).compile() == {'weight': 3}

    with pytest.raises(MissingRequiredField):
        WeightFunction().compile()


def test_script_score_function():
    function = ScriptScoreFunction(Script("_score * doc['likes'].value").params({'a': 1})).weight(0.5)

    assert function.compile() == {
        'weight': 0.5,
        'script_score': {'script': {'source': "_score * doc['likes'].value", 'params': {'a': 1}}},
    }

    with pytest.raises(MissingRequiredField):
        ScriptScoreFunction().compile()


def test_random_score_function():
    assert RandomScoreFunction().compile() == {'random_score': {}}
    assert RandomScoreFunction().seed(10).field('_seq_no').compile() == {
        'random_score': {'seed': 10, 'field': '_seq_no'}
    }


def test_field_value_factor_function():
    function = FieldValueFactorFunction('likes').factor(1.2).modifier('sqrt').missing(1)

    assert function.compile() == {
        'field_value_factor': {'field': 'likes', 'factor': 1.2, 'modifier': 'sqrt', 'missing': 1}
    }


def test_field_value_factor_validation():
    with pytest.raises(InvalidArgument):
        FieldValueFactorFunction('likes').modifier('cube')
    with pytest.raises(MissingRequiredField):
        FieldValueFactorFunction().compile()


def test_decay_score_function():
    function = (
        DecayScoreFunction('exp', 'date')
        .origin('2013-09-17')
        .scale('10d')
        .offset('5d')
        .decay(0.5)
        .multi_value_mode('avg')
    )

    assert function.compile() == {
        'exp': {
            'date': {'origin': '2013-09-17', 'scale': '10d', 'offset': '5d', 'decay': 0.5},
            'multi_value_mode': 'avg',
        }
    }


def test_decay_score_function_validation():
    with pytest.raises(InvalidArgument):
        DecayScoreFunction('cubic', 'date')
    with pytest.raises(InvalidArgument):
        DecayScoreFunction('gauss', 'date').multi_value_mode('median')
    with pytest.raises(MissingRequiredField):
        DecayScoreFunction('gauss').scale('2km').compile()
    with pytest.raises(MissingRequiredField):
        DecayScoreFunction('gauss', 'location').origin('0,0').compile()


def test_function_score_query():
    query = (
        FunctionScoreQuery(MatchQuery('title', 'python'))
        .function(FieldValueFactorFunction('likes'))
        .functions(WeightFunction(2).filter(TermQuery('tag', 'new')), RandomScoreFunction())
        .score_mode('sum')
        .boost_mode('replace')
        .max_boost(42)
        .min_score(1)
        .boost(5)
    )

    assert query.compile() == {
        'function_score': {
            'query': {'match': {'title': {'query': 'python'}}},
            'functions': [
                {'field_value_factor': {'field': 'likes'}},
                {'filter': {'term': {'tag': {'value': 'new'}}}, 'weight': 2},
                {'random_score': {}},
            ],
            'score_mode': 'sum',
            'boost_mode': 'replace',
            'max_boost': 42,
            'min_score': 1,
            'boost': 5,
        }
    }


@pytest.mark.parametrize('setter,value', [
    ('score_mode', 'replace'),
    ('score_mode', 'median'),
    ('boost_mode', 'first'),
    ('boost_mode', ''),
])
def test_function_score_modes_validated(setter, value):
    with pytest.raises(InvalidArgument):
        getattr(FunctionScoreQuery(), setter)(value)
