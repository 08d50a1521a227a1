"""Snake case shortcuts for every builder, e.g. ``histogram_aggregation('ages', 'age', 10)``."""
import functools

from opensearchdsl import aggs, geo, query, score_functions, search
from opensearchdsl.script import Script


def constructor_wrapper(cls):
    @functools.wraps(cls, updated=())
    def factory(*args, **kwargs):
        return cls(*args, **kwargs)

    return factory


# queries
match_all_query = constructor_wrapper(query.MatchAllQuery)
match_none_query = constructor_wrapper(query.MatchNoneQuery)
match_query = constructor_wrapper(query.MatchQuery)
match_phrase_query = constructor_wrapper(query.MatchPhraseQuery)
match_phrase_prefix_query = constructor_wrapper(query.MatchPhrasePrefixQuery)
term_query = constructor_wrapper(query.TermQuery)
terms_query = constructor_wrapper(query.TermsQuery)
prefix_query = constructor_wrapper(query.PrefixQuery)
wildcard_query = constructor_wrapper(query.WildcardQuery)
regexp_query = constructor_wrapper(query.RegexpQuery)
exists_query = constructor_wrapper(query.ExistsQuery)
ids_query = constructor_wrapper(query.IdsQuery)
range_query = constructor_wrapper(query.RangeQuery)
bool_query = constructor_wrapper(query.BoolQuery)
model_query = constructor_wrapper(query.ModelQuery)
constant_score_query = constructor_wrapper(query.ConstantScoreQuery)
dis_max_query = constructor_wrapper(query.DisMaxQuery)
boosting_query = constructor_wrapper(query.BoostingQuery)
function_score_query = constructor_wrapper(query.FunctionScoreQuery)

# score functions
score_function = constructor_wrapper(score_functions.ScoreFunction)
weight_function = constructor_wrapper(score_functions.WeightFunction)
script_score_function = constructor_wrapper(score_functions.ScriptScoreFunction)
random_score_function = constructor_wrapper(score_functions.RandomScoreFunction)
field_value_factor_function = constructor_wrapper(score_functions.FieldValueFactorFunction)
decay_score_function = constructor_wrapper(score_functions.DecayScoreFunction)

# geo
geo_point = constructor_wrapper(geo.GeoPoint)
geo_distance_query = constructor_wrapper(geo.GeoDistanceQuery)
geo_bounding_box_query = constructor_wrapper(geo.GeoBoundingBoxQuery)

# metrics aggregations
avg_aggregation = constructor_wrapper(aggs.AvgAggregation)
sum_aggregation = constructor_wrapper(aggs.SumAggregation)
min_aggregation = constructor_wrapper(aggs.MinAggregation)
max_aggregation = constructor_wrapper(aggs.MaxAggregation)
stats_aggregation = constructor_wrapper(aggs.StatsAggregation)
extended_stats_aggregation = constructor_wrapper(aggs.ExtendedStatsAggregation)
value_count_aggregation = constructor_wrapper(aggs.ValueCountAggregation)
cardinality_aggregation = constructor_wrapper(aggs.CardinalityAggregation)

# bucket aggregations
terms_aggregation = constructor_wrapper(aggs.TermsAggregation)
filter_aggregation = constructor_wrapper(aggs.FilterAggregation)
histogram_aggregation = constructor_wrapper(aggs.HistogramAggregation)
date_histogram_aggregation = constructor_wrapper(aggs.DateHistogramAggregation)

# request body
request_body_search = constructor_wrapper(search.RequestBodySearch)
sort = constructor_wrapper(search.Sort)
highlight = constructor_wrapper(search.Highlight)
script = constructor_wrapper(Script)
