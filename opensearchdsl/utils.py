import json
from typing import Any, Dict

from opensearchdsl.aggs import Aggregation, BucketAggregation


def parse_aggregations(data: Dict[str, Any], agg: Aggregation):
    """
    Flatten the response of ``agg`` found in a search response's
    ``aggregations`` section.

    Bucket aggregations become ``{bucket_key: child_result or doc_count}``
    following the first sub-aggregation; single value metrics become their
    value and multi value metrics are returned as is.
    """
    level = data.get(agg.name, None)
    if level is None:
        return

    if 'buckets' in level:
        child = next(iter(agg.children.values()), None)
        buckets = level['buckets']
        if isinstance(buckets, dict):
            buckets = [dict({'key': k}, **b) for k, b in buckets.items()]

        result = {}
        for b in buckets:
            key = b['key']
            count = b['doc_count']
            result[key] = parse_aggregations(b, child) if child is not None else count
        return result
    elif isinstance(agg, BucketAggregation) and 'doc_count' in level:
        child = next(iter(agg.children.values()), None)
        return parse_aggregations(level, child) if child is not None else level['doc_count']
    elif 'value' in level:
        return level['value']
    else:
        return level


def pretty_print(obj):
    """Print a builder or plain structure as indented JSON, for development."""
    if hasattr(obj, 'compile'):
        obj = obj.compile()
    print(json.dumps(obj, indent=2))
