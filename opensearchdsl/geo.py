import abc
from typing import Optional

from opensearchdsl.base import Expr
from opensearchdsl.consts import DistanceType, parse_choice
from opensearchdsl.errors import MissingRequiredField
from opensearchdsl.query import Query


class GeoPoint(Expr):
    """
    A geo point in one of the representations the DSL accepts: an object
    with ``lat``/``lon``, a ``[lon, lat]`` array, a ``"lat,lon"`` string or
    a geohash. Setting a representation replaces the previous one.
    """

    def __init__(self) -> None:
        self._point = None

    def lat_lon(self, lat: float, lon: float):
        self._point = {'lat': lat, 'lon': lon}
        return self

    def array(self, lon: float, lat: float):
        self._point = [lon, lat]
        return self

    def string(self, point: str):
        self._point = point
        return self

    def geohash(self, geohash: str):
        self._point = geohash
        return self

    def compile(self):
        if self._point is None:
            raise MissingRequiredField(type(self).__name__, 'point')
        return self._point


class GeoQueryBase(Query):
    def __init__(self, query_type: str, field: Optional[str] = None) -> None:
        super().__init__(query_type)
        self._field = field

    def field(self, field: str):
        self._field = field
        return self

    @abc.abstractmethod
    def compile_point(self):
        ...

    def compile(self):
        if self._field is None:
            raise MissingRequiredField(type(self).__name__, 'field')

        body = {self._field: self.compile_point()}
        body.update(self.compile_body())
        return {self.body_type: body}


class GeoDistanceQuery(GeoQueryBase):
    def __init__(self, field: Optional[str] = None, point: Optional[GeoPoint] = None) -> None:
        super().__init__('geo_distance', field)
        self._point = point

    def geo_point(self, point: GeoPoint):
        self._point = point
        return self

    def distance(self, distance):
        """Radius of the circle, e.g. ``12km`` or a number in meters."""
        self._body['distance'] = distance
        return self

    def distance_type(self, distance_type: str):
        self._body['distance_type'] = parse_choice(DistanceType, distance_type, 'distance_type')
        return self

    def compile_point(self):
        if self._point is None:
            raise MissingRequiredField(type(self).__name__, 'point')
        if 'distance' not in self._body:
            raise MissingRequiredField(type(self).__name__, 'distance')
        return self._point.compile()


class GeoBoundingBoxQuery(GeoQueryBase):
    def __init__(self, field: Optional[str] = None) -> None:
        super().__init__('geo_bounding_box', field)
        self._corners = {}

    def top_left(self, point: GeoPoint):
        self._corners['top_left'] = point
        return self

    def bottom_right(self, point: GeoPoint):
        self._corners['bottom_right'] = point
        return self

    def compile_point(self):
        for corner in ('top_left', 'bottom_right'):
            if corner not in self._corners:
                raise MissingRequiredField(type(self).__name__, corner)
        return {k: v.compile() for k, v in self._corners.items()}
