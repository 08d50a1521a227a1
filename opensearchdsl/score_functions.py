from typing import Any, Dict, Optional

from opensearchdsl.base import Expr, OptionBag
from opensearchdsl.consts import DecayMode, FieldModifier, MultiValueMode, parse_choice
from opensearchdsl.errors import MissingRequiredField


class ScoreFunction(OptionBag):
    """
    One entry of a ``function_score`` query's ``functions`` list::

        {'filter': {...}, 'weight': 2, function_type: {...options}}

    A function without a type contributes only its ``weight``.
    """

    def __init__(self, function_type: Optional[str] = None) -> None:
        super().__init__(function_type or 'weight')
        self._function_type = function_type
        self._filter: Optional[Expr] = None
        self._weight: Optional[float] = None

    def filter(self, filter_query: Expr):
        self._filter = filter_query
        return self

    def weight(self, weight: float):
        self._weight = weight
        return self

    def compile_function(self):
        return self.compile_body()

    def compile(self):
        definition: Dict[str, Any] = {}
        if self._filter is not None:
            definition['filter'] = self._filter.compile()
        if self._weight is not None:
            definition['weight'] = self._weight
        if self._function_type is not None:
            definition[self._function_type] = self.compile_function()
        return definition


class WeightFunction(ScoreFunction):
    def __init__(self, weight: Optional[float] = None) -> None:
        super().__init__()
        self._weight = weight

    def compile(self):
        if self._weight is None:
            raise MissingRequiredField(type(self).__name__, 'weight')
        return super().compile()


class ScriptScoreFunction(ScoreFunction):
    def __init__(self, script=None) -> None:
        super().__init__('script_score')
        if script is not None:
            self._body['script'] = script

    def script(self, script):
        self._body['script'] = script
        return self

    def compile_function(self):
        if 'script' not in self._body:
            raise MissingRequiredField(type(self).__name__, 'script')
        return super().compile_function()


class RandomScoreFunction(ScoreFunction):
    def __init__(self) -> None:
        super().__init__('random_score')

    def seed(self, seed):
        self._body['seed'] = seed
        return self

    def field(self, field: str):
        self._body['field'] = field
        return self


class FieldValueFactorFunction(ScoreFunction):
    def __init__(self, field: Optional[str] = None) -> None:
        super().__init__('field_value_factor')
        if field is not None:
            self._body['field'] = field

    def field(self, field: str):
        self._body['field'] = field
        return self

    def factor(self, factor: float):
        self._body['factor'] = factor
        return self

    def modifier(self, modifier: str):
        self._body['modifier'] = parse_choice(FieldModifier, modifier, 'modifier')
        return self

    def missing(self, value: float):
        self._body['missing'] = value
        return self

    def compile_function(self):
        if 'field' not in self._body:
            raise MissingRequiredField(type(self).__name__, 'field')
        return super().compile_function()


class DecayScoreFunction(ScoreFunction):
    """
    ``linear``, ``exp`` or ``gauss`` decay around ``origin``; compiles to
    ``{mode: {field: {origin, scale, offset, decay}, 'multi_value_mode': ...}}``.
    """

    def __init__(self, mode: str = 'gauss', field: Optional[str] = None) -> None:
        super().__init__(parse_choice(DecayMode, mode, 'mode'))
        self._field = field
        self._multi_value_mode: Optional[str] = None

    def field(self, field: str):
        self._field = field
        return self

    def origin(self, origin):
        self._body['origin'] = origin
        return self

    def scale(self, scale):
        self._body['scale'] = scale
        return self

    def offset(self, offset):
        self._body['offset'] = offset
        return self

    def decay(self, decay: float):
        self._body['decay'] = decay
        return self

    def multi_value_mode(self, mode: str):
        self._multi_value_mode = parse_choice(MultiValueMode, mode, 'multi_value_mode')
        return self

    def compile_function(self):
        if self._field is None:
            raise MissingRequiredField(type(self).__name__, 'field')
        if 'scale' not in self._body:
            raise MissingRequiredField(type(self).__name__, 'scale')

        function = {self._field: self.compile_body()}
        if self._multi_value_mode is not None:
            function['multi_value_mode'] = self._multi_value_mode
        return function
