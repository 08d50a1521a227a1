from typing import Any, Dict, Optional

from opensearchdsl.base import OptionBag
from opensearchdsl.errors import MissingRequiredField


class Script(OptionBag):
    """
    An inline (``source``) or stored (``id``) script, usable wherever the DSL
    takes a ``script`` option. Setting one kind of script drops the other.
    """

    def __init__(self, source: Optional[str] = None, lang: Optional[str] = None) -> None:
        super().__init__('script')
        if source is not None:
            self._body['source'] = source
        if lang is not None:
            self._body['lang'] = lang

    def source(self, source: str):
        self._body.pop('id', None)
        self._body['source'] = source
        return self

    def id(self, script_id: str):
        self._body.pop('source', None)
        self._body['id'] = script_id
        return self

    def lang(self, lang: str):
        self._body['lang'] = lang
        return self

    def params(self, params: Dict[str, Any]):
        self._body['params'] = params
        return self

    def compile(self):
        if 'source' not in self._body and 'id' not in self._body:
            raise MissingRequiredField(type(self).__name__, 'source')
        return self.compile_body()
