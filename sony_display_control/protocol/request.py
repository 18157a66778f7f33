# Copyright (c) 2023 Samuel J. McKelvie
#
# MIT License - See LICENSE file accompanying this package.
#

from __future__ import annotations

import copy
import json

from ..internal_types import *
from .method_meta import MethodMeta, EndpointCategory, name_to_method_meta
from .params import MethodParams

class SonyRequest:
    """A JSON-RPC style request envelope for a Sony display.

    The wire form is:

        {"method": "<name>", "id": <int>, "params": [<params>...], "version": "<version>"}

    Where params is either empty or contains a single parameter object. A request
    is immutable once created.
    """
    __slots__ = ('_method_meta', '_params')

    _method_meta: MethodMeta
    _params: Tuple[JsonableDict, ...]

    def __init__(self, method_meta: MethodMeta, params: Sequence[JsonableDict]=()):
        self._method_meta = method_meta
        self._params = tuple(copy.deepcopy(dict(p)) for p in params)

    @classmethod
    def create(cls, method_name: str, params: Optional[MethodParams]=None) -> SonyRequest:
        """Creates a request for a known vendor method.

        Raises ValueError if params belong to a different method.
        """
        method_meta = name_to_method_meta(method_name)
        if params is None:
            return cls(method_meta)
        if params.method_name != method_name:
            raise ValueError(f"{params} cannot be used with method {method_name}")
        return cls(method_meta, [params.to_jsonable()])

    @property
    def method_meta(self) -> MethodMeta:
        return self._method_meta

    @property
    def method(self) -> str:
        return self._method_meta.name

    @property
    def version(self) -> str:
        return self._method_meta.version

    @property
    def id(self) -> int:
        return self._method_meta.request_id

    @property
    def category(self) -> EndpointCategory:
        return self._method_meta.category

    @property
    def params(self) -> List[JsonableDict]:
        """Returns a copy of the parameter objects"""
        return copy.deepcopy(list(self._params))

    def to_jsonable(self) -> JsonableDict:
        return {
            "method": self.method,
            "id": self.id,
            "params": self.params,
            "version": self.version,
          }

    def encode(self) -> bytes:
        """Returns the UTF-8 encoded JSON wire form of the request"""
        return json.dumps(self.to_jsonable(), separators=(',', ':')).encode('utf-8')

    def __str__(self) -> str:
        return f"SonyRequest({self.category}/{self.method} v{self.version}, params={list(self._params)})"

    def __repr__(self) -> str:
        return str(self)
