# Copyright (c) 2023 Samuel J. McKelvie
#
# MIT License - See LICENSE file accompanying this package.
#

from __future__ import annotations

import json

from ..internal_types import *
from ..exceptions import ProtocolError

class SonyResponse:
    """A response envelope from a Sony display

    Responses are of the form:

        {"id": <int>, "result": [<entry>...]}

    or, on failure:

        {"id": <int>, "error": [<code>, "<message>"]}

    The shape of each result entry depends on the method. It may be a flat object,
    a list of objects, or a list of records; interpreting it is up to the caller.
    """
    id: Optional[int]
    result: List[Any]
    error: List[Any]

    def __init__(
            self,
            id: Optional[int]=None,
            result: Optional[List[Any]]=None,
            error: Optional[List[Any]]=None,
          ):
        self.id = id
        self.result = [] if result is None else result
        self.error = [] if error is None else error

    @classmethod
    def decode(cls, data: Union[bytes, str], expect_result: bool=True) -> SonyResponse:
        """Decodes and checks a raw response body.

        Raises ProtocolError if the body is not a JSON object, if the error list is
        not empty, or if expect_result is True and the result list is empty.
        """
        try:
            obj = json.loads(data)
        except ValueError as e:
            raise ProtocolError(f"failed to unmarshal response from display: {e}") from e
        if not isinstance(obj, dict):
            raise ProtocolError(f"Response from display is not a JSON object: {obj!r}")

        result = obj.get("result")
        error = obj.get("error")
        if result is None:
            result = []
        if error is None:
            error = []
        if not isinstance(result, list) or not isinstance(error, list):
            raise ProtocolError(f"Malformed response envelope from display: {obj!r}")

        response = cls(id=obj.get("id"), result=result, error=error)
        response.check(expect_result=expect_result)
        return response

    @property
    def error_code(self) -> Optional[int]:
        """The vendor error code, if the error list starts with one"""
        if len(self.error) > 0 and isinstance(self.error[0], int) and not isinstance(self.error[0], bool):
            return self.error[0]
        return None

    @property
    def error_message(self) -> str:
        return " ".join(str(x) for x in self.error)

    def check(self, expect_result: bool=True) -> None:
        """Raises ProtocolError if the response reports an error, or has no result
           where one is expected."""
        if len(self.error) > 0:
            raise ProtocolError(f"error response from display: {self.error_message}", error_code=self.error_code)
        if expect_result and len(self.result) == 0:
            raise ProtocolError("error response from display: empty result")

    def first_result(self) -> Any:
        """Returns the first result entry. Raises ProtocolError if there is none."""
        if len(self.result) == 0:
            raise ProtocolError("error response from display: empty result")
        return self.result[0]

    def __str__(self) -> str:
        return f"SonyResponse(id={self.id}, result={self.result!r}, error={self.error!r})"

    def __repr__(self) -> str:
        return str(self)
