# Copyright (c) 2023 Samuel J. McKelvie
#
# MIT License - See LICENSE file accompanying this package.
#

"""Exceptions defined by this package"""

from typing import Optional

class SonyDisplayError(Exception):
  """Base class for all error exceptions defined by this package."""
  pass

class TransportError(SonyDisplayError):
  """The HTTP exchange with the display failed (network error or non-2xx status)."""
  status_code: Optional[int]

  def __init__(self, message: str, status_code: Optional[int]=None):
    super().__init__(message)
    self.status_code = status_code

class DeadlineExceededError(TransportError):
  """The caller's deadline passed before the HTTP exchange completed."""
  pass

class ProtocolError(SonyDisplayError):
  """The display answered, but the response envelope reports an error, is empty
     where a result was expected, or is not valid JSON."""
  error_code: Optional[int]

  def __init__(self, message: str, error_code: Optional[int]=None):
    super().__init__(message)
    self.error_code = error_code

class ParseError(ProtocolError):
  """A well-formed response carried a value whose shape could not be interpreted."""
  pass

class ValidationError(SonyDisplayError):
  """Caller input is out of contract. Raised before any network call is made."""
  pass

class ConfirmationTimeoutError(SonyDisplayError):
  """The display did not reach the requested state before the deadline."""
  pass

class ConfirmationExhaustedError(SonyDisplayError):
  """The display did not confirm the requested state after all attempts."""
  attempts: int

  def __init__(self, message: str, attempts: int):
    super().__init__(message)
    self.attempts = attempts
