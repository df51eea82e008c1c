# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Exception classes for the errors that jsonf reports per file.
Read and stat failures are reported as the standard `OSError` subclasses.
'''


class ParseError(ValueError):
  'Raised when the input text is not valid JSON.'


class WriteError(OSError):
  'Raised when a reformatted file could not be written back to its path.'

  def __init__(self, path:str, msg:str) -> None:
    super().__init__(msg)
    self.path = path


jsonf_errors = (OSError, ParseError)
#^ The errors that are reported per file and do not abort a batch. WriteError is an OSError.


def error_msg(exc:BaseException) -> str:
  '''
  Describe an exception for a one-line diagnostic.
  For `OSError`, the bare `strerror` is used when present, since the path is reported separately.
  '''
  if isinstance(exc, OSError) and exc.strerror: return exc.strerror
  return str(exc)
