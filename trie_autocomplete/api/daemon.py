'''Daemon answering trie queries for an external renderer.

Requests are read one JSON object per line from the input stream and responses written one JSON
object per line - successes to the output stream and failures to the error stream.
'''
import io
import json
import sys
import traceback

import attr

from . import command_router
from .. import trie_logging
from ..errors import InvalidRequestError


def _create_input():
  return io.open(sys.stdin.fileno(), encoding='utf-8')


@attr.s
class Daemon:
  _daemon = attr.ib(default=False)
  _input = attr.ib(factory=_create_input)
  _output = attr.ib(factory=lambda: sys.stdout)
  _error_output = attr.ib(factory=lambda: sys.stderr)
  _command_router = attr.ib(factory=command_router.CommandRouter)

  def _process_request(self, request):
    if not isinstance(request, dict):
      raise InvalidRequestError('Request must be a JSON object')
    if not request.get(command_router.REQUEST_ID):
      raise InvalidRequestError('Empty request id')

    command_id = request.get(command_router.COMMAND_ID)
    handler = self._command_router.get_handler(command_id)
    return handler(**request)

  def _write(self, stream, response):
    stream.write(json.dumps(response))
    stream.write('\n')
    stream.flush()

  def process_input(self, raise_exception=True):
    '''Handles a single request line. Returns False once the input is exhausted.'''
    line = self._input.readline()
    if not line:
      return False
    if not line.strip():
      return True
    request_id = -1
    try:
      request = json.loads(line)
      if isinstance(request, dict):
        request_id = request.get(command_router.REQUEST_ID, request_id)
      response = self._process_request(request)
      if response.get(command_router.RESULT_CODE) == command_router.SUCCESS:
        self._write(self._output, response)
      else:
        self._write(self._error_output, response)
    except Exception as e:
      self._write(
          self._error_output, {
              command_router.REQUEST_ID: request_id,
              command_router.RESULT_CODE: command_router.FAILED,
              command_router.FAILURE_REASON: str(e),
              'traceback': traceback.format_exc(),
              'type': type(e).__name__
          })
      if raise_exception:
        raise
    return True

  def watch(self):
    while True:
      try:
        if not self.process_input(raise_exception=not self._daemon):
          break
      except Exception:
        if not self._daemon:
          raise


def main():
  # stdout is the API to listeners.
  trie_logging.send_logs_to_nowhere()
  Daemon('-d' in sys.argv).watch()


if __name__ == '__main__':
  main()
