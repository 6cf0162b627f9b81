"""trie_autocomplete logger wrapper.

This primarily just wraps the abseil logging module with a bit of shared
context handling.

The rationale for doing this is a few:
* Allows some consistent customization over abseil logging.
* Allows swapping out Abseil easily across the board - e.g. for logging to disk."""

import inspect
from contextlib import contextmanager

from absl import logging

logging.set_verbosity('info')

_context_list = []


def set_verbosity(level):
  logging.set_verbosity(level)


def push_context(value):
  _context_list.append(str(value))


def pop_context():
  return _context_list.pop()


@contextmanager
def context(value):
  push_context(value)
  try:
    yield
  finally:
    pop_context()


def _with_context(message):
  if not _context_list:
    return message
  return f'{"|".join(_context_list)}|{message}'


def info(message, *args, log=True, **kwargs):
  if log:
    logging.info(_with_context(message), *args, **kwargs)


def debug(message, *args, log=True, **kwargs):
  if log:
    logging.debug(_with_context(message), *args, **kwargs)


def warning(message, *args, log=True, **kwargs):
  if log:
    logging.warning(_with_context(message), *args, **kwargs)


def error(message, *args, log=True, **kwargs):
  if log:
    logging.error(_with_context(message), *args, **kwargs)


def log_to_dir(log_dir, program_name='trie_autocomplete'):
  logging.get_absl_handler().use_absl_log_file(program_name, log_dir)


def send_logs_to_nowhere():
  # The daemon speaks over stdout, so nothing else may write there.
  logging.get_absl_logger().disabled = True


# Make the Abseil logging module ignore the functions in this module when
# logging line numbers and functions.
for item in dir():
  if inspect.isfunction(globals()[item]):
    logging.skip_log_prefix(item)
