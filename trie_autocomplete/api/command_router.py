from functools import wraps

import attr

from .. import catalog
from ..trie import Trie
from ..trie_logging import error, info

RESULT_CODE = 'result_code'
SUCCESS = 0
FAILED = 1
FAILURE_REASON = 'failure_reason'
REQUEST_ID = 'request_id'
COMMAND_ID = 'command_id'
VERSION = 0.1


def return_error_on_exception(func):
  @wraps(func)
  def wrapper(*args, **kwargs):
    try:
      return func(*args, **kwargs)
    except Exception as e:
      error(f'{func.__name__} failed: {e}')
      return {REQUEST_ID: kwargs.get(REQUEST_ID), RESULT_CODE: FAILED, FAILURE_REASON: str(e)}

  return wrapper


def _default_trie():
  return catalog.build_trie(catalog.load_default_catalog())


def serialize_payload(payload):
  if hasattr(payload, 'to_dict'):
    return payload.to_dict()
  return payload


def serialize_path(path):
  return [{
      'character': node.character,
      'is_terminal': node.is_terminal,
      'depth': depth
  } for depth, node in enumerate(path)]


@attr.s
class CommandRouter:
  trie = attr.ib(factory=_default_trie, validator=attr.validators.instance_of(Trie))

  def get_handler(self, command_id: str):
    func_name = f'handle_{command_id}'
    if hasattr(self, func_name):
      return getattr(self, func_name)
    return self.handle_bad_command

  def handle_bad_command(self, command_id, request_id=None, **kwargs):
    return {
        REQUEST_ID: request_id,
        RESULT_CODE: FAILED,
        FAILURE_REASON: f'"{command_id}" is not a valid command_id.'
    }

  @return_error_on_exception
  def handle_get_capabilities(self, request_id, command_id):
    return {
        REQUEST_ID: request_id,
        RESULT_CODE: SUCCESS,
        'capabilities': {
            'get_suggestions': {
                'version': VERSION,
                'inputs': ['prefix'],
                'outputs': ['suggestions']
            },
            'get_path': {
                'version': VERSION,
                'inputs': ['prefix'],
                'outputs': ['path']
            },
            'insert': {
                'version': VERSION,
                'inputs': ['word', 'payload'],
                'outputs': []
            },
            'get_capabilities': {
                'version': VERSION,
                'inputs': [],
                'outputs': ['capabilities']
            }
        }
    }

  @return_error_on_exception
  def handle_get_suggestions(self, request_id, command_id, prefix):
    suggestions = self.trie.get_suggestions(prefix)
    info(f'{len(suggestions)} suggestions for "{prefix}"')
    return {
        REQUEST_ID: request_id,
        RESULT_CODE: SUCCESS,
        'suggestions': [serialize_payload(s) for s in suggestions]
    }

  @return_error_on_exception
  def handle_get_path(self, request_id, command_id, prefix):
    return {
        REQUEST_ID: request_id,
        RESULT_CODE: SUCCESS,
        'path': serialize_path(self.trie.get_path(prefix))
    }

  @return_error_on_exception
  def handle_insert(self, request_id, command_id, word, payload=None):
    if not isinstance(word, str):
      raise TypeError(f'word must be a string, got {type(word).__name__}')
    self.trie.insert(word, payload)
    return {REQUEST_ID: request_id, RESULT_CODE: SUCCESS}
