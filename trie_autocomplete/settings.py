import os
from functools import wraps


def lazy_makedirs(func):
  @wraps(func)
  def wrapper(*args, **kwargs):
    path = func(*args, **kwargs)
    if not os.path.exists(path):
      os.makedirs(path)
    return path
  return wrapper


@lazy_makedirs
def get_home_dir():
  return os.getenv('TRIE_AUTOCOMPLETE_HOME',
                   os.path.join(os.path.expanduser('~'), '.trie_autocomplete'))


@lazy_makedirs
def get_log_dir():
  return os.path.join(get_home_dir(), 'logs')


def get_catalog_path():
  '''JSON catalog to index instead of the built-in sample products, if any.'''
  return os.getenv('TRIE_AUTOCOMPLETE_CATALOG') or None


def get_verbosity():
  return os.getenv('TRIE_AUTOCOMPLETE_VERBOSITY', 'info')
