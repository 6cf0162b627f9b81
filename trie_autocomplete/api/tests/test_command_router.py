import pytest

from ... import catalog
from .. import command_router


@pytest.fixture
def router():
  return command_router.CommandRouter(catalog.build_trie())


def call(router, command_id, **kwargs):
  handler = router.get_handler(command_id)
  return handler(request_id=1, command_id=command_id, **kwargs)


def test_get_capabilities(router):
  result = call(router, 'get_capabilities')
  assert result[command_router.RESULT_CODE] == command_router.SUCCESS
  assert set(result['capabilities']) == {'get_suggestions', 'get_path', 'insert', 'get_capabilities'}


def test_get_suggestions(router):
  result = call(router, 'get_suggestions', prefix='app')
  assert result[command_router.RESULT_CODE] == command_router.SUCCESS
  assert result[command_router.REQUEST_ID] == 1
  assert [s['name'] for s in result['suggestions']] == ['Apple iPhone', 'Apple Watch']
  assert result['suggestions'][0] == {'id': 7, 'name': 'Apple iPhone', 'category': 'MOB', 'price': '999 CR'}


def test_get_suggestions_no_results(router):
  result = call(router, 'get_suggestions', prefix='')
  assert result['suggestions'] == []
  result = call(router, 'get_suggestions', prefix='qq')
  assert result['suggestions'] == []


def test_get_path(router):
  result = call(router, 'get_path', prefix='SOX')
  assert result[command_router.RESULT_CODE] == command_router.SUCCESS
  assert result['path'] == [
      {'character': '', 'is_terminal': False, 'depth': 0},
      {'character': 's', 'is_terminal': False, 'depth': 1},
      {'character': 'o', 'is_terminal': False, 'depth': 2},
  ]


def test_insert(router):
  result = call(router, 'insert', word='Apricot', payload={'name': 'Apricot'})
  assert result[command_router.RESULT_CODE] == command_router.SUCCESS
  result = call(router, 'get_suggestions', prefix='apr')
  assert result['suggestions'] == [{'name': 'Apricot'}]


def test_insert_rejects_non_string(router):
  result = call(router, 'insert', word=3, payload=None)
  assert result[command_router.RESULT_CODE] == command_router.FAILED
  assert 'word must be a string' in result[command_router.FAILURE_REASON]


def test_missing_argument_fails(router):
  result = call(router, 'get_suggestions')
  assert result[command_router.RESULT_CODE] == command_router.FAILED
  assert result[command_router.REQUEST_ID] == 1


def test_bad_command(router):
  result = call(router, 'drop_everything')
  assert result[command_router.RESULT_CODE] == command_router.FAILED
  assert 'drop_everything' in result[command_router.FAILURE_REASON]


def test_default_trie_uses_sample_catalog(monkeypatch):
  monkeypatch.delenv('TRIE_AUTOCOMPLETE_CATALOG', raising=False)
  router = command_router.CommandRouter()
  assert len(router.trie) == len(catalog.SAMPLE_PRODUCTS)
