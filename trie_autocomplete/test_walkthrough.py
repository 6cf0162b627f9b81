import pytest

from .trie import Trie
from .walkthrough import Walkthrough


@pytest.fixture
def walkthrough():
  t = Trie()
  t.insert('app', 'app')
  t.insert('apple', 'apple')
  return Walkthrough(t, 'apt')


def test_inactive_uses_whole_term(walkthrough):
  assert not walkthrough.active
  assert walkthrough.effective_prefix == 'apt'
  step = walkthrough.current()
  assert step.index is None
  assert not step.matched
  assert [n.character for n in step.path] == ['', 'a', 'p']


def test_step_advances_and_wraps(walkthrough):
  prefixes = [walkthrough.step().prefix for _ in range(6)]
  assert prefixes == ['', 'a', 'ap', 'apt', '', 'a'], prefixes
  assert walkthrough.step_index == 1


def test_step_reports_match(walkthrough):
  walkthrough.search_term = 'app'
  steps = [walkthrough.step() for _ in range(4)]
  assert [s.matched for s in steps] == [True, True, True, True]
  assert [s.terminal for s in steps] == [False, False, False, True]
  assert steps[-1].node.payload == 'app'


def test_reset(walkthrough):
  walkthrough.step()
  walkthrough.step()
  assert walkthrough.effective_prefix == 'a'
  walkthrough.reset()
  assert not walkthrough.active
  assert walkthrough.effective_prefix == 'apt'


def test_set_search_term_resets(walkthrough):
  walkthrough.step()
  walkthrough.set_search_term('ap')
  assert walkthrough.step_index is None
  assert walkthrough.effective_prefix == 'ap'


def test_suggestions_ignore_step(walkthrough):
  walkthrough.set_search_term('app')
  walkthrough.step()
  assert walkthrough.effective_prefix == ''
  assert walkthrough.suggestions() == ['app', 'apple']


def test_steps(walkthrough):
  steps = list(walkthrough.steps())
  assert [s.prefix for s in steps] == ['', 'a', 'ap', 'apt']
  assert [len(s.path) for s in steps] == [1, 2, 3, 3]
  assert [s.matched for s in steps] == [True, True, True, False]


def test_requires_trie():
  with pytest.raises(TypeError):
    Walkthrough('not a trie', 'a')


def test_matched_uses_lowercased_prefix():
  # 'İ' lowercases to two characters: 'i' and a combining dot.
  t = Trie()
  t.insert('İx', 'x')
  step = list(Walkthrough(t, 'İ').steps())[-1]
  assert len(step.path) == 3
  assert step.matched
  assert not list(Walkthrough(t, 'İy').steps())[-1].matched
