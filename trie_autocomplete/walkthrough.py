'''Step mode: replays a search term one character at a time against a Trie.

Starting inactive, each step() moves the cursor to the next prefix of the search term (wrapping
back to the empty prefix once the whole term has been shown), so a viewer can watch the active
path grow node by node.'''
import attr

from .trie import Trie, normalize


@attr.s(frozen=True)
class Step:
  index = attr.ib()
  prefix = attr.ib()
  path = attr.ib()

  @property
  def matched(self):
    '''Whether every character of prefix was found.'''
    return len(self.path) == len(normalize(self.prefix)) + 1

  @property
  def terminal(self):
    return self.path[-1].is_terminal

  @property
  def node(self):
    return self.path[-1]


@attr.s
class Walkthrough:
  trie = attr.ib(validator=attr.validators.instance_of(Trie))
  search_term = attr.ib(default='')
  step_index = attr.ib(default=None)

  @property
  def active(self):
    return self.step_index is not None

  @property
  def effective_prefix(self):
    if self.step_index is None:
      return self.search_term
    return self.search_term[:self.step_index]

  def step(self) -> Step:
    if self.step_index is None or self.step_index >= len(self.search_term):
      self.step_index = 0
    else:
      self.step_index += 1
    return self.current()

  def reset(self):
    self.step_index = None

  def set_search_term(self, search_term):
    self.search_term = search_term
    self.reset()

  def current(self) -> Step:
    prefix = self.effective_prefix
    return Step(self.step_index, prefix, self.trie.get_path(prefix))

  def suggestions(self):
    # Always computed from the whole term - stepping only drives the highlighted path.
    return self.trie.get_suggestions(self.search_term)

  def steps(self):
    for i in range(len(self.search_term) + 1):
      prefix = self.search_term[:i]
      yield Step(i, prefix, self.trie.get_path(prefix))
