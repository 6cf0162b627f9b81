'''A character-per-node Trie used to serve prefix autocomplete over a small catalog.

Every inserted word is lowercased and indexed one character per level beneath a single root node.
A node reached by the last character of an inserted word is terminal and holds the payload the
caller associated with that word.

Unlike the classic autocomplete trie, no frequency or 'best child' bookkeeping is kept - the only
ordering offered is lexicographic: suggestions are collected with a depth-first walk that visits
children in ascending character order, so results are reproducible regardless of insertion order.

There are no failure cases in here. A prefix that isn't indexed simply yields an empty suggestion
list (or a partial path) - interpreting that as 'no results' is up to whoever renders it.
'''
from typing import Iterator, List, Tuple, TypeVar

import attr

from .trie_logging import debug

T = TypeVar('T')

# Distinguishes 'no payload' from a caller legitimately storing None, 0 or ''.
_NO_PAYLOAD = object()


def normalize(s: str) -> str:
  return s.lower()


# We set eq=False so that attrs doesn't add an __eq__ - nodes compare and hash by identity, which
# is what renderers rely on when checking path membership.
@attr.s(slots=True, eq=False, repr=False)
class TrieNode:
  character = attr.ib(default='')
  children = attr.ib(factory=dict)
  _payload = attr.ib(default=_NO_PAYLOAD)

  @property
  def is_terminal(self) -> bool:
    return self._payload is not _NO_PAYLOAD

  @property
  def payload(self):
    '''The payload of the word ending here, or None if no word ends here.'''
    return None if self._payload is _NO_PAYLOAD else self._payload

  def set_payload(self, payload):
    self._payload = payload

  def has_children(self):
    return bool(self.children)

  def iter_children(self):
    '''Yields (char, child) in ascending character order.'''
    for char in sorted(self.children):
      yield char, self.children[char]

  def __repr__(self):
    terminal = ', terminal' if self.is_terminal else ''
    return f'TrieNode({self.character!r}, {len(self.children)} children{terminal})'


@attr.s(slots=True, eq=False)
class Trie:
  root = attr.ib(factory=TrieNode)

  def insert(self, word: str, data: T) -> None:
    '''Indexes |word| (case-insensitively) with |data| as its payload.

    Re-inserting a word overwrites its payload. The empty string is valid and makes the root
    terminal.'''
    curr_node = self.root
    for char in normalize(word):
      try:
        curr_node = curr_node.children[char]
      except KeyError:
        new_node = TrieNode(char)
        curr_node.children[char] = new_node
        curr_node = new_node
    if curr_node.is_terminal:
      debug(f'Overwriting payload for "{word}"')
    curr_node.set_payload(data)

  def get_path(self, prefix: str) -> List[TrieNode]:
    '''Returns the nodes visited matching |prefix|, starting at the root.

    Walking stops at the first character without a matching child, so the result is the path of
    the longest indexed prefix of |prefix| - never shorter than [root].'''
    curr_node = self.root
    path = [curr_node]
    for char in normalize(prefix):
      curr_node = curr_node.children.get(char)
      if curr_node is None:
        break
      path.append(curr_node)
    return path

  def get_suggestions(self, prefix: str) -> List[T]:
    '''Returns the payloads of all words starting with |prefix| in lexicographic word order.

    An empty prefix yields no suggestions, as does a prefix that isn't fully indexed.'''
    if not prefix:
      return []
    node = self._get_node(normalize(prefix))
    if node is None:
      return []
    return [n.payload for n in _iter_terminals(node)]

  def _get_node(self, s):
    curr_node = self.root
    for char in s:
      curr_node = curr_node.children.get(char)
      if curr_node is None:
        return None
    return curr_node

  def iter_nodes(self) -> Iterator[Tuple[int, TrieNode]]:
    '''Pre-order (depth, node) over the whole tree, children in ascending character order.'''
    stack = [(0, self.root)]
    while stack:
      depth, node = stack.pop()
      yield depth, node
      stack.extend((depth + 1, child) for _, child in reversed(list(node.iter_children())))

  def __contains__(self, word):
    node = self._get_node(normalize(word))
    return node is not None and node.is_terminal

  def __len__(self):
    return sum(1 for _, node in self.iter_nodes() if node.is_terminal)


def _iter_terminals(node):
  # Explicit stack - word length shouldn't be bounded by the recursion limit.
  stack = [node]
  while stack:
    curr_node = stack.pop()
    if curr_node.is_terminal:
      yield curr_node
    stack.extend(child for _, child in reversed(list(curr_node.iter_children())))
