'''Plain-text views of a Trie for terminals and logs.'''
from .trie import Trie

ROOT_LABEL = 'ROOT'
ACTIVE_MARKER = '*'
TERMINAL_MARKER = '$'
SPACE_LABEL = '\u2423'


def _label(node):
  if node.character == ' ':
    return SPACE_LABEL
  return node.character or ROOT_LABEL


def render_tree(trie: Trie, prefix='', indent='  ') -> str:
  '''One line per node, indented by depth. Nodes on the active path of |prefix| are prefixed with
  ACTIVE_MARKER and terminal nodes suffixed with TERMINAL_MARKER.'''
  active = set(trie.get_path(prefix))
  lines = []
  for depth, node in trie.iter_nodes():
    marker = ACTIVE_MARKER if node in active else ' '
    terminal = TERMINAL_MARKER if node.is_terminal else ''
    lines.append(f'{marker}{indent * depth}{_label(node)}{terminal}')
  return '\n'.join(lines) + '\n'


def render_path(path) -> str:
  return ' > '.join(_label(node) for node in path)


def highlight_match(name, prefix):
  '''Splits |name| into the part the user typed and the completion.'''
  i = min(len(prefix), len(name))
  return name[:i], name[i:]
