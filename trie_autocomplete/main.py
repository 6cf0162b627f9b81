'''Prints autocomplete suggestions for a prefix, optionally alongside the indexed tree and a
character-by-character walkthrough of the search.'''
import argparse
import sys

from . import catalog, settings, trie_logging
from .errors import CatalogFormatError
from .render import highlight_match, render_path, render_tree
from .trie_logging import error
from .walkthrough import Walkthrough

VERBOSITY_LEVELS = ['debug', 'info', 'warning', 'error', 'fatal']


def format_suggestion(product, prefix):
  typed, rest = highlight_match(product.name, prefix)
  return f'{typed.upper()}{rest:<20} {product.category:<6} {product.price}'


def format_step(step):
  status = 'match' if step.matched else 'no match'
  terminal = ', word ends here' if step.terminal else ''
  return f'[{step.index}] "{step.prefix}": {render_path(step.path)} ({status}{terminal})'


def run(prefix, catalog_path=None, show_tree=False, show_steps=False, out=None):
  out = out or sys.stdout
  products = catalog.load_catalog(catalog_path) if catalog_path else catalog.load_default_catalog()
  trie = catalog.build_trie(products)

  suggestions = trie.get_suggestions(prefix)
  if suggestions:
    for product in suggestions:
      out.write(f'{format_suggestion(product, prefix)}\n')
  else:
    out.write(f'No results for "{prefix}".\n')

  out.write(f'Path: {render_path(trie.get_path(prefix))}\n')
  if show_steps:
    for step in Walkthrough(trie, prefix).steps():
      out.write(f'{format_step(step)}\n')
  if show_tree:
    out.write(render_tree(trie, prefix))


def main(argv=None):
  parser = argparse.ArgumentParser(description=__doc__)
  parser.add_argument('prefix')
  parser.add_argument('--catalog', default=None, help='JSON catalog to index.')
  parser.add_argument('--tree', action='store_true', help='Print the indexed tree.')
  parser.add_argument('--steps', action='store_true', help='Print each step of the search.')
  parser.add_argument('--verbosity', default=settings.get_verbosity(), choices=VERBOSITY_LEVELS)
  parser.add_argument('--log_to_file', action='store_true', help='Also write logs to the log dir.')
  args = parser.parse_args(argv)
  # choices aren't checked against defaults, which come from the environment.
  if args.verbosity not in VERBOSITY_LEVELS:
    parser.error(f'invalid verbosity {args.verbosity!r}, choose from {", ".join(VERBOSITY_LEVELS)}')

  trie_logging.set_verbosity(args.verbosity)
  if args.log_to_file:
    trie_logging.log_to_dir(settings.get_log_dir())
  try:
    run(args.prefix, catalog_path=args.catalog, show_tree=args.tree, show_steps=args.steps)
  except CatalogFormatError as e:
    error(str(e))
    return 1
  return 0


if __name__ == '__main__':
  sys.exit(main())
