'''Products that get indexed into the Trie, plus the built-in sample database.'''
import json
from typing import Iterable, List

import attr

from . import settings
from .errors import CatalogFormatError
from .trie import Trie
from .trie_logging import info


@attr.s(frozen=True, slots=True)
class Product:
  id = attr.ib(validator=attr.validators.instance_of(int))
  name = attr.ib(validator=attr.validators.instance_of(str))
  category = attr.ib(validator=attr.validators.instance_of(str))
  price = attr.ib(validator=attr.validators.instance_of(str))

  def to_dict(self):
    return attr.asdict(self)


PRODUCT_FIELDS = tuple(a.name for a in attr.fields(Product))

SAMPLE_PRODUCTS = [
    Product(1, 'Samsung TV', 'ELEC', '499 CR'),
    Product(2, 'Samsung Phone', 'MOB', '799 CR'),
    Product(3, 'Sony Headphones', 'AUDIO', '150 CR'),
    Product(5, 'Soap', 'HOME', '005 CR'),
    Product(7, 'Apple iPhone', 'MOB', '999 CR'),
    Product(8, 'Apple Watch', 'WEAR', '399 CR'),
    Product(9, 'Adidas Shoes', 'GEAR', '085 CR'),
    Product(10, 'Canon Camera', 'PHOTO', '600 CR'),
    Product(11, 'Coffee Maker', 'HOME', '045 CR'),
    Product(12, 'Nike Shorts', 'GEAR', '035 CR'),
]


def build_trie(products: Iterable[Product] = SAMPLE_PRODUCTS) -> Trie:
  trie = Trie()
  count = 0
  for product in products:
    trie.insert(product.name, product)
    count += 1
  info(f'Indexed {count} products.')
  return trie


def product_from_dict(d, filename='<dict>') -> Product:
  if not isinstance(d, dict):
    raise CatalogFormatError(filename, f'expected an object, got {type(d).__name__}')
  missing = [name for name in PRODUCT_FIELDS if name not in d]
  extra = sorted(set(d) - set(PRODUCT_FIELDS))
  if missing or extra:
    raise CatalogFormatError(filename, f'missing fields {missing}, unexpected fields {extra}')
  try:
    return Product(**d)
  except TypeError as e:
    # attrs validators put the readable message first.
    raise CatalogFormatError(filename, e.args[0]) from e


def load_catalog(filename) -> List[Product]:
  '''Reads a JSON array of {"id", "name", "category", "price"} objects.'''
  try:
    with open(filename, 'r', encoding='utf-8') as f:
      entries = json.load(f)
  except (OSError, ValueError) as e:
    raise CatalogFormatError(filename, str(e)) from e
  if not isinstance(entries, list):
    raise CatalogFormatError(filename, 'top-level value must be an array')
  products = [product_from_dict(entry, filename) for entry in entries]
  info(f'Loaded {len(products)} products from {filename}')
  return products


def load_default_catalog() -> List[Product]:
  filename = settings.get_catalog_path()
  if filename is None:
    return list(SAMPLE_PRODUCTS)
  return load_catalog(filename)
