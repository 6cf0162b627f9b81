class CatalogFormatError(Exception):

  def __init__(self, filename, reason):
    super().__init__(f'Invalid catalog "{filename}": {reason}')
    self.filename = filename
    self.reason = reason


class InvalidRequestError(Exception):
  ...
