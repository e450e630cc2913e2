class StoreError(Exception):
    pass


class NotFound(StoreError):
    pass


class AlreadyExists(StoreError):
    pass


class DuplicateLine(AlreadyExists):
    pass


class ItemUnavailable(StoreError):
    pass


class NoActiveCart(StoreError):
    pass


class EmptyCart(StoreError):
    pass


class Unauthorized(StoreError):
    pass


class Forbidden(StoreError):
    pass
