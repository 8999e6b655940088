from tokenledger.db.driver import LedgerDriver
from tokenledger import config
from tokenledger.exceptions import InvalidKey


class Datum:
    def __init__(self, contract, name, driver: LedgerDriver):
        self._driver = driver
        self._key = self._driver.make_key(contract, name)


class Variable(Datum):
    def __init__(self, contract, name, driver: LedgerDriver, t=None, default_value=None):
        self._type = None
        self._default_value = default_value

        if isinstance(t, type):
            self._type = t

        super().__init__(contract, name, driver=driver)

    def set(self, value):
        if self._type is not None:
            assert isinstance(value, self._type), 'Wrong type passed to variable! Expected {}, got {}.'.format(
                self._type,
                type(value)
            )

        self._driver.set(self._key, value)

    def get(self):
        value = self._driver.get(self._key)
        if value is None:
            return self._default_value
        return value


class Hash(Datum):
    def __init__(self, contract, name, driver: LedgerDriver, default_value=None):
        super().__init__(contract, name, driver=driver)
        self._delimiter = config.DELIMITER
        self._default_value = default_value

    def _set(self, key, value):
        self._driver.set('{}{}{}'.format(self._key, self._delimiter, key), value)

    def _get(self, item):
        value = self._driver.get('{}{}{}'.format(self._key, self._delimiter, item))

        # Add Python defaultdict behavior for easier bookkeeping
        if value is None:
            value = self._default_value

        return value

    def _check_part(self, key, part):
        if isinstance(part, slice):
            raise InvalidKey(key=key, reason='slices are not keys')

        part = str(part)

        if config.DELIMITER in part:
            raise InvalidKey(key=key, reason='contains the delimiter {!r}'.format(config.DELIMITER))
        if config.INDEX_SEPARATOR in part:
            raise InvalidKey(key=key, reason='contains the separator {!r}'.format(config.INDEX_SEPARATOR))

        return part

    def _validate_key(self, key):
        if isinstance(key, tuple):
            if len(key) > config.MAX_HASH_DIMENSIONS:
                raise InvalidKey(key=key, reason='{} dimensions, max is {}'.format(
                    len(key), config.MAX_HASH_DIMENSIONS))

            flat = self._delimiter.join(self._check_part(key, k) for k in key)
        else:
            flat = self._check_part(key, key)

        if len(flat) > config.MAX_KEY_SIZE:
            raise InvalidKey(key=key, reason='{} characters, max is {}'.format(len(flat), config.MAX_KEY_SIZE))

        return flat

    def _prefix_for_args(self, args):
        multi = self._validate_key(args)
        prefix = '{}{}'.format(self._key, self._delimiter)
        if multi != '':
            prefix += '{}{}'.format(multi, self._delimiter)

        return prefix

    def all(self, *args):
        prefix = self._prefix_for_args(args)
        return self._driver.values(prefix=prefix)

    def _items(self, *args):
        prefix = self._prefix_for_args(args)
        return self._driver.items(prefix=prefix)

    def clear(self, *args):
        kvs = self._items(*args)
        for k in kvs.keys():
            self._driver.delete(k)

    def __setitem__(self, key, value):
        # handle multiple hashes differently
        key = self._validate_key(key)
        self._set(key, value)

    def __getitem__(self, key):
        key = self._validate_key(key)
        return self._get(key)
