TOKEN_NAME = 'BardAI'
TOKEN_SYMBOL = 'BAI'
DECIMALS = 18

# Smallest-unit amounts. 900000000000000000 whole tokens at 18 decimals
INITIAL_SUPPLY = 900000000000000000 * 10 ** DECIMALS

UINT256_MAX = 2 ** 256 - 1

ZERO_ADDRESS = '0x' + '0' * 40

LEDGER_CONTRACT = 'token'
ROLES_CONTRACT = 'roles'

ADMIN_ROLE = 'admin'
MINTER_ROLE = 'minter'

DELIMITER = ':'
INDEX_SEPARATOR = '.'

MAX_HASH_DIMENSIONS = 16
MAX_KEY_SIZE = 1024

PRIVATE_METHOD_PREFIX = '_'

WEB_SERVER_PORT = 8080
SSL_WEB_SERVER_PORT = 443
NUM_WORKERS = 1
