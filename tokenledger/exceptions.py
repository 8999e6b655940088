class LedgerError(Exception):
    """
    The base exception for the token ledger. The fmt directive
    will be overloaded by the inheriting classes

    :ivar msg: The message associated with the error
    """
    fmt = 'An unspecified error occurred'

    def __init__(self, **kwargs):
        msg = self.fmt.format(**kwargs)
        Exception.__init__(self, msg)
        self.kwargs = kwargs


class AddressZero(LedgerError):
    """
    The zero account was passed where a real account is required,
    e.g. as a transfer destination or an approval spender
    """
    fmt = "The zero address cannot be used as '{field}'"


class InsufficientToken(LedgerError):
    """
    :ivar account: The account whose balance (or grantable amount) was checked
    :ivar available: What the account actually has
    :ivar required: What the call needed
    """
    fmt = "Account '{account}' has {available}, {required} required"


class InsufficientAllowance(LedgerError):
    """
    :ivar owner: The account that granted the allowance
    :ivar spender: The account attempting to spend it
    """
    fmt = "Allowance of '{spender}' over '{owner}' is {available}, {required} required"


class OnlyMinter(LedgerError):
    fmt = "Account '{account}' does not hold the minter role"


class MintingHasFinished(LedgerError):
    fmt = 'Minting has finished, no more tokens can be created'


class InvalidAmount(LedgerError):
    fmt = "Invalid amount {amount!r}, expected an integer between 0 and 2**256 - 1"


class Overflow(LedgerError):
    fmt = 'Result of {a} + {b} does not fit in 256 bits'


class Underflow(LedgerError):
    fmt = 'Result of {a} - {b} is below zero'


class InvalidKey(LedgerError):
    """
    A hash key that would collide with the storage key layout
    or exceed the key size limits
    """
    fmt = "Invalid key {key!r}: {reason}"


class MissingRole(LedgerError):
    """
    Role administration attempted by an account lacking the
    role that administers it

    :ivar account: The caller
    :ivar role: The role the caller needed
    """
    fmt = "Account '{account}' is missing role '{role}'"


class LedgerExists(LedgerError):
    fmt = "Ledger '{name}' has already been seeded"


class ContractNotFound(LedgerError):
    fmt = "Contract with name '{contract_name}' does not exist"


class FunctionNotExported(LedgerError):
    fmt = "Function '{function_name}' is not exported by contract '{contract_name}'"
