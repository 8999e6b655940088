from tokenledger import config
from tokenledger.db.orm import Variable, Hash
from tokenledger.events import TRANSFER, APPROVAL, MINT_FINISHED
from tokenledger.exceptions import (
    AddressZero,
    InsufficientToken,
    InsufficientAllowance,
    OnlyMinter,
    MintingHasFinished,
    LedgerExists
)
from tokenledger.execution.runtime import rt
from tokenledger.logger import get_logger
from tokenledger.stdlib import uint
from tokenledger.stdlib.access import export

log = get_logger('Ledger')


class Ledger:
    """
    Fungible token state machine.

    State lives in the driver under the contract name:
        token.balances:<account>
        token.allowances:<owner>:<spender>
        token.total_supply
        token.minting_finished
        token.name / token.symbol / token.decimals

    The caller of every mutating function is rt.context.caller. Every check
    runs before the first write, and the executor rolls back the pending
    writes and events of a failed call.
    """
    def __init__(self, driver, roles, events, name=config.LEDGER_CONTRACT):
        self.contract_name = name
        self.driver = driver
        self.roles = roles
        self.events = events

        self.balances = Hash(name, 'balances', driver=driver, default_value=0)
        self.allowances = Hash(name, 'allowances', driver=driver, default_value=0)

        self.supply = Variable(name, 'total_supply', driver=driver, t=int)
        self.finished = Variable(name, 'minting_finished', driver=driver, t=bool, default_value=False)

        self.metadata_name = Variable(name, 'name', driver=driver, t=str)
        self.metadata_symbol = Variable(name, 'symbol', driver=driver, t=str)
        self.metadata_decimals = Variable(name, 'decimals', driver=driver, t=int)

    def is_seeded(self):
        return self.supply.get() is not None

    def seed(self, owner, initial_supply=config.INITIAL_SUPPLY,
             token_name=config.TOKEN_NAME, token_symbol=config.TOKEN_SYMBOL, decimals=config.DECIMALS):
        if self.is_seeded():
            raise LedgerExists(name=self.contract_name)

        if owner == config.ZERO_ADDRESS:
            raise AddressZero(field='owner')

        uint.validate(initial_supply)

        self.metadata_name.set(token_name)
        self.metadata_symbol.set(token_symbol)
        self.metadata_decimals.set(decimals)

        self.supply.set(initial_supply)
        self.finished.set(False)
        self.balances[owner] = initial_supply

        self.roles.seed(owner)

        self.events.emit(TRANSFER, sender=config.ZERO_ADDRESS, to=owner, amount=initial_supply)

        log.info('Seeded {} with {} units held by {}'.format(self.contract_name, initial_supply, owner))

    def _require_minter(self):
        caller = rt.context.caller
        if not self.roles.has_minter_role(caller):
            raise OnlyMinter(account=caller)
        return caller

    def _move(self, sender, to, amount):
        available = self.balances[sender]
        if available < amount:
            raise InsufficientToken(account=sender, available=available, required=amount)

        # Read back after the debit so a self transfer nets to zero
        self.balances[sender] = uint.sub(available, amount)
        self.balances[to] = uint.add(self.balances[to], amount)

        self.events.emit(TRANSFER, sender=sender, to=to, amount=amount)

        log.debug('{} -> {}: {}'.format(sender, to, amount))

    def _approve(self, owner, spender, amount):
        self.allowances[owner, spender] = amount
        self.events.emit(APPROVAL, owner=owner, spender=spender, amount=amount)

    # Queries

    @export
    def name(self):
        return self.metadata_name.get()

    @export
    def symbol(self):
        return self.metadata_symbol.get()

    @export
    def decimals(self):
        return self.metadata_decimals.get()

    @export
    def total_supply(self):
        return self.supply.get()

    @export
    def balance_of(self, account):
        return self.balances[account]

    @export
    def allowance(self, owner, spender):
        return self.allowances[owner, spender]

    @export
    def minting_finished(self):
        return self.finished.get()

    # Transfers and allowances

    @export
    def transfer(self, to, amount):
        uint.validate(amount)

        if to == config.ZERO_ADDRESS:
            raise AddressZero(field='to')

        self._move(rt.context.caller, to, amount)
        return True

    @export
    def approve(self, spender, amount):
        uint.validate(amount)

        if spender == config.ZERO_ADDRESS:
            raise AddressZero(field='spender')

        self._approve(rt.context.caller, spender, amount)
        return True

    @export
    def transfer_from(self, owner, to, amount):
        uint.validate(amount)
        spender = rt.context.caller

        if to == config.ZERO_ADDRESS:
            raise AddressZero(field='to')

        # Allowance is gated before the balance
        allowed = self.allowances[owner, spender]
        if allowed < amount:
            raise InsufficientAllowance(owner=owner, spender=spender, available=allowed, required=amount)

        self._move(owner, to, amount)
        self.allowances[owner, spender] = uint.sub(allowed, amount)
        return True

    @export
    def increase_allowance(self, spender, added_value):
        uint.validate(added_value)
        owner = rt.context.caller

        if spender == config.ZERO_ADDRESS:
            raise AddressZero(field='spender')

        self._approve(owner, spender, uint.add(self.allowances[owner, spender], added_value))
        return True

    @export
    def decrease_allowance(self, spender, subtracted_value):
        uint.validate(subtracted_value)
        owner = rt.context.caller

        if spender == config.ZERO_ADDRESS:
            raise AddressZero(field='spender')

        # Reported as InsufficientToken, not as an allowance error. See DESIGN.md.
        allowed = self.allowances[owner, spender]
        if allowed < subtracted_value:
            raise InsufficientToken(account=owner, available=allowed, required=subtracted_value)

        self._approve(owner, spender, uint.sub(allowed, subtracted_value))
        return True

    # Supply

    @export
    def mint(self, to, amount):
        uint.validate(amount)
        caller = self._require_minter()

        if self.finished.get():
            raise MintingHasFinished()

        if to == config.ZERO_ADDRESS:
            raise AddressZero(field='to')

        # Supply bounds every balance, so checking it covers balances[to]
        supply = uint.add(self.supply.get(), amount)

        self.supply.set(supply)
        self.balances[to] = self.balances[to] + amount

        self.events.emit(TRANSFER, sender=config.ZERO_ADDRESS, to=to, amount=amount)

        log.info('{} minted {} to {}'.format(caller, amount, to))
        return True

    @export
    def burn(self, account, amount):
        uint.validate(amount)
        caller = self._require_minter()

        available = self.balances[account]
        if available < amount:
            raise InsufficientToken(account=account, available=available, required=amount)

        self.balances[account] = uint.sub(available, amount)
        self.supply.set(uint.sub(self.supply.get(), amount))

        self.events.emit(TRANSFER, sender=account, to=config.ZERO_ADDRESS, amount=amount)

        log.info('{} burned {} from {}'.format(caller, amount, account))
        return True

    @export
    def finish_minting(self):
        caller = self._require_minter()

        if self.finished.get():
            return False

        self.finished.set(True)
        self.events.emit(MINT_FINISHED, caller=caller)

        log.info('{} finished minting at supply {}'.format(caller, self.supply.get()))
        return True
