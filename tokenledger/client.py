from functools import partial
import inspect

from tokenledger import config
from tokenledger.db.driver import LedgerDriver
from tokenledger.db.orm import Variable, Hash
from tokenledger.events import EventLog
from tokenledger.execution.executor import Executor
from tokenledger.ledger import Ledger
from tokenledger.roles import Roles
from tokenledger.stdlib.access import exported_functions


class AbstractContract:
    def __init__(self, name, signer, executor: Executor, funcs):
        self.contract_name = name
        self.signer = signer
        self.executor = executor
        self.functions = funcs

        # set up virtual functions
        for f in funcs:
            func, kwargs = f

            # each function is a partial that allows kwarg overloading and overriding
            setattr(self, func, partial(self._abstract_function_call,
                                        signer=self.signer,
                                        contract_name=self.contract_name,
                                        executor=self.executor,
                                        func=func))

    def keys(self):
        return self.executor.driver.get_contract_keys(self.contract_name)

    def quick_read(self, variable, key=None, args=None):
        a = []

        if key is not None:
            a.append(key)

        if args is not None and isinstance(args, list):
            for arg in args:
                a.append(arg)

        k = self.executor.driver.make_key(contract=self.contract_name, variable=variable, args=a)
        return self.executor.driver.get(k)

    def variable(self, name):
        return Variable(contract=self.contract_name, name=name, driver=self.executor.driver)

    def hash(self, name, default_value=None):
        return Hash(contract=self.contract_name, name=name, driver=self.executor.driver, default_value=default_value)

    def _abstract_function_call(self, signer, executor, contract_name, func, auto_commit=True, **kwargs):
        output = executor.execute(sender=signer,
                                  contract_name=contract_name,
                                  function_name=func,
                                  kwargs=kwargs,
                                  auto_commit=auto_commit)

        if output['status_code'] == 1:
            raise output['result']

        return output['result']


class LedgerClient:
    def __init__(self, signer='sys', driver=None, owner=None, initial_supply=config.INITIAL_SUPPLY):
        self.raw_driver = driver if driver is not None else LedgerDriver()
        self.events = EventLog()

        self.executor = Executor(driver=self.raw_driver, events=self.events)

        self.roles = Roles(driver=self.raw_driver)
        self.ledger = Ledger(driver=self.raw_driver, roles=self.roles, events=self.events)

        self.executor.register(self.roles)
        self.executor.register(self.ledger)

        self.signer = signer
        self.owner = owner or signer
        self.initial_supply = initial_supply

        self.seed()

    def seed(self):
        # Genesis happens once per store, an existing ledger is picked up as is
        if self.ledger.is_seeded():
            return

        try:
            self.ledger.seed(owner=self.owner, initial_supply=self.initial_supply)
        except Exception:
            self.raw_driver.rollback()
            self.events.rollback()
            raise

        self.raw_driver.commit()
        self.events.commit()

    def flush(self):
        # flushes db and reseeds the genesis state
        self.raw_driver.flush()
        self.events.flush()
        self.seed()

    # Returns abstract contract which has partial methods mapped to each exported function.
    def get_contract(self, name):
        contract = self.executor.contracts.get(name)

        if contract is None:
            return None

        funcs = []
        for func_name in exported_functions(contract):
            params = inspect.signature(getattr(contract, func_name)).parameters
            funcs.append((func_name, list(params)))

        return AbstractContract(name=name,
                                signer=self.signer,
                                executor=self.executor,
                                funcs=funcs)

    @property
    def token(self):
        return self.get_contract(config.LEDGER_CONTRACT)

    def get_contracts(self):
        return sorted(self.executor.contracts.keys())

    def get_var(self, contract, variable, arguments=[]):
        return self.raw_driver.get_var(contract, variable, arguments)

    def set_var(self, contract, variable, arguments=[], value=None):
        self.raw_driver.set_var(contract, variable, arguments, value)
        self.raw_driver.commit()
