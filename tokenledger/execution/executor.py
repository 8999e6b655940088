from copy import deepcopy
import traceback

from tokenledger import config
from tokenledger.db.driver import LedgerDriver
from tokenledger.events import EventLog
from tokenledger.exceptions import ContractNotFound, FunctionNotExported
from tokenledger.execution import runtime
from tokenledger.logger import get_logger

log = get_logger('Executor')


class Executor:
    def __init__(self, driver=None, events=None, contracts=None):
        self.driver = driver

        if not self.driver:
            self.driver = LedgerDriver()

        self.events = events if events is not None else EventLog()
        self.contracts = contracts if contracts is not None else {}

    def register(self, contract):
        self.contracts[contract.contract_name] = contract

    def get_function(self, contract_name, function_name):
        if function_name.startswith(config.PRIVATE_METHOD_PREFIX):
            raise FunctionNotExported(contract_name=contract_name, function_name=function_name)

        contract = self.contracts.get(contract_name)
        if contract is None:
            raise ContractNotFound(contract_name=contract_name)

        func = getattr(contract, function_name, None)
        if func is None or not getattr(func, 'exported', False):
            raise FunctionNotExported(contract_name=contract_name, function_name=function_name)

        return func

    def execute(self, sender, contract_name, function_name, kwargs, auto_commit=True) -> dict:

        with runtime.rt.lock:
            try:
                func = self.get_function(contract_name, function_name)

                runtime.rt.set_up(sender=sender, contract_name=contract_name)

                result = func(**kwargs)
                status_code = 0
            except Exception as e:
                result = e
                status_code = 1

                log.error('{}.{} by {} failed: {}'.format(contract_name, function_name, sender, e))
                log.debug(traceback.format_exc())

            ### EXECUTION END

            writes = deepcopy(self.driver.pending_writes)
            events = self.events.pending_events()

            # A failed call never leaves anything behind
            if status_code == 1:
                self.driver.rollback()
                self.events.rollback()
            elif auto_commit:
                self.driver.commit()
                self.events.commit()

            runtime.rt.clean_up()

        output = {
            'status_code': status_code,
            'result': result,
            'writes': writes,
            'events': events
        }

        return output
