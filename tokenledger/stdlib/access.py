from functools import wraps

from tokenledger.execution.runtime import rt


def export(func):
    """
    Marks a contract method as callable through the executor.

    When one contract calls into another the call runs in a new context
    whose caller is the calling contract, the same way an account is the
    caller of a top level call.
    """
    @wraps(func)
    def wrapper(self, *args, **kwargs):
        current_state = rt.context._get_state()

        state = {
            'caller': current_state['this'],
            'signer': current_state['signer'],
            'this': self.contract_name
        }

        pushed = current_state['this'] is not None and rt.context._add_state(state)

        try:
            return func(self, *args, **kwargs)
        finally:
            if pushed:
                rt.context._pop_state()

    wrapper.exported = True
    return wrapper


def exported_functions(contract):
    funcs = []
    for name in sorted(dir(type(contract))):
        attr = getattr(type(contract), name)
        if callable(attr) and getattr(attr, 'exported', False):
            funcs.append(name)
    return funcs
