from collections import namedtuple
from copy import deepcopy

Event = namedtuple('Event', ['name', 'args'])

TRANSFER = 'Transfer'
APPROVAL = 'Approval'
MINT_FINISHED = 'MintFinished'


class EventLog:
    """
    Notifications emitted by contracts. Like driver writes, emitted events
    stay pending until the call that produced them commits.
    """
    def __init__(self):
        self.pending = []
        self.log = []

    def emit(self, name, **args):
        self.pending.append(Event(name=name, args=args))

    def commit(self):
        self.log.extend(self.pending)
        self.pending = []

    def rollback(self):
        self.pending = []

    def all(self):
        return list(self.log)

    def filter(self, name=None, **args):
        events = []
        for event in self.log:
            if name is not None and event.name != name:
                continue
            if any(event.args.get(k) != v for k, v in args.items()):
                continue
            events.append(event)
        return events

    def last(self):
        if len(self.log) == 0:
            return None
        return self.log[-1]

    def pending_events(self):
        return deepcopy(self.pending)

    def flush(self):
        self.pending = []
        self.log = []
