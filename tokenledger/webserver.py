from sanic import Sanic
from sanic.response import json, text

from tokenledger import config
from tokenledger.client import LedgerClient
from tokenledger.exceptions import LedgerError
from tokenledger.execution.runtime import rt
from tokenledger.logger import get_logger

log = get_logger('Webserver')

app = Sanic('tokenledger')

ssl = None
client = LedgerClient()


def _amount(value):
    # Amounts exceed what JSON number parsers keep exactly, they travel as strings
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return value


def _event_to_json(event):
    return {'name': event.name, 'args': {k: _amount(v) for k, v in event.args.items()}}


def _error(e):
    return json({'error': type(e).__name__, 'message': str(e)}, status=400)


def _query(func, *args):
    # Direct reads share rt.context with the executor, so they hold the same lock
    with rt.lock:
        return func(*args)


@app.route("/", methods=["GET",])
async def teapot(request):
    return text("I\'m a teapot", status=418)


# Returns {'contracts': JSON List of strings}
@app.route('/contracts', methods=['GET'])
async def get_contracts(request):
    return json({'contracts': client.get_contracts()})


@app.route('/contracts/<contract>/methods', methods=['GET'])
async def get_methods(request, contract):
    abstract = client.get_contract(contract)

    if abstract is None:
        return json({'error': '{} does not exist'.format(contract)}, status=404)

    funcs = [{'name': name, 'arguments': kwargs} for name, kwargs in abstract.functions]

    return json({'methods': funcs}, status=200)


@app.route('/token/metadata', methods=['GET'])
async def get_metadata(request):
    ledger = client.ledger
    return json({
        'name': _query(ledger.name),
        'symbol': _query(ledger.symbol),
        'decimals': _query(ledger.decimals),
        'minting_finished': _query(ledger.minting_finished)
    }, status=200)


@app.route('/token/supply', methods=['GET'])
async def get_supply(request):
    return json({'value': _amount(_query(client.ledger.total_supply))}, status=200)


@app.route('/token/balances/<account>', methods=['GET'])
async def get_balance(request, account):
    try:
        value = _query(client.ledger.balance_of, account)
    except LedgerError as e:
        return _error(e)

    return json({'value': _amount(value)}, status=200)


@app.route('/token/allowances/<owner>/<spender>', methods=['GET'])
async def get_allowance(request, owner, spender):
    try:
        value = _query(client.ledger.allowance, owner, spender)
    except LedgerError as e:
        return _error(e)

    return json({'value': _amount(value)}, status=200)


@app.route('/events', methods=['GET'])
async def get_events(request):
    name = request.args.get('name')
    return json({'events': [_event_to_json(e) for e in client.events.filter(name)]}, status=200)


# Expects json object such that:
'''
{
    'sender': 'string',
    'contract': 'string',
    'function': 'string',
    'kwargs': {'amount': '1000', ...}
}
'''
@app.route('/execute', methods=['POST'])
async def execute(request):
    payload = request.json or {}

    sender = payload.get('sender')
    contract = payload.get('contract', config.LEDGER_CONTRACT)
    function = payload.get('function')
    kwargs = dict(payload.get('kwargs') or {})

    if sender is None or function is None:
        return json({'error': 'malformed payload'}, status=400)

    for k in ('amount', 'added_value', 'subtracted_value'):
        if isinstance(kwargs.get(k), str):
            try:
                kwargs[k] = int(kwargs[k])
            except ValueError:
                return json({'error': 'malformed amount {}'.format(kwargs[k])}, status=400)

    output = client.executor.execute(sender=sender, contract_name=contract, function_name=function, kwargs=kwargs)

    if output['status_code'] == 1:
        e = output['result']
        if isinstance(e, LedgerError):
            return _error(e)
        return json({'error': 'ExecutionError', 'message': str(e)}, status=400)

    return json({
        'result': _amount(output['result']),
        'events': [_event_to_json(e) for e in output['events']]
    }, status=200)


def start_webserver():
    log.info('Starting webserver on port {}'.format(config.SSL_WEB_SERVER_PORT if ssl else config.WEB_SERVER_PORT))
    if ssl:
        app.run(host='0.0.0.0', port=config.SSL_WEB_SERVER_PORT, workers=config.NUM_WORKERS, debug=False,
                access_log=False, ssl=ssl)
    else:
        app.run(host='0.0.0.0', port=config.WEB_SERVER_PORT, workers=config.NUM_WORKERS, debug=False,
                access_log=False)


if __name__ == '__main__':
    start_webserver()
