import json
from tokenledger.config import INDEX_SEPARATOR, DELIMITER

MAX_NATIVE_INT = 2 ** 63 - 1
MIN_NATIVE_INT = -(2 ** 63)

##
# Values are stored as compact JSON.
# Token amounts routinely exceed 64 bits, so ints outside the native range are wrapped as strings.
##


def encode_int(value: int):
    if MIN_NATIVE_INT < value < MAX_NATIVE_INT:
        return value

    return {
        '__big_int__': str(value)
    }


def encode_ints(data):
    # bool is an int subclass but must stay a JSON boolean
    if isinstance(data, bool):
        return data
    elif isinstance(data, int):
        return encode_int(data)
    elif isinstance(data, dict):
        return {k: encode_ints(v) for k, v in data.items()}
    elif isinstance(data, (list, tuple)):
        return [encode_ints(i) for i in data]
    return data


def encode(data):
    """ NOTE:
    json.JSONEncoder.default is only consulted for types json cannot
    serialize, and int is not one of them, so big ints are wrapped first.
    """
    return json.dumps(encode_ints(data), separators=(',', ':'))


def as_object(d):
    if '__big_int__' in d:
        return int(d['__big_int__'])
    return dict(d)


# Decode has a hook for JSON objects, which are just Python dictionaries. You have to specify the logic in this hook.
def decode(data):
    if data is None:
        return None

    if isinstance(data, bytes):
        data = data.decode()

    try:
        return json.loads(data, object_hook=as_object)
    except json.decoder.JSONDecodeError:
        return None


def make_key(contract, variable, args=[]):
    contract_variable = INDEX_SEPARATOR.join((contract, variable))
    if args:
        return DELIMITER.join((contract_variable, *[str(arg) for arg in args]))
    return contract_variable

