from unittest import TestCase
from tokenledger.client import LedgerClient, AbstractContract
from tokenledger.db.driver import LedgerDriver
from tokenledger.events import TRANSFER
from tokenledger.exceptions import AddressZero, MissingRole, OnlyMinter
from tokenledger import config


class TestClient(TestCase):
    def setUp(self):
        self.c = LedgerClient(signer='stu')

    def tearDown(self):
        self.c.flush()

    def test_get_contracts(self):
        self.assertListEqual(self.c.get_contracts(), ['roles', 'token'])

    def test_get_unknown_contract_is_none(self):
        self.assertIsNone(self.c.get_contract('hoooooooopla'))

    def test_token_exposes_exported_functions(self):
        token = self.c.token

        self.assertIsInstance(token, AbstractContract)

        names = [name for name, _ in token.functions]
        for expected in ('transfer', 'approve', 'transfer_from', 'increase_allowance', 'decrease_allowance',
                         'mint', 'burn', 'finish_minting', 'balance_of', 'allowance', 'total_supply'):
            self.assertIn(expected, names)

        self.assertNotIn('seed', names)
        self.assertNotIn('_move', names)

    def test_function_arguments(self):
        functions = dict(self.c.token.functions)

        self.assertListEqual(functions['transfer_from'], ['owner', 'to', 'amount'])
        self.assertListEqual(functions['finish_minting'], [])

    def test_signer_is_default_caller(self):
        self.c.token.transfer(to='colin', amount=10)

        self.assertEqual(self.c.ledger.balance_of('colin'), 10)

    def test_signer_override(self):
        token = self.c.token
        token.transfer(to='colin', amount=10)
        token.transfer(to='raghu', amount=4, signer='colin')

        self.assertEqual(self.c.ledger.balance_of('colin'), 6)
        self.assertEqual(self.c.ledger.balance_of('raghu'), 4)

    def test_failure_is_raised(self):
        with self.assertRaises(AddressZero):
            self.c.token.transfer(to=config.ZERO_ADDRESS, amount=10)

    def test_quick_read(self):
        self.c.token.approve(spender='colin', amount=10)

        self.assertEqual(self.c.token.quick_read('balances', 'stu'), config.INITIAL_SUPPLY)
        self.assertEqual(self.c.token.quick_read('allowances', 'stu', args=['colin']), 10)

    def test_keys(self):
        keys = self.c.token.keys()

        self.assertIn('token.balances:stu', keys)
        self.assertIn('token.total_supply', keys)

    def test_hash_and_variable(self):
        self.assertEqual(self.c.token.hash('balances', default_value=0)['nobody'], 0)
        self.assertEqual(self.c.token.variable('total_supply').get(), config.INITIAL_SUPPLY)

    def test_get_var_set_var(self):
        self.assertEqual(self.c.get_var('token', 'balances', ['stu']), config.INITIAL_SUPPLY)

        self.c.set_var('token', 'symbol', value='XYZ')

        self.assertEqual(self.c.ledger.symbol(), 'XYZ')

    def test_events_recorded(self):
        self.c.token.transfer(to='colin', amount=10)

        transfers = self.c.events.filter(TRANSFER, to='colin')

        self.assertEqual(len(transfers), 1)
        self.assertEqual(transfers[0].args['amount'], 10)

    def test_roles_contract(self):
        roles = self.c.get_contract('roles')

        with self.assertRaises(MissingRole):
            roles.grant_role(role=config.MINTER_ROLE, account='colin', signer='colin')

        with self.assertRaises(OnlyMinter):
            self.c.token.mint(to='colin', amount=1, signer='colin')

        roles.grant_role(role=config.MINTER_ROLE, account='colin')
        self.c.token.mint(to='colin', amount=1, signer='colin')

        self.assertEqual(self.c.ledger.balance_of('colin'), 1)

    def test_owner_differs_from_signer(self):
        c = LedgerClient(signer='colin', owner='stu')

        self.assertEqual(c.ledger.balance_of('stu'), config.INITIAL_SUPPLY)
        self.assertEqual(c.ledger.balance_of('colin'), 0)

    def test_custom_initial_supply(self):
        c = LedgerClient(signer='stu', initial_supply=1000)

        self.assertEqual(c.ledger.total_supply(), 1000)

    def test_existing_store_is_not_reseeded(self):
        driver = LedgerDriver()
        first = LedgerClient(signer='stu', driver=driver)
        first.token.transfer(to='colin', amount=10)

        second = LedgerClient(signer='raghu', driver=driver)

        self.assertEqual(second.ledger.balance_of('colin'), 10)
        self.assertEqual(second.ledger.balance_of('raghu'), 0)
        self.assertEqual(second.ledger.total_supply(), config.INITIAL_SUPPLY)

    def test_flush_reseeds(self):
        self.c.token.transfer(to='colin', amount=10)
        self.c.token.finish_minting()

        self.c.flush()

        self.assertEqual(self.c.ledger.balance_of('colin'), 0)
        self.assertEqual(self.c.ledger.balance_of('stu'), config.INITIAL_SUPPLY)
        self.assertFalse(self.c.ledger.minting_finished())
        self.assertEqual(len(self.c.events.all()), 1)

    def test_zero_owner_seed_rolls_back(self):
        with self.assertRaises(AddressZero):
            LedgerClient(signer=config.ZERO_ADDRESS)
