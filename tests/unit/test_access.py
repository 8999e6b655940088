from unittest import TestCase
from tokenledger.execution import runtime
from tokenledger.stdlib.access import export, exported_functions


class Inner:
    contract_name = 'inner'

    @export
    def who(self):
        return runtime.rt.context.caller, runtime.rt.context.this


class Outer:
    contract_name = 'outer'

    def __init__(self, inner):
        self.inner = inner

    @export
    def who(self):
        return runtime.rt.context.caller, runtime.rt.context.this

    @export
    def call_inner(self):
        return self.inner.who()

    def not_exported(self):
        pass


class TestExport(TestCase):
    def setUp(self):
        self.outer = Outer(Inner())

    def tearDown(self):
        runtime.rt.clean_up()

    def test_top_level_call_keeps_sender_as_caller(self):
        runtime.rt.set_up(sender='stu', contract_name='outer')

        self.assertEqual(self.outer.who(), ('stu', 'outer'))

    def test_nested_call_sees_calling_contract(self):
        runtime.rt.set_up(sender='stu', contract_name='outer')

        self.assertEqual(self.outer.call_inner(), ('outer', 'inner'))
        self.assertEqual(runtime.rt.context.caller, 'stu')

    def test_signer_survives_nested_call(self):
        runtime.rt.set_up(sender='stu', contract_name='outer')

        class Probe:
            contract_name = 'probe'

            @export
            def signer(self):
                return runtime.rt.context.signer

        self.assertEqual(Probe().signer(), 'stu')

    def test_call_without_context_does_not_push(self):
        self.assertEqual(self.outer.who(), (None, None))

    def test_exported_flag(self):
        self.assertTrue(Outer.who.exported)
        self.assertFalse(hasattr(Outer.not_exported, 'exported'))

    def test_exported_functions(self):
        self.assertListEqual(exported_functions(self.outer), ['call_inner', 'who'])
