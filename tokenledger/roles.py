from tokenledger import config
from tokenledger.db.orm import Hash
from tokenledger.exceptions import AddressZero, MissingRole
from tokenledger.execution.runtime import rt
from tokenledger.logger import get_logger
from tokenledger.stdlib.access import export

log = get_logger('Roles')


class Roles:
    """
    Capability lookup for privileged ledger operations. Membership is stored
    as roles.members:<role>:<account> -> True. Accounts holding ADMIN_ROLE
    grant and revoke every role.
    """
    def __init__(self, driver, name=config.ROLES_CONTRACT):
        self.contract_name = name
        self.driver = driver
        self.members = Hash(name, 'members', driver=driver, default_value=False)

    def seed(self, admin):
        if admin == config.ZERO_ADDRESS:
            raise AddressZero(field='admin')

        self.members[config.ADMIN_ROLE, admin] = True
        self.members[config.MINTER_ROLE, admin] = True

        log.info('Seeded roles with admin {}'.format(admin))

    def _check_role(self, role, account):
        if not self.members[role, account]:
            raise MissingRole(account=account, role=role)

    @export
    def has_role(self, role, account):
        return bool(self.members[role, account])

    @export
    def has_minter_role(self, account):
        return bool(self.members[config.MINTER_ROLE, account])

    @export
    def grant_role(self, role, account):
        self._check_role(config.ADMIN_ROLE, rt.context.caller)

        if account == config.ZERO_ADDRESS:
            raise AddressZero(field='account')

        if self.members[role, account]:
            return False

        self.members[role, account] = True
        log.info('{} granted {} to {}'.format(rt.context.caller, role, account))
        return True

    @export
    def revoke_role(self, role, account):
        self._check_role(config.ADMIN_ROLE, rt.context.caller)

        if not self.members[role, account]:
            return False

        self.members[role, account] = None
        log.info('{} revoked {} from {}'.format(rt.context.caller, role, account))
        return True

    @export
    def renounce_role(self, role):
        account = rt.context.caller

        if not self.members[role, account]:
            return False

        self.members[role, account] = None
        log.info('{} renounced {}'.format(account, role))
        return True

    @export
    def members_of(self, role):
        prefix = '{}{}{}{}'.format(self.members._key, config.DELIMITER, role, config.DELIMITER)
        return sorted(k[len(prefix):] for k in self.members._items(role).keys())
