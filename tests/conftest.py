import boa
import pytest
from eth_utils import to_wei
from moccasin.config import get_active_network

from script.deploy import deploy_usdh_token

HOLDER = boa.env.generate_address("holder")
SEND_VALUE = to_wei(1000, "mwei")  # 1000 USDH at 6 decimals


@pytest.fixture(scope="session")
def account():
    return get_active_network().get_default_account()


@pytest.fixture(scope="function")
def usdh_token(account):
    return deploy_usdh_token([account.address])


@pytest.fixture(scope="function")
def holder_funded(usdh_token, account):
    with boa.env.prank(account.address):
        usdh_token.transfer(HOLDER, SEND_VALUE)
    return HOLDER
