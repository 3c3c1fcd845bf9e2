from dataclasses import dataclass
from typing import Optional, Sequence

import boa
from moccasin.boa_tools import VyperContract
from moccasin.config import get_active_network

from contracts import usdh_token

CONTRACT_NAME = "usdh_token"

INITIAL_SUPPLY = 10_000_000_000_000_000
TOKEN_NAME = "Ho USD"
TOKEN_SYMBOL = "USDH"
TOKEN_DECIMALS = 6


@dataclass(frozen=True)
class DeploymentRequest:
    """Constructor arguments and sender for a single UsdhToken deployment."""

    source_account: str
    initial_supply: int = INITIAL_SUPPLY
    name: str = TOKEN_NAME
    symbol: str = TOKEN_SYMBOL
    decimals: int = TOKEN_DECIMALS
    overwrite: bool = True

    def __post_init__(self):
        if self.initial_supply < 0:
            raise ValueError(f"Initial supply must be non-negative, got {self.initial_supply}")

    def constructor_args(self) -> tuple:
        return (self.initial_supply, self.name, self.symbol, self.decimals)


def build_deployment_request(
    accounts: Sequence[str], overwrite: bool = True
) -> DeploymentRequest:
    """
    Builds the deployment request, sending from the first account.

    Args:
        accounts: Ordered account addresses available on the network.
        overwrite: Deploy a fresh instance even if one is already recorded.

    Returns:
        DeploymentRequest: The request to hand to deploy_request.
    """
    if not accounts:
        raise ValueError("No accounts available to deploy from")
    return DeploymentRequest(source_account=accounts[0], overwrite=overwrite)


def available_accounts() -> list[str]:
    """Accounts of the active network, default account first."""
    accounts = []
    default_account = get_active_network().get_default_account()
    if default_account is not None:
        accounts.append(default_account.address)
    if boa.env.eoa is not None and boa.env.eoa not in accounts:
        accounts.append(boa.env.eoa)
    return accounts


def _previous_deployment(active_network) -> Optional[VyperContract]:
    # only networks that record deployments can have a previous one
    if not active_network.save_to_db:
        return None
    return active_network.get_latest_contract_unchecked(CONTRACT_NAME)


def deploy_request(request: DeploymentRequest) -> VyperContract:
    """
    Deploys the UsdhToken contract described by a request.

    Returns:
        VyperContract: The deployed (or, without overwrite, reused) token contract.
    """
    active_network = get_active_network()

    if not request.overwrite:
        previous = _previous_deployment(active_network)
        if previous is not None:
            print(f"Reusing UsdhToken at: {previous.address}")
            return previous

    with boa.env.prank(request.source_account):
        token: VyperContract = usdh_token.deploy(*request.constructor_args())

    if active_network.has_explorer() and active_network.is_local_or_forked_network() is False:
        result = active_network.moccasin_verify(token)
        result.wait_for_verification()

    print(f"UsdhToken deployed at: {token.address}")
    print(token)
    return token


def deploy_usdh_token(
    accounts: Optional[Sequence[str]] = None, overwrite: bool = True
) -> VyperContract:
    """
    Deploys UsdhToken from the first of the given accounts.

    Args:
        accounts: Account addresses to pick the sender from. Defaults to the
            accounts of the active network.
        overwrite: Deploy a fresh instance even if one is already recorded.

    Returns:
        VyperContract: The deployed token contract instance.
    """
    if accounts is None:
        accounts = available_accounts()
    request = build_deployment_request(accounts, overwrite=overwrite)
    return deploy_request(request)


def moccasin_main() -> VyperContract:
    """
    Main deployment function for Moccasin framework.

    Returns:
        VyperContract: The deployed UsdhToken contract instance.
    """
    active_network = get_active_network()
    print(f"network: {active_network.name}")
    return deploy_usdh_token(overwrite=True)
