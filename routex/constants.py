"""Protocol constants for the Routex router.

Centralizes well-known addresses, Move module names and routing parameters.
"""

from routex.models.types import is_valid_account_address

# Largest number of swaps a single compiled transaction can execute.
# The router module exposes one entry point per hop count up to this value.
MAX_HOPS = 3

# Slippage is expressed in tenths of a percent (10 = 1.0%)
SLIPPAGE_BASE = 1000
DEFAULT_MAX_SLIPPAGE = 10


def _validate_account_address(name: str, address: str) -> str:
    """Validate and return an account address.

    Raises:
        ValueError: If the address is invalid
    """
    if not is_valid_account_address(address):
        raise ValueError(f"Invalid {name} address: {address} (must be 0x + 1..64 hex chars)")
    return address


# Movement Suzuka testnet fullnode REST endpoint
DEFAULT_FULLNODE_URL = "https://aptos.testnet.suzuka.movementlabs.xyz/v1"

# Account that publishes the Routex router and test coins
DEFAULT_ROUTEX_ADDRESS = _validate_account_address(
    "Routex", "0x36fb4758ac5e5dbc78f8b1a1801e163c819f54be4c9c375ad0e33d8ffe968705"
)

# Account that publishes the bridged test tokens (WBTC, WETH, USDT, USDC)
DEFAULT_OFFICIAL_COIN_ADDRESS = _validate_account_address(
    "official coin", "0x275f508689de8756169d1ee02d889c777de1cebda3a7bbcce63ba8a27c563c6f"
)

# Router module published at the Routex address
DEFAULT_ROUTER_MODULE = "RoutexV2"

# Native coin of the chain
APTOS_COIN = "0x1::aptos_coin::AptosCoin"

# View functions
GET_AMOUNTS_OUT = "get_amounts_out"
COIN_BALANCE_FUNCTION = "0x1::coin::balance"

# Swap entry points, keyed by hop count
SWAP_ENTRY_FUNCTIONS = {
    1: "swap_exact_coins_for_coins_entry",
    2: "swap_exact_coins_for_coins_2_pair_entry",
    3: "swap_exact_coins_for_coins_3_pair_entry",
}

# Faucets
FAUCET_MODULE = "FaucetV1"
OFFICIAL_FAUCET_FUNCTION = "faucet::mintAll"
