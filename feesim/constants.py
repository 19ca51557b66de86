"""Starknet protocol constants and default swap router configuration."""

# Starknet field prime: every felt is an integer in [0, FIELD_PRIME)
FIELD_PRIME = 2**251 + 17 * 2**192 + 1
FELT_MAX = FIELD_PRIME - 1

U64_MAX = 2**64 - 1
U128_MAX = 2**128 - 1

# Default node and sender account (Sepolia)
DEFAULT_NODE_URL = "https://sepolia.juno.avnu.fi"
DEFAULT_ACCOUNT_ADDRESS = "0x059e0eaf58972c3b7de923ad6a280476430295f7ea967b768bd381bf5d90d50b"

# Default batch files
DEFAULT_INPUTS_PATH = "simulation_inputs.json"
DEFAULT_OUTPUT_PATH = "simulation_results_new.csv"

# Swap router (aggregator exchange contract) and its swap entry point selector
SWAP_ROUTER_ADDRESS = 0x02C56E8B00DBE2A71E57472685378FC8988BBA947E9A99B26A00FADE2B4FE7C2
SWAP_SELECTOR = 0x01171593AA5BDADDA4D6B0EFDE6CC94EE7649C3163D5EFEB19DA6C16D63A2A63

# Pool manager (core) contract the route goes through
EXCHANGE_ADDRESS = 0x0444A09D96389AA7148F1AADA508E30B71299FFE650D9C97FDAAE38CB9A23384

# Pool extension contract
POOL_EXTENSION_ADDRESS = 0x065E8885B13C84318F43FE77280B842269B6FEB6A66947F22FADC70963A14771

# Route percentage is expressed in units of 1e-12, so 1e12 routes 100%
ROUTE_PERCENTAGE_FULL = 0xE8D4A51000

POOL_FEE = 0
POOL_TICK_SPACING = 0x80

# Fixed shape of the swap calldata
CALL_COUNT = 1
SWAP_ARGUMENT_COUNT = 0x17
ROUTE_COUNT = 1
POOL_PARAMETER_COUNT = 6
SWAP_CALLDATA_LENGTH = 4 + SWAP_ARGUMENT_COUNT

# V3 resource bounds used when nothing else is configured
DEFAULT_MAX_GAS_AMOUNT = 500
DEFAULT_MAX_PRICE_PER_UNIT = 45482573982463

__all__ = [
    "FIELD_PRIME",
    "FELT_MAX",
    "U64_MAX",
    "U128_MAX",
    "DEFAULT_NODE_URL",
    "DEFAULT_ACCOUNT_ADDRESS",
    "DEFAULT_INPUTS_PATH",
    "DEFAULT_OUTPUT_PATH",
    "SWAP_ROUTER_ADDRESS",
    "SWAP_SELECTOR",
    "EXCHANGE_ADDRESS",
    "POOL_EXTENSION_ADDRESS",
    "ROUTE_PERCENTAGE_FULL",
    "POOL_FEE",
    "POOL_TICK_SPACING",
    "CALL_COUNT",
    "SWAP_ARGUMENT_COUNT",
    "ROUTE_COUNT",
    "POOL_PARAMETER_COUNT",
    "SWAP_CALLDATA_LENGTH",
    "DEFAULT_MAX_GAS_AMOUNT",
    "DEFAULT_MAX_PRICE_PER_UNIT",
]
