"""Test helpers module for shared test utilities.

- constants: Token and account addresses
- factories: Swap row and simulation response factory functions
"""

from tests.helpers.constants import ACCOUNT, ETH, OTHER_ACCOUNT, STRK, USDC
from tests.helpers.factories import make_simulation_response, make_swap_parameters

__all__ = [
    # Constants
    "ETH",
    "STRK",
    "USDC",
    "ACCOUNT",
    "OTHER_ACCOUNT",
    # Factories
    "make_swap_parameters",
    "make_simulation_response",
]
