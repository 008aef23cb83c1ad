"""Chain collaborators: view client, quote oracles and balance readers."""

from routex.chain.balances import AptosBalanceReader, BalanceReader
from routex.chain.client import AptosViewClient
from routex.chain.quoter import AptosQuoteOracle, MockQuoteOracle, QuoteOracle

__all__ = [
    "AptosBalanceReader",
    "AptosQuoteOracle",
    "AptosViewClient",
    "BalanceReader",
    "MockQuoteOracle",
    "QuoteOracle",
]
