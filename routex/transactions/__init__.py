"""Transaction payload compilation."""

from routex.transactions.compiler import CallDescriptor, TransactionCompiler, min_amount_out

__all__ = ["CallDescriptor", "TransactionCompiler", "min_amount_out"]
