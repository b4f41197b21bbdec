"""Balance projection for the two accounts touched by an instruction."""

from __future__ import annotations

from collections.abc import Sequence

from payment_instructions.schemas.payment import Account, CanonicalInstruction, ProjectedAccount


def project_balances(
    accounts: Sequence[Account],
    instruction: CanonicalInstruction,
    execute_now: bool,
) -> list[ProjectedAccount]:
    """Return before/after balances for the debit and credit accounts, in input order.

    Unrelated accounts are left out. When the transfer is deferred both
    balances stay unchanged.
    """

    deltas = {
        instruction.debit_account: -instruction.amount,
        instruction.credit_account: instruction.amount,
    }
    projected: list[ProjectedAccount] = []
    seen: set[str] = set()

    for account in accounts:
        if account.id not in deltas or account.id in seen:
            continue
        seen.add(account.id)

        balance_after = account.balance + deltas[account.id] if execute_now else account.balance
        projected.append(
            ProjectedAccount(
                id=account.id,
                balance=balance_after,
                balance_before=account.balance,
                currency=account.currency.upper(),
            )
        )

    return projected
