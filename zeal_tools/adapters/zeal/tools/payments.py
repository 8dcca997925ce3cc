"""Payment endpoints: worker wallets, paycards and direct payments.

Worker-scoped endpoints take either an employeeID or a contractorID; the API
rejects requests carrying neither.
"""

from zeal_tools.adapters.zeal.schemas import Endpoint, param

from .common import COMPANY_ID, CONTRACTOR_ID, EMPLOYEE_ID, LIMIT, START_AT

WORKER_EMPLOYEE_ID = EMPLOYEE_ID.as_optional().described(
    "The ID of the employee (provide this or contractorID)."
)
WORKER_CONTRACTOR_ID = CONTRACTOR_ID.as_optional().described(
    "The ID of the contractor (provide this or employeeID)."
)

GET_WALLET_BALANCE = Endpoint(
    name="get_wallet_balance",
    description="Get the wallet balance of an employee or contractor.",
    method="GET",
    path="/wallet",
    params=[COMPANY_ID, WORKER_EMPLOYEE_ID, WORKER_CONTRACTOR_ID],
)

GET_WALLET_TRANSACTIONS = Endpoint(
    name="get_wallet_transactions",
    description="Get the wallet transactions of an employee or contractor.",
    method="GET",
    path="/wallet/transactions",
    params=[
        COMPANY_ID,
        WORKER_EMPLOYEE_ID,
        WORKER_CONTRACTOR_ID,
        param("walletTransactionID", description="Return only this transaction."),
    ],
)

TRANSFER_FUNDS = Endpoint(
    name="transfer_funds",
    description="Transfer funds from a worker's wallet to a linked bank account.",
    method="POST",
    path="/wallet/transfer",
    params=[
        COMPANY_ID,
        param("amount", "number", "The amount to transfer.", required=True),
        WORKER_EMPLOYEE_ID,
        WORKER_CONTRACTOR_ID,
        param("connectionID", description="The ID of the linked bank connection.", required=True),
    ],
)

GET_PAYCARDS = Endpoint(
    name="get_paycards",
    description="Get the paycards issued under a company.",
    method="GET",
    path="/paycards",
    params=[
        COMPANY_ID,
        EMPLOYEE_ID.as_optional(),
        CONTRACTOR_ID.as_optional(),
        param("paycardID", description="Return only this paycard."),
        START_AT,
        param("end_at", description="End of the listing range."),
        LIMIT,
    ],
)

GET_CARD = Endpoint(
    name="get_card",
    description="Get the paycard of an employee or contractor.",
    method="GET",
    path="/card",
    params=[COMPANY_ID, WORKER_EMPLOYEE_ID, WORKER_CONTRACTOR_ID],
)

CREATE_DIRECT_PAYMENT = Endpoint(
    name="create_direct_payment",
    description="Create a direct payment to an employee or contractor.",
    method="POST",
    path="/directPayments",
    params=[
        COMPANY_ID,
        param("amount", "number", "The amount of the payment.", required=True),
        WORKER_EMPLOYEE_ID,
        WORKER_CONTRACTOR_ID,
    ],
)

GET_DIRECT_PAYMENTS = Endpoint(
    name="get_direct_payments",
    description="Get the direct payments of a company.",
    method="GET",
    path="/directPayments",
    params=[
        COMPANY_ID,
        param("directPaymentID", description="Return only this direct payment."),
        CONTRACTOR_ID.as_optional(),
        EMPLOYEE_ID.as_optional(),
    ],
)
