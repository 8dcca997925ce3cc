"""Banking endpoints: worker bank accounts, customer accounts and reserve balances."""

from zeal_tools.adapters.zeal.schemas import Endpoint, param

from .common import COMPANY_ID, CUSTOMER_ACCOUNT_ID, LIMIT, START_AT, STRING_LIST

BANK_ACCOUNT_ID = param("bankAccountID", description="The ID of the bank account.", required=True)
ACCOUNT_TYPE = param(
    "type", description="The bank account type, e.g. checking or savings.", required=True
)
DEPOSITS = param(
    "deposits",
    "array",
    "The two micro-deposit amounts received.",
    required=True,
    items=STRING_LIST,
)

CREATE_BANK_ACCOUNT = Endpoint(
    name="create_bank_account",
    description="Create a bank account for an employee or contractor.",
    method="POST",
    path="/bankaccount",
    params=[
        COMPANY_ID,
        param("id", description="The ID of the employee or contractor.", required=True),
        param("institution_name", description="Name of the bank.", required=True),
        param("account_number", description="Bank account number.", required=True),
        param("routing_number", description="Bank routing number.", required=True),
        ACCOUNT_TYPE,
    ],
)

GET_BANK_ACCOUNT_BY_EMPLOYEE_CONTRACTOR_ID = Endpoint(
    name="get_bank_account_by_employee_contractor_id",
    description="Get the bank account of an employee or contractor.",
    method="GET",
    path="/bankaccount",
    params=[
        COMPANY_ID,
        param("id", description="The ID of the employee or contractor.", required=True),
    ],
    action="retrieving the bank account",
)

GET_BANK_ACCOUNT_BY_ID = Endpoint(
    name="get_bank_account_by_id",
    description="Get a bank account by its ID.",
    method="GET",
    path="/bankaccount",
    params=[BANK_ACCOUNT_ID, COMPANY_ID],
    action="retrieving the bank account",
)

UPDATE_BANK_ACCOUNT = Endpoint(
    name="update_bank_account",
    description="Update a bank account.",
    method="PATCH",
    path="/bankaccount",
    params=[
        BANK_ACCOUNT_ID,
        COMPANY_ID,
        param("account_number", description="Bank account number.", required=True),
        ACCOUNT_TYPE,
        param("routing_number", description="Bank routing number.", required=True),
        param("institution_name", description="Name of the bank.", required=True),
    ],
)

CREATE_CUSTOMER_ACCOUNT = Endpoint(
    name="create_customer_account",
    description="Create a customer account for a company.",
    method="POST",
    path="/customer-accounts",
    params=[
        param("first_name", description="First name of the account owner.", required=True),
        param("last_name", description="Last name of the account owner.", required=True),
        param("ssn", description="Social security number of the owner.", required=True),
        param("dob", description="Date of birth of the owner (YYYY-MM-DD).", required=True),
        param("email", description="Email of the owner.", required=True),
        param("title", description="Title of the owner."),
        param("ownership_percentage", "number", "Percentage of the business the owner holds."),
        param("owner_type", description="The owner type."),
        param("address", description="Street address of the owner."),
        param("city", description="City of the owner."),
        param("state", description="State of the owner."),
        param("zip", description="Zip code of the owner."),
        COMPANY_ID,
        param("code", description="The partner's code for the customer account.", required=True),
        param("business_name", description="Legal business name.", required=True),
        param("ein", description="Employer identification number."),
        param("legal_structure", description="Legal structure, e.g. llc."),
        param("phone", description="Business phone number."),
        param("business_address", description="Business street address."),
        param("business_city", description="Business city."),
        param("business_state", description="Business state."),
        param("business_zip", description="Business zip code."),
    ],
)

GET_ALL_CUSTOMER_ACCOUNTS = Endpoint(
    name="get_all_customer_accounts",
    description="Get all customer accounts of a company.",
    method="GET",
    path="/customer-accounts",
    params=[COMPANY_ID],
)

GET_CUSTOMER_ACCOUNT = Endpoint(
    name="get_customer_account",
    description="Get a customer account by its ID.",
    method="GET",
    path="/customer-accounts/{customerAccountID}",
    params=[CUSTOMER_ACCOUNT_ID, COMPANY_ID],
)

UPDATE_CUSTOMER_ACCOUNT = Endpoint(
    name="update_customer_account",
    description="Update a customer account.",
    method="PATCH",
    path="/customer-accounts/{id}",
    params=[
        param("id", description="The ID of the customer account.", required=True),
        COMPANY_ID,
        param("code", description="The partner's code for the customer account.", required=True),
    ],
)

SET_CUSTOMER_ACCOUNT_ONBOARDED = Endpoint(
    name="set_customer_account_onboarded",
    description="Set the onboarded status of a customer account to true.",
    method="POST",
    path="/customer-accounts/{customerAccountID}/setOnboardedStatusToTrue",
    params=[CUSTOMER_ACCOUNT_ID, COMPANY_ID],
    action="setting the customer account onboarded status",
)

CREATE_FUNDING_SOURCE = Endpoint(
    name="create_funding_source",
    description="Add a bank funding source to a customer account.",
    method="POST",
    path="/customer-accounts/{id}/funding-sources",
    params=[
        param("id", description="The ID of the customer account.", required=True),
        COMPANY_ID.as_optional(),
        CUSTOMER_ACCOUNT_ID.as_optional(),
        param("account_number", description="Bank account number."),
        param("account_type", description="Bank account type, e.g. checking or savings."),
        param("routing_number", description="Bank routing number."),
    ],
)

TRIGGER_MICRODEPOSITS = Endpoint(
    name="trigger_microdeposits",
    description="Trigger micro-deposits to verify a customer account's funding source.",
    method="POST",
    path="/customer-accounts/{customerAccountID}/trigger-micro-deposits",
    params=[COMPANY_ID.as_optional(), CUSTOMER_ACCOUNT_ID],
)

VERIFY_MICRODEPOSITS = Endpoint(
    name="verify_microdeposits",
    description="Verify the micro-deposit amounts of a customer account's funding source.",
    method="POST",
    path="/customer-accounts/{customerAccountID}/verify-micro-deposits",
    params=[COMPANY_ID, CUSTOMER_ACCOUNT_ID, DEPOSITS],
)

GET_RESERVE_BALANCE = Endpoint(
    name="get_reserve_balance",
    description="Get the reserve balances of a company's provider accounts.",
    method="GET",
    path="/provider-accounts/balances",
    params=[
        COMPANY_ID,
        param(
            "account_type",
            description="The provider account type.",
            enum=["reserve", "direct_pay_reserve"],
        ),
        START_AT,
        LIMIT,
    ],
)

GENERATE_CUSTOMER_ACCOUNT_ONBOARDING_LINK = Endpoint(
    name="generate_customer_account_onboarding_link",
    description="Generate an onboarding link for a customer account.",
    method="POST",
    path="/customer-accounts/onboard",
    params=[COMPANY_ID, CUSTOMER_ACCOUNT_ID],
)
