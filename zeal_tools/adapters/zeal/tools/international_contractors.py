"""International contractor endpoints."""

from zeal_tools.adapters.zeal.schemas import Endpoint, param

from .common import COMPANY_ID, INTL_CONTRACTOR_ID, OBJECT_LIST

CREATE_INTERNATIONAL_CONTRACTORS = Endpoint(
    name="create_international_contractors",
    description="Create one or more international contractors.",
    method="POST",
    path="/internationalContractors",
    params=[
        COMPANY_ID,
        param(
            "new_international_contractors",
            "array",
            "Contractors to create, each with first_name, last_name, email, "
            "country, tax_rate and start_date.",
            required=True,
            items=OBJECT_LIST,
        ),
    ],
)

GET_INTERNATIONAL_CONTRACTOR_INFO = Endpoint(
    name="get_international_contractor_info",
    description="Get information about international contractors under a company.",
    method="GET",
    path="/internationalContractors",
    params=[
        COMPANY_ID,
        INTL_CONTRACTOR_ID.as_optional().described(
            "Return only this international contractor."
        ),
    ],
    action="retrieving international contractor information",
)

GET_CONTRACTOR_INFORMATION = Endpoint(
    name="get_contractor_information",
    description="Get an international contractor's information.",
    method="GET",
    path="/internationalContractors",
    params=[COMPANY_ID, INTL_CONTRACTOR_ID.as_optional()],
)

UPDATE_INTERNATIONAL_CONTRACTOR = Endpoint(
    name="update_international_contractor",
    description="Update an international contractor.",
    method="PATCH",
    path="/internationalContractors",
    params=[
        COMPANY_ID,
        INTL_CONTRACTOR_ID,
        param("email", description="The email address of the contractor.", required=True),
        param("tax_rate", description="The tax rate applied to payments.", required=True),
        param("onboarded", "boolean", "Whether the contractor is onboarded.", required=True),
        param("start_date", description="The start date (YYYY-MM-DD).", required=True),
    ],
)

CREATE_INTERNATIONAL_CONTRACTOR_PAYMENT = Endpoint(
    name="create_international_contractor_payment",
    description="Create a payment for an international contractor.",
    method="POST",
    path="/internationalContractors/payment",
    params=[
        COMPANY_ID,
        INTL_CONTRACTOR_ID,
        param("gross_amount", description="The gross amount of the payment.", required=True),
        param("pay_date", description="The date of the payment (YYYY-MM-DD).", required=True),
    ],
)

GET_INTERNATIONAL_CONTRACTOR_PAYMENTS = Endpoint(
    name="get_international_contractor_payments",
    description="Get payments made to an international contractor.",
    method="GET",
    path="/payment",
    params=[COMPANY_ID, INTL_CONTRACTOR_ID],
)

UPDATE_INTERNATIONAL_CONTRACTOR_PAYMENT = Endpoint(
    name="update_international_contractor_payment",
    description="Update a pending international contractor payment.",
    method="PATCH",
    path="/payment",
    params=[
        COMPANY_ID,
        INTL_CONTRACTOR_ID,
        param(
            "intlContractorPaymentID",
            description="The ID of the international contractor payment.",
            required=True,
        ),
        param("gross_amount", "number", "The gross amount of the payment.", required=True),
        param("pay_date", description="The date of the payment (YYYY-MM-DD).", required=True),
    ],
)

GENERATE_INTERNATIONAL_CONTRACTOR_ONBOARDING_LINK = Endpoint(
    name="generate_international_contractor_onboarding_link",
    description="Generate an onboarding link for an international contractor.",
    method="POST",
    path="/internationalContractors/onboard",
    params=[INTL_CONTRACTOR_ID, COMPANY_ID],
)
