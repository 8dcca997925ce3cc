"""Company endpoints: profile, onboarding, dashboard links, authorization and company bank."""

from zeal_tools.adapters.zeal.schemas import Endpoint, param

from .common import COMPANY_ID, PARTNER_ID, STRING_LIST

CREATE_COMPANY = Endpoint(
    name="create_company",
    description="Creates a company within Zeal.",
    method="POST",
    path="/companies",
    params=[
        PARTNER_ID,
        param("first_name", description="First name of the company's primary contact.", required=True),
        param("last_name", description="Last name of the company's primary contact.", required=True),
        param("email", description="Email of the company's primary contact.", required=True),
        param("business_name", description="Legal business name.", required=True),
        param("business_ein", description="Employer identification number.", required=True),
        param("business_address", description="Business street address.", required=True),
        param("business_city", description="Business city.", required=True),
        param("business_state", description="Business state (two letter code).", required=True),
        param("business_zip", description="Business zip code.", required=True),
        param("business_phone", description="Business phone number.", required=True),
        param("mail_address", description="Mailing street address.", required=True),
        param("mail_city", description="Mailing city.", required=True),
        param("mail_state", description="Mailing state (two letter code).", required=True),
        param("mail_zip", description="Mailing zip code.", required=True),
    ],
)

GET_COMPANY_INFORMATION = Endpoint(
    name="get_company_information",
    description="Get information for a specific company under a partner.",
    method="GET",
    path="/companies",
    params=[COMPANY_ID],
)

GET_ALL_COMPANY_INFORMATION = Endpoint(
    name="get_all_company_information",
    description="Get information for all companies under a partner.",
    method="GET",
    path="/companies",
    params=[PARTNER_ID],
)

UPDATE_COMPANY_INFO = Endpoint(
    name="update_company_info",
    description="Update company information in Zeal.",
    method="PATCH",
    path="/companies",
    params=[
        COMPANY_ID,
        param("first_name", description="First name of the primary contact."),
        param("last_name", description="Last name of the primary contact."),
        param("email", description="Email of the primary contact."),
        param("business_name", description="Legal business name."),
        param("business_ein", description="Employer identification number."),
        param("mailing_address", description="Mailing street address."),
        param("mailing_city", description="Mailing city."),
        param("mailing_state", description="Mailing state (two letter code)."),
        param("mailing_zip", description="Mailing zip code."),
        param("business_phone", description="Business phone number."),
    ],
)

GET_COMPANY_ONBOARDING_LINK = Endpoint(
    name="get_company_onboarding_link",
    description="Get a link to Zeal's web-based company onboarding.",
    method="GET",
    path="/companies/onboard",
    params=[
        PARTNER_ID,
        COMPANY_ID.as_optional().described("The ID of an existing company to continue onboarding."),
        param("webhook_correlation_id", description="Identifier echoed back on onboarding webhooks."),
    ],
)

SET_COMPANY_ONBOARDED_STATUS = Endpoint(
    name="set_company_onboarded_status",
    description="Set the onboarded status of a company to true.",
    method="POST",
    path="/companies/onboardCompany",
    params=[COMPANY_ID],
)

GENERATE_COMPANY_LOGIN_LINK = Endpoint(
    name="generate_company_login_link",
    description="Generates a link that automatically signs in an employer into their Zeal Company Dashboard.",
    method="POST",
    path="/getAuthLink",
    params=[PARTNER_ID, COMPANY_ID],
)

GENERATE_COMPANY_TAXES_LINK = Endpoint(
    name="generate_company_taxes_link",
    description="Generate an authenticated link for the Company Taxes Page.",
    method="POST",
    path="/authLinks/taxes",
    params=[
        PARTNER_ID,
        COMPANY_ID,
        param(
            "showSidebar", "boolean", "Show the dashboard sidebar on the linked page.", default=True
        ),
    ],
)

GENERATE_REPORTS_LINK = Endpoint(
    name="generate_reports_link",
    description="Generates a link that signs in an employer to their Zeal Reports Dashboard.",
    method="POST",
    path="/authLinks/reports",
    params=[COMPANY_ID, PARTNER_ID],
)

GET_COMPANY_AUTHORIZATION_DOCUMENTS = Endpoint(
    name="get_company_authorization_documents",
    description="Fetch and view Company Authorization Documents.",
    method="GET",
    path="/companies/authorization_documents",
    params=[
        COMPANY_ID,
        param("document_key", description="Key of the authorization document.", required=True),
    ],
)

SIGN_COMPANY_AUTHORIZATION_DOCUMENTS = Endpoint(
    name="sign_company_authorization_documents",
    description="Sign authorization documents necessary to onboard a company.",
    method="POST",
    path="/companies/authorization_documents",
    params=[
        COMPANY_ID,
        param("document_key", description="Key of the authorization document.", required=True),
        param("signature", description="Signer's full name as signature.", required=True),
    ],
)

CREATE_COMPANY_BANK_ACCOUNT = Endpoint(
    name="create_company_bank_account",
    description="Create a bank account for the specified company.",
    method="POST",
    path="/companies/bank",
    params=[
        param("account_number", description="Bank account number.", required=True),
        param("routing_number", description="Bank routing number.", required=True),
        COMPANY_ID,
    ],
)

TRIGGER_MICRO_DEPOSITS = Endpoint(
    name="trigger_micro_deposits",
    description="Trigger micro-deposits to verify a company bank account.",
    method="POST",
    path="/companies/microdeposits/trigger",
    params=[COMPANY_ID],
)

VERIFY_MICRODEPOSIT_VALUES = Endpoint(
    name="verify_microdeposit_values",
    description="Verify microdeposit values for a company bank account.",
    method="POST",
    path="/companies/microdeposits/verify",
    params=[
        COMPANY_ID,
        param(
            "deposits",
            "array",
            "The two micro-deposit amounts received.",
            required=True,
            items=STRING_LIST,
        ),
    ],
    action="verifying microdeposit values",
)
