"""Worker-facing link endpoints: onboarding, ID verification, enrollment and dashboards."""

from zeal_tools.adapters.zeal.schemas import Endpoint, param

from .common import (
    COMPANY_ID,
    CONTRACTOR_ID,
    EMPLOYEE_ID,
    OBJECT_LIST,
    PARTNER_ID,
    SEND_TO_WORKER,
    STRING_LIST,
)

CREATE_ACCOUNT_SETUP_LINK = Endpoint(
    name="create_account_setup_link",
    description="Create a link for an employee to set up their payment account information.",
    method="POST",
    path="/employees/account_information",
    params=[COMPANY_ID, EMPLOYEE_ID],
)

CREATE_AVAILABLE_PAY_ENROLLMENT_LINK = Endpoint(
    name="create_available_pay_enrollment_link",
    description="Create an Available Pay enrollment link for a contractor.",
    method="POST",
    path="/contractors/available_pay",
    params=[COMPANY_ID, CONTRACTOR_ID],
)

CREATE_CONTRACTOR_ID_VERIFICATION_LINK = Endpoint(
    name="create_contractor_id_verification_link",
    description="Create a link for a contractor to upload an ID for verification.",
    method="POST",
    path="/contractors/id_upload_link",
    params=[COMPANY_ID, CONTRACTOR_ID, SEND_TO_WORKER],
)

CREATE_EMPLOYEE_ID_UPLOAD_LINK = Endpoint(
    name="create_employee_id_upload_link",
    description="Create a link for an employee to upload identity documents.",
    method="POST",
    path="/employees/id_upload_link",
    params=[
        COMPANY_ID,
        EMPLOYEE_ID,
        param(
            "document_type",
            "array",
            "Document types to request, e.g. passport or drivers_license.",
            items=STRING_LIST,
        ),
        SEND_TO_WORKER,
    ],
)

CREATE_ID_SCAN_LINK = Endpoint(
    name="create_id_scan_link",
    description="Create a link for a contractor to scan identity documents.",
    method="POST",
    path="/id_scan",
    params=[
        COMPANY_ID,
        CONTRACTOR_ID,
        param(
            "documents",
            "array",
            "Documents to scan.",
            required=True,
            items=STRING_LIST,
        ),
        SEND_TO_WORKER,
    ],
)

CREATE_INSTANT_PAY_CONTRACTOR_ENROLLMENT_LINK = Endpoint(
    name="create_instant_pay_contractor_enrollment_link",
    description="Create an Instant Pay enrollment link for a contractor.",
    method="POST",
    path="/contractors/instant-pay",
    params=[COMPANY_ID, CONTRACTOR_ID, SEND_TO_WORKER],
)

CREATE_INSTANT_PAY_ENROLLMENT_LINK = Endpoint(
    name="create_instant_pay_enrollment_link",
    description="Create an Instant Pay enrollment link for an employee.",
    method="POST",
    path="/employees/instant-pay",
    params=[COMPANY_ID, EMPLOYEE_ID],
)

CREATE_PAYCARD_ENROLLMENT_LINK = Endpoint(
    name="create_paycard_enrollment_link",
    description="Create a paycard enrollment link for an employee.",
    method="POST",
    path="/employees/paycard",
    params=[COMPANY_ID, EMPLOYEE_ID],
)

GENERATE_CONTRACTOR_ONBOARDING_LINK = Endpoint(
    name="generate_contractor_onboarding_link",
    description="Generate an onboarding link for a contractor.",
    method="POST",
    path="/contractors/onboard",
    params=[
        COMPANY_ID,
        CONTRACTOR_ID,
        param("scan_id", "boolean", "Include the ID scan step.", default=True),
    ],
)

GENERATE_EMPLOYEE_ONBOARDING_LINK = Endpoint(
    name="generate_employee_onboarding_link",
    description="Generate an onboarding link for an employee.",
    method="POST",
    path="/employees/onboard",
    params=[
        COMPANY_ID,
        EMPLOYEE_ID,
        param("profile", "boolean", "Include the profile step.", default=False),
        param("employee_acct", "boolean", "Include the account setup step.", default=False),
        param("i9_form", "boolean", "Include the Form I-9 step.", default=False),
        param("id_scan", "boolean", "Include the ID scan step.", default=False),
        param("payment_method", "boolean", "Include the payment method step.", default=True),
    ],
)

GENERATE_DASHBOARD_LINK = Endpoint(
    name="generate_dashboard_link",
    description="Generate a link that signs an employee into their Zeal dashboard.",
    method="POST",
    path="/",
    params=[PARTNER_ID, COMPANY_ID, EMPLOYEE_ID],
)

SEND_EMPLOYEE_ONBOARDING_LINK = Endpoint(
    name="send_employee_onboarding_link",
    description="Email onboarding links to a batch of employees.",
    method="POST",
    path="/sendLink",
    params=[
        COMPANY_ID,
        param(
            "employees",
            "array",
            "Employees to notify, each with an employeeID.",
            required=True,
            items=OBJECT_LIST,
        ),
    ],
)
