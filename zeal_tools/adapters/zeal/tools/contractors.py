"""Contractor endpoints: contractor records and contractor payments."""

from zeal_tools.adapters.zeal.schemas import Endpoint, param

from .common import COMPANY_ID, CONTRACTOR_ID, CUSTOMER_ACCOUNT_ID, LIMIT, START_AT

CONTRACTOR_PAYMENT_ID = param(
    "contractorPaymentID", description="The ID of the contractor payment.", required=True
)
PAY_DATE = param("pay_date", description="The date of the payment (YYYY-MM-DD).", required=True)
DISBURSEMENT = param(
    "disbursement",
    "object",
    "Disbursement details, e.g. {\"method\": \"direct_deposit\"}.",
    properties={"method": {"type": "string"}},
)

CREATE_CONTRACTOR = Endpoint(
    name="create_contractor",
    description="Create a new contractor in the Zeal system.",
    method="POST",
    path="/contractors",
    params=[
        COMPANY_ID,
        param("email", description="The email address of the contractor.", required=True),
        param("working_state", description="The state where the contractor works.", required=True),
        param("first_name", description="The first name of the contractor.", required=True),
        param("last_name", description="The last name of the contractor.", required=True),
        param("type", description="The type of contractor: individual or business.", required=True),
        param("business_name", description="The business name, for business contractors."),
        param("ein", description="The employer identification number, for business contractors."),
        param("ssn", description="The social security number, for individual contractors."),
        param("dob", description="The date of birth of the contractor (YYYY-MM-DD).", required=True),
    ],
)

GET_CONTRACTORS = Endpoint(
    name="get_contractors",
    description="Get a list of contractors under a specific company.",
    method="GET",
    path="/contractors",
    params=[
        COMPANY_ID,
        param("onboarded", "boolean", "Filter by onboarded status."),
        param("employment_status", description="Filter by employment status."),
        param("type", description="Filter by contractor type: individual or business."),
        param("email", description="Filter by contractor email."),
        param("external_id", description="Filter by the partner's external ID."),
    ],
)

UPDATE_CONTRACTOR_INFORMATION = Endpoint(
    name="update_contractor_information",
    description="Update a contractor's information in Zeal.",
    method="PATCH",
    path="/contractors",
    params=[
        CONTRACTOR_ID,
        COMPANY_ID,
        param("type", description="The type of contractor: individual or business."),
        param("first_name", description="The first name of the contractor.", required=True),
        param("middle_name", description="The middle name of the contractor."),
        param("last_name", description="The last name of the contractor.", required=True),
        param("email", description="The email address of the contractor.", required=True),
        param("ssn", description="The social security number of the contractor."),
        param("ein", description="The employer identification number."),
        param("business_name", description="The business name."),
        param("address", description="The street address of the contractor."),
        param("city", description="The city of the contractor."),
        param("state", description="The state of the contractor."),
        param("zip", description="The zip code of the contractor."),
        param("dob", description="The date of birth of the contractor."),
    ],
)

UPLOAD_CONTRACTOR_ID = Endpoint(
    name="upload_contractor_id",
    description="Upload a contractor's government ID to Zeal.",
    method="POST",
    path="/contractors/id",
    params=[
        CONTRACTOR_ID,
        COMPANY_ID,
        param("id_type", description="The type of ID being uploaded, e.g. passport."),
        param("id_base64", description="The base64 encoded image of the ID.", required=True),
    ],
    action="uploading the contractor ID",
)

CREATE_CONTRACTOR_PAYMENT = Endpoint(
    name="create_contractor_payment",
    description="Create a payment for a contractor.",
    method="POST",
    path="/contractorPayment",
    params=[
        CONTRACTOR_ID,
        COMPANY_ID,
        PAY_DATE,
        param("amount", "number", "The amount of the payment.", required=True),
        DISBURSEMENT,
        param("metadata", "object", "Arbitrary key/value metadata stored with the payment."),
    ],
)

GET_CONTRACTOR_PAYMENTS = Endpoint(
    name="get_contractor_payments",
    description="Get all payments for a contractor.",
    method="GET",
    path="/contractorPayment",
    params=[
        COMPANY_ID,
        CONTRACTOR_ID,
        param("status", description="Filter by payment status."),
        param("paymentGroupID", description="Filter by payment group."),
        START_AT,
        LIMIT,
    ],
)

GET_CONTRACTOR_PAYMENT_BY_ID = Endpoint(
    name="get_contractor_payment_by_id",
    description="Get a specific contractor payment by its ID.",
    method="GET",
    path="/contractorPayment",
    params=[COMPANY_ID, CONTRACTOR_PAYMENT_ID],
    action="retrieving the contractor payment",
)

UPDATE_CONTRACTOR_PAYMENT = Endpoint(
    name="update_contractor_payment",
    description="Update a pending contractor payment.",
    method="PATCH",
    path="/contractorPayment",
    params=[
        COMPANY_ID,
        CONTRACTOR_PAYMENT_ID,
        CONTRACTOR_ID,
        param("approval_required", "boolean", "Whether the payment needs approval."),
        param("approved", "boolean", "Whether the payment is approved."),
        PAY_DATE,
        param("amount", "number", "The amount of the payment.", required=True),
        DISBURSEMENT.as_required(),
        param("type", description="The type of payment.", required=True),
        param("metadata", "object", "Arbitrary key/value metadata stored with the payment."),
        CUSTOMER_ACCOUNT_ID,
    ],
)

DELETE_CONTRACTOR_PAYMENT = Endpoint(
    name="delete_contractor_payment",
    description="Delete a pending contractor payment.",
    method="DELETE",
    path="/contractorPayment",
    params=[COMPANY_ID, CONTRACTOR_PAYMENT_ID],
    param_location="query",
)
