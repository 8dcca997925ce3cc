"""Check endpoints: employee checks, shifts, employer checks and paystubs."""

from zeal_tools.adapters.zeal.schemas import Endpoint, param

from .common import (
    CHECK_DATE,
    COMPANY_ID,
    EMPLOYEE_CHECK_ID,
    EMPLOYEE_ID,
    OBJECT_LIST,
    REPORTING_PERIOD_ID,
)

SHIFTS = param(
    "shifts",
    "array",
    "Shifts to pay, each with time, hourly or flat pay fields and an optional workLocationID.",
    required=True,
    items=OBJECT_LIST,
)
SHIFT_ID = param("shiftID", description="The ID of the shift.", required=True)
EMPLOYER_CHECK_ID = param(
    "employerCheckID", description="The ID of the employer check.", required=True
)
DISBURSEMENT = param(
    "disbursement",
    "object",
    "Disbursement details, e.g. {\"method\": \"direct_deposit\"}.",
    properties={"method": {"type": "string"}},
)

CREATE_EMPLOYEE_CHECK = Endpoint(
    name="create_employee_check",
    description="Create an employee check for a reporting period.",
    method="POST",
    path="/employeeCheck",
    params=[
        param("approval_required", "boolean", "Whether the check needs approval.", required=True),
        DISBURSEMENT.as_required(),
        SHIFTS,
        REPORTING_PERIOD_ID,
        CHECK_DATE,
        COMPANY_ID,
        EMPLOYEE_ID,
    ],
)

CREATE_BULK_EMPLOYEE_CHECKS = Endpoint(
    name="create_bulk_employee_checks",
    description="Create multiple employee checks in one request.",
    method="POST",
    path="/employeeChecks",
    params=[
        COMPANY_ID,
        param(
            "employeeChecks",
            "array",
            "Employee checks to create, each shaped like a single check request.",
            required=True,
            items=OBJECT_LIST,
        ),
    ],
)

GET_EMPLOYEE_CHECK = Endpoint(
    name="get_employee_check",
    description="Get the employee checks for an employee in a reporting period.",
    method="GET",
    path="/employeeCheck",
    params=[
        COMPANY_ID,
        EMPLOYEE_ID,
        param("status", description="Filter by check status, e.g. pending or processed."),
        REPORTING_PERIOD_ID,
    ],
)

UPDATE_EMPLOYEE_CHECK = Endpoint(
    name="update_employee_check",
    description="Update a pending employee check.",
    method="PATCH",
    path="/employeeCheck",
    params=[
        COMPANY_ID,
        EMPLOYEE_CHECK_ID,
        REPORTING_PERIOD_ID,
        CHECK_DATE.as_optional(),
        param("approval_required", "boolean", "Whether the check needs approval."),
        param("approved", "boolean", "Whether the check is approved."),
        param("metadata", "object", "Arbitrary key/value metadata stored with the check."),
        DISBURSEMENT,
    ],
)

DELETE_EMPLOYEE_CHECK = Endpoint(
    name="delete_employee_check",
    description="Delete a pending employee check.",
    method="DELETE",
    path="/employeeCheck",
    params=[COMPANY_ID, EMPLOYEE_CHECK_ID],
    param_location="query",
)

TRIGGER_DISBURSEMENT = Endpoint(
    name="trigger_disbursement",
    description="Trigger the disbursement of an approved employee check.",
    method="POST",
    path="/employeeCheck/trigger",
    params=[COMPANY_ID, EMPLOYEE_CHECK_ID],
)

ADD_SHIFTS_TO_CHECK = Endpoint(
    name="add_shifts_to_check",
    description="Add shifts to an existing employee check.",
    method="POST",
    path="/shifts",
    params=[SHIFTS, COMPANY_ID, EMPLOYEE_CHECK_ID],
    action="adding shifts to the check",
)

GET_SHIFT_INFORMATION = Endpoint(
    name="get_shift_information",
    description="Get information about a specific shift.",
    method="GET",
    path="/shifts",
    params=[COMPANY_ID, SHIFT_ID],
)

UPDATE_PENDING_SHIFTS = Endpoint(
    name="update_pending_shifts",
    description="Update shifts on pending employee checks.",
    method="PATCH",
    path="/shifts",
    params=[
        COMPANY_ID,
        SHIFTS.described("Shifts to update, each including its shiftID."),
    ],
)

DELETE_PENDING_SHIFTS = Endpoint(
    name="delete_pending_shifts",
    description="Delete a shift from a pending employee check.",
    method="DELETE",
    path="/shifts",
    params=[COMPANY_ID, SHIFT_ID],
    param_location="query",
)

GET_ALL_EMPLOYER_CHECKS = Endpoint(
    name="get_all_employer_checks",
    description="Get all employer checks for a company.",
    method="GET",
    path="/employerCheck",
    params=[COMPANY_ID],
)

GET_EMPLOYER_CHECK_BY_ID = Endpoint(
    name="get_employer_check_by_id",
    description="Get a specific employer check by its ID.",
    method="GET",
    path="/employerCheck",
    params=[COMPANY_ID, EMPLOYER_CHECK_ID],
    action="retrieving the employer check",
)

GET_EMPLOYER_CHECKS_BY_DATE = Endpoint(
    name="get_employer_checks_by_date",
    description="Get employer checks with check dates in a range.",
    method="GET",
    path="/employerCheck",
    params=[
        COMPANY_ID,
        param("start", description="Start of the check date range (YYYY-MM-DD)."),
        param("end", description="End of the check date range (YYYY-MM-DD)."),
    ],
)

GET_PAYSTUB_LINK = Endpoint(
    name="get_paystub_link",
    description="Get a link to the paystub of an employee check.",
    method="GET",
    path="/paystubLink",
    params=[COMPANY_ID, EMPLOYEE_CHECK_ID],
)

DOWNLOAD_PAYSTUB_PDF = Endpoint(
    name="download_paystub_pdf",
    description="Download the paystub PDF of an employee check.",
    method="GET",
    path="/paystub/company/{companyID}/check/{employeeCheckID}",
    params=[COMPANY_ID, EMPLOYEE_CHECK_ID],
)
