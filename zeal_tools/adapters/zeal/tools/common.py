"""Parameters shared across the endpoint catalog."""

from zeal_tools.adapters.zeal.schemas import param

COMPANY_ID = param("companyID", description="The ID of the company.", required=True)
EMPLOYEE_ID = param("employeeID", description="The ID of the employee.", required=True)
CONTRACTOR_ID = param("contractorID", description="The ID of the contractor.", required=True)
INTL_CONTRACTOR_ID = param(
    "intlContractorID", description="The ID of the international contractor.", required=True
)
PARTNER_ID = param("partnerID", description="The ID of the partner.", required=True)
EMPLOYEE_CHECK_ID = param(
    "employeeCheckID", description="The ID of the employee check.", required=True
)
REPORTING_PERIOD_ID = param(
    "reportingPeriodID", description="The ID of the reporting period.", required=True
)
CUSTOMER_ACCOUNT_ID = param(
    "customerAccountID", description="The ID of the customer account.", required=True
)
WORK_LOCATION_ID = param(
    "workLocationID", description="The ID of the work location.", required=True
)

CHECK_DATE = param("check_date", description="The check date (YYYY-MM-DD).", required=True)
START_DATE = param("start_date", description="Start of the date range (YYYY-MM-DD).", required=True)
END_DATE = param("end_date", description="End of the date range (YYYY-MM-DD).", required=True)

START_AT = param("start_at", description="Pagination cursor or start date for the listing.")
LIMIT = param("limit", "integer", "The number of results to return, defaults to 25.", default=25)
MEDIA_TYPE = param("media_type", description="Output format of the report, e.g. csv, pdf or json.")
SEND_TO_WORKER = param(
    "send_to_worker", "boolean", "Email the link directly to the worker.", default=False
)
JURISDICTIONS = param(
    "jurisdictions",
    "array",
    "Jurisdiction codes, e.g. ['US', 'CA'].",
    required=True,
    items={"type": "string"},
)

OBJECT_LIST = {"type": "object"}
STRING_LIST = {"type": "string"}
