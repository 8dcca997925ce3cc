"""Payroll endpoints: reporting periods, payroll setup and previews."""

from zeal_tools.adapters.zeal.schemas import Endpoint, param

from .common import (
    CHECK_DATE,
    COMPANY_ID,
    EMPLOYEE_ID,
    OBJECT_LIST,
    REPORTING_PERIOD_ID,
    STRING_LIST,
)

CHECKS = param(
    "checks",
    "array",
    "IDs of the employee checks to preview.",
    required=True,
    items=STRING_LIST,
)

GET_ALL_REPORTING_PERIODS = Endpoint(
    name="get_all_reporting_periods",
    description="Get all reporting periods for a company.",
    method="GET",
    path="/reportingPeriod/",
    params=[
        COMPANY_ID,
        param("pay_schedule", description="Filter by pay schedule, e.g. weekly or biweekly."),
    ],
)

GET_REPORTING_PERIOD_BY_DATE_RANGE = Endpoint(
    name="get_reporting_period_by_date_range",
    description="Get reporting periods that fall within a date range.",
    method="GET",
    path="/reportingPeriod",
    params=[
        COMPANY_ID,
        param("paySchedule", description="The pay schedule of the reporting periods."),
        param("searchStart", description="Start of the search range (YYYY-MM-DD)."),
        param("searchEnd", description="End of the search range (YYYY-MM-DD)."),
    ],
)

GET_REPORTING_PERIOD_BY_ID = Endpoint(
    name="get_reporting_period_by_id",
    description="Get a specific reporting period by its ID.",
    method="GET",
    path="/reportingPeriod",
    params=[COMPANY_ID, REPORTING_PERIOD_ID],
    action="retrieving the reporting period",
)

GET_UPCOMING_REGULAR_PAYROLL = Endpoint(
    name="get_upcoming_regular_payroll",
    description="Get the upcoming regular payroll for a company.",
    method="GET",
    path="/payroll/regular",
    params=[COMPANY_ID],
)

SETUP_PAYROLL = Endpoint(
    name="setup_payroll",
    description="Set up the regular payroll schedule for a company.",
    method="POST",
    path="/payroll/setup",
    params=[
        COMPANY_ID,
        param("firstCheckDate", description="The first check date (YYYY-MM-DD).", required=True),
        param("paySchedule", description="The pay schedule, e.g. weekly.", required=True),
        REPORTING_PERIOD_ID,
    ],
)

GET_NEXT_AVAILABLE_CHECK_PAY_DATE = Endpoint(
    name="get_next_available_check_pay_date",
    description="Get the next available check date for a disbursement speed.",
    method="GET",
    path="/preview/availableDate",
    params=[
        COMPANY_ID,
        param("speed", description="Disbursement speed, e.g. one_day or two_day."),
        param("disbursement_method", description="Disbursement method, e.g. direct_deposit."),
    ],
    action="retrieving the next available check pay date",
)

PREVIEW_CHECK_DATA = Endpoint(
    name="preview_check_data",
    description="Preview the taxes and net pay of a check before creating it.",
    method="POST",
    path="/preview/checkData",
    params=[
        COMPANY_ID,
        EMPLOYEE_ID,
        REPORTING_PERIOD_ID,
        CHECK_DATE,
        param("shifts", "array", "Shifts on the check.", required=True, items=OBJECT_LIST),
        param(
            "deductions", "array", "Deductions on the check.", required=True, items=OBJECT_LIST
        ),
    ],
)

PREVIEW_OVERTIME_CHECKS = Endpoint(
    name="preview_overtime_checks",
    description="Preview overtime calculations for a set of checks.",
    method="POST",
    path="/preview/checks/ot",
    params=[COMPANY_ID, CHECKS],
)

PREVIEW_PAYROLL_BY_CHECK_DATE = Endpoint(
    name="preview_payroll_by_check_date",
    description="Preview the payroll totals for every check on a check date.",
    method="POST",
    path="/preview/checkDate",
    params=[COMPANY_ID, CHECK_DATE],
)

PREVIEW_PAYROLL_BY_CHECK_IDS = Endpoint(
    name="preview_payroll_by_check_ids",
    description="Preview the payroll totals for a set of checks.",
    method="POST",
    path="/preview/checks",
    params=[COMPANY_ID, CHECKS],
)
