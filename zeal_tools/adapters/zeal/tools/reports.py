"""Report endpoints.

Report creation is asynchronous upstream: the create call returns a job ID,
``get_job_status`` polls it and ``get_report_download`` fetches the result.
"""

from zeal_tools.adapters.zeal.schemas import Endpoint, param

from .common import CHECK_DATE, COMPANY_ID, EMPLOYEE_ID, END_DATE, MEDIA_TYPE, START_DATE

JOB_ID = param("job_id", description="The ID of the report job.", required=True)
INCLUDE_MIGRATED = param(
    "include_migrated",
    "boolean",
    "Include payroll migrated from a previous provider.",
    default=False,
)

CREATE_CASH_REQUIREMENTS_REPORT = Endpoint(
    name="create_cash_requirements_report",
    description="Create a cash requirements report for a check date.",
    method="POST",
    path="/reports/cash-requirements",
    params=[COMPANY_ID, CHECK_DATE, MEDIA_TYPE.as_required()],
)

CREATE_CUSTOM_PAYROLL_JOURNAL_REPORT = Endpoint(
    name="create_custom_payroll_journal_report",
    description="Create a payroll journal report with a custom set of fields.",
    method="POST",
    path="/reports/custom-payroll-journal",
    params=[
        START_DATE,
        END_DATE,
        COMPANY_ID,
        MEDIA_TYPE.defaulting("pdf"),
        param("fields", "object", "Fields to include in the report, keyed by section."),
    ],
)

CREATE_DEDUCTION_SUMMARY_REPORT = Endpoint(
    name="create_deduction_summary_report",
    description="Create a deductions summary report for a date range.",
    method="POST",
    path="/reports/deductions-summary",
    params=[COMPANY_ID, START_DATE, END_DATE, MEDIA_TYPE.defaulting("csv")],
)

CREATE_KYC_SUMMARY_REPORT = Endpoint(
    name="create_kyc_summary_report",
    description="Create a KYC summary report of a company's workers.",
    method="POST",
    path="/kyc-summary",
    params=[
        COMPANY_ID,
        param("employment_status", description="Filter by employment status.", default="live"),
        param("kyc_status", description="Filter by KYC status.", default="all"),
        MEDIA_TYPE.defaulting("csv"),
    ],
    action="creating the KYC summary report",
)

CREATE_LABOR_ALLOCATION_REPORT = Endpoint(
    name="create_labor_allocation_report",
    description="Create a labor allocation report for a date range.",
    method="POST",
    path="/reports/labor-allocation",
    params=[START_DATE, END_DATE, COMPANY_ID, MEDIA_TYPE.defaulting("csv"), INCLUDE_MIGRATED],
)

CREATE_PAYMENT_SUMMARY_REPORT = Endpoint(
    name="create_payment_summary_report",
    description="Create a payment summary report for a pay date range.",
    method="POST",
    path="/reports/payment-summary",
    params=[
        param("pay_start_date", description="Start of the pay date range.", required=True),
        param("pay_end_date", description="End of the pay date range.", required=True),
        COMPANY_ID,
        MEDIA_TYPE.defaulting("pdf"),
    ],
)

CREATE_PAYROLL_JOURNAL_REPORT = Endpoint(
    name="create_payroll_journal_report",
    description="Create a payroll journal report for a date range.",
    method="POST",
    path="/reports/payroll-journal",
    params=[START_DATE, END_DATE, COMPANY_ID, MEDIA_TYPE.defaulting("csv"), INCLUDE_MIGRATED],
)

CREATE_QUARTER_TO_DATE_REPORT = Endpoint(
    name="create_quarter_to_date_report",
    description="Create a quarter-to-date earnings report for an employee.",
    method="POST",
    path="/reports/qtd",
    params=[
        COMPANY_ID,
        EMPLOYEE_ID,
        param("quarter", description="The quarter, e.g. 2024-Q1.", required=True),
    ],
)

CREATE_WORKER_SUMMARY_REPORT = Endpoint(
    name="create_worker_summary_report",
    description="Create a summary report of a company's workers.",
    method="POST",
    path="/reports/worker-summary",
    params=[
        COMPANY_ID,
        param(
            "worker_type",
            description="The worker type: employee or contractor.",
            default="employee",
        ),
        MEDIA_TYPE.defaulting("csv"),
        param("active_workers", "boolean", "Include only active workers.", default=True),
    ],
)

CREATE_YTD_REPORT = Endpoint(
    name="create_ytd_report",
    description="Create a year-to-date earnings report for an employee.",
    method="POST",
    path="/reports/ytd",
    params=[
        COMPANY_ID,
        EMPLOYEE_ID,
        param("year", description="The year, e.g. 2024."),
    ],
    action="creating the YTD report",
)

GET_JOB_STATUS = Endpoint(
    name="get_job_status",
    description="Get the status of a report job.",
    method="GET",
    path="/reports",
    params=[JOB_ID, COMPANY_ID],
)

GET_REPORT_DOWNLOAD = Endpoint(
    name="get_report_download",
    description="Get the download link of a finished report job.",
    method="GET",
    path="/reports/downloads",
    params=[JOB_ID],
)
