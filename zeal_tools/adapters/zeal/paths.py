"""Static tool registration table.

Every Zeal endpoint tool is listed here as a ``"module:ATTRIBUTE"`` identifier.
Discovery loads them concurrently and keeps this order, so the order below is
the order hosts see in tool listings.
"""

_CATALOG = "zeal_tools.adapters.zeal.tools"

TOOL_PATHS: list[str] = [
    # companies
    f"{_CATALOG}.companies:CREATE_COMPANY",
    f"{_CATALOG}.companies:GET_COMPANY_INFORMATION",
    f"{_CATALOG}.companies:GET_ALL_COMPANY_INFORMATION",
    f"{_CATALOG}.companies:UPDATE_COMPANY_INFO",
    f"{_CATALOG}.companies:GET_COMPANY_ONBOARDING_LINK",
    f"{_CATALOG}.companies:SET_COMPANY_ONBOARDED_STATUS",
    f"{_CATALOG}.companies:GENERATE_COMPANY_LOGIN_LINK",
    f"{_CATALOG}.companies:GENERATE_COMPANY_TAXES_LINK",
    f"{_CATALOG}.companies:GENERATE_REPORTS_LINK",
    f"{_CATALOG}.companies:GET_COMPANY_AUTHORIZATION_DOCUMENTS",
    f"{_CATALOG}.companies:SIGN_COMPANY_AUTHORIZATION_DOCUMENTS",
    f"{_CATALOG}.companies:CREATE_COMPANY_BANK_ACCOUNT",
    f"{_CATALOG}.companies:TRIGGER_MICRO_DEPOSITS",
    f"{_CATALOG}.companies:VERIFY_MICRODEPOSIT_VALUES",
    # employees
    f"{_CATALOG}.employees:CREATE_EMPLOYEE",
    f"{_CATALOG}.employees:GET_EMPLOYEES",
    f"{_CATALOG}.employees:GET_EMPLOYEE_INFORMATION",
    f"{_CATALOG}.employees:UPDATE_EMPLOYEE_INFO",
    f"{_CATALOG}.employees:SET_ONBOARDED_STATUS",
    f"{_CATALOG}.employees:GET_EMPLOYEE_REQUIREMENTS",
    f"{_CATALOG}.employees:UPLOAD_EMPLOYEE_GOVERNMENT_ID",
    f"{_CATALOG}.employees:GET_ATTRIBUTES",
    f"{_CATALOG}.employees:SET_ATTRIBUTE_VALUE",
    # contractors
    f"{_CATALOG}.contractors:CREATE_CONTRACTOR",
    f"{_CATALOG}.contractors:GET_CONTRACTORS",
    f"{_CATALOG}.contractors:UPDATE_CONTRACTOR_INFORMATION",
    f"{_CATALOG}.contractors:UPLOAD_CONTRACTOR_ID",
    f"{_CATALOG}.contractors:CREATE_CONTRACTOR_PAYMENT",
    f"{_CATALOG}.contractors:GET_CONTRACTOR_PAYMENTS",
    f"{_CATALOG}.contractors:GET_CONTRACTOR_PAYMENT_BY_ID",
    f"{_CATALOG}.contractors:UPDATE_CONTRACTOR_PAYMENT",
    f"{_CATALOG}.contractors:DELETE_CONTRACTOR_PAYMENT",
    # international contractors
    f"{_CATALOG}.international_contractors:CREATE_INTERNATIONAL_CONTRACTORS",
    f"{_CATALOG}.international_contractors:GET_INTERNATIONAL_CONTRACTOR_INFO",
    f"{_CATALOG}.international_contractors:GET_CONTRACTOR_INFORMATION",
    f"{_CATALOG}.international_contractors:UPDATE_INTERNATIONAL_CONTRACTOR",
    f"{_CATALOG}.international_contractors:CREATE_INTERNATIONAL_CONTRACTOR_PAYMENT",
    f"{_CATALOG}.international_contractors:GET_INTERNATIONAL_CONTRACTOR_PAYMENTS",
    f"{_CATALOG}.international_contractors:UPDATE_INTERNATIONAL_CONTRACTOR_PAYMENT",
    f"{_CATALOG}.international_contractors:GENERATE_INTERNATIONAL_CONTRACTOR_ONBOARDING_LINK",
    # checks
    f"{_CATALOG}.checks:CREATE_EMPLOYEE_CHECK",
    f"{_CATALOG}.checks:CREATE_BULK_EMPLOYEE_CHECKS",
    f"{_CATALOG}.checks:GET_EMPLOYEE_CHECK",
    f"{_CATALOG}.checks:UPDATE_EMPLOYEE_CHECK",
    f"{_CATALOG}.checks:DELETE_EMPLOYEE_CHECK",
    f"{_CATALOG}.checks:TRIGGER_DISBURSEMENT",
    f"{_CATALOG}.checks:ADD_SHIFTS_TO_CHECK",
    f"{_CATALOG}.checks:GET_SHIFT_INFORMATION",
    f"{_CATALOG}.checks:UPDATE_PENDING_SHIFTS",
    f"{_CATALOG}.checks:DELETE_PENDING_SHIFTS",
    f"{_CATALOG}.checks:GET_ALL_EMPLOYER_CHECKS",
    f"{_CATALOG}.checks:GET_EMPLOYER_CHECK_BY_ID",
    f"{_CATALOG}.checks:GET_EMPLOYER_CHECKS_BY_DATE",
    f"{_CATALOG}.checks:GET_PAYSTUB_LINK",
    f"{_CATALOG}.checks:DOWNLOAD_PAYSTUB_PDF",
    # payroll
    f"{_CATALOG}.payroll:GET_ALL_REPORTING_PERIODS",
    f"{_CATALOG}.payroll:GET_REPORTING_PERIOD_BY_DATE_RANGE",
    f"{_CATALOG}.payroll:GET_REPORTING_PERIOD_BY_ID",
    f"{_CATALOG}.payroll:GET_UPCOMING_REGULAR_PAYROLL",
    f"{_CATALOG}.payroll:SETUP_PAYROLL",
    f"{_CATALOG}.payroll:GET_NEXT_AVAILABLE_CHECK_PAY_DATE",
    f"{_CATALOG}.payroll:PREVIEW_CHECK_DATA",
    f"{_CATALOG}.payroll:PREVIEW_OVERTIME_CHECKS",
    f"{_CATALOG}.payroll:PREVIEW_PAYROLL_BY_CHECK_DATE",
    f"{_CATALOG}.payroll:PREVIEW_PAYROLL_BY_CHECK_IDS",
    # deductions
    f"{_CATALOG}.deductions:CREATE_DEDUCTION",
    f"{_CATALOG}.deductions:GET_DEDUCTION",
    f"{_CATALOG}.deductions:UPDATE_DEDUCTION",
    f"{_CATALOG}.deductions:DELETE_DEDUCTION",
    f"{_CATALOG}.deductions:CREATE_DEDUCTION_TEMPLATE",
    f"{_CATALOG}.deductions:GET_DEDUCTION_TEMPLATE",
    f"{_CATALOG}.deductions:GET_DEDUCTION_TEMPLATE_DEFINITIONS",
    f"{_CATALOG}.deductions:CREATE_EMPLOYEE_DEDUCTION_TEMPLATE",
    f"{_CATALOG}.deductions:GET_EMPLOYEE_DEDUCTION_TEMPLATE",
    f"{_CATALOG}.deductions:UPDATE_EMPLOYEE_DEDUCTION_TEMPLATE",
    f"{_CATALOG}.deductions:DELETE_EMPLOYEE_DEDUCTION_TEMPLATE",
    f"{_CATALOG}.deductions:LIST_EMPLOYEE_DEDUCTION_TEMPLATES",
    # accruals
    f"{_CATALOG}.accruals:GET_ACCRUAL_BALANCE",
    f"{_CATALOG}.accruals:GET_ACCRUAL_BALANCE_HISTORY",
    f"{_CATALOG}.accruals:UPDATE_ACCRUAL_BALANCE",
    f"{_CATALOG}.accruals:GET_ACCRUAL_POLICY",
    f"{_CATALOG}.accruals:CREATE_ACCRUAL_POLICY",
    f"{_CATALOG}.accruals:UPDATE_ACCRUAL_POLICY",
    f"{_CATALOG}.accruals:CREATE_ACCRUAL_POLICY_USAGE",
    f"{_CATALOG}.accruals:ADD_REMOVE_EMPLOYEES_ACCRUAL_POLICY",
    # banking
    f"{_CATALOG}.banking:CREATE_BANK_ACCOUNT",
    f"{_CATALOG}.banking:GET_BANK_ACCOUNT_BY_EMPLOYEE_CONTRACTOR_ID",
    f"{_CATALOG}.banking:GET_BANK_ACCOUNT_BY_ID",
    f"{_CATALOG}.banking:UPDATE_BANK_ACCOUNT",
    f"{_CATALOG}.banking:CREATE_CUSTOMER_ACCOUNT",
    f"{_CATALOG}.banking:GET_ALL_CUSTOMER_ACCOUNTS",
    f"{_CATALOG}.banking:GET_CUSTOMER_ACCOUNT",
    f"{_CATALOG}.banking:UPDATE_CUSTOMER_ACCOUNT",
    f"{_CATALOG}.banking:SET_CUSTOMER_ACCOUNT_ONBOARDED",
    f"{_CATALOG}.banking:CREATE_FUNDING_SOURCE",
    f"{_CATALOG}.banking:TRIGGER_MICRODEPOSITS",
    f"{_CATALOG}.banking:VERIFY_MICRODEPOSITS",
    f"{_CATALOG}.banking:GET_RESERVE_BALANCE",
    f"{_CATALOG}.banking:GENERATE_CUSTOMER_ACCOUNT_ONBOARDING_LINK",
    # payments
    f"{_CATALOG}.payments:GET_WALLET_BALANCE",
    f"{_CATALOG}.payments:GET_WALLET_TRANSACTIONS",
    f"{_CATALOG}.payments:TRANSFER_FUNDS",
    f"{_CATALOG}.payments:GET_PAYCARDS",
    f"{_CATALOG}.payments:GET_CARD",
    f"{_CATALOG}.payments:CREATE_DIRECT_PAYMENT",
    f"{_CATALOG}.payments:GET_DIRECT_PAYMENTS",
    # taxes
    f"{_CATALOG}.taxes:GENERATE_EMPLOYEE_TAX_PARAMETERS",
    f"{_CATALOG}.taxes:GET_EMPLOYEE_TAX_PARAMETER_SUMMARY",
    f"{_CATALOG}.taxes:SET_EMPLOYEE_TAX_PARAMETERS",
    f"{_CATALOG}.taxes:RESOLVE_TAXABLE_LOCATION",
    f"{_CATALOG}.taxes:GET_TAXABLE_LOCATION_BY_ID",
    f"{_CATALOG}.taxes:CREATE_WORK_LOCATION",
    f"{_CATALOG}.taxes:GET_WORK_LOCATIONS",
    f"{_CATALOG}.taxes:UPDATE_WORK_LOCATION",
    f"{_CATALOG}.taxes:GET_MINIMUM_WAGE_RULES",
    f"{_CATALOG}.taxes:GET_SICK_TIME_COMPLIANCE_RULES",
    # paperwork
    f"{_CATALOG}.paperwork:GET_PAPERWORK_TEMPLATES",
    f"{_CATALOG}.paperwork:GET_PAPERWORK_TEMPLATE_BY_ID",
    f"{_CATALOG}.paperwork:UPDATE_PAPERWORK_TEMPLATE",
    f"{_CATALOG}.paperwork:CREATE_PAPERWORK_SUBMISSION",
    f"{_CATALOG}.paperwork:GET_PAPERWORK_SUBMISSIONS",
    f"{_CATALOG}.paperwork:GET_SPECIFIC_PAPERWORK_SUBMISSION",
    f"{_CATALOG}.paperwork:GET_DOCUMENTS",
    f"{_CATALOG}.paperwork:CREATE_I9_LINK",
    f"{_CATALOG}.paperwork:GET_I9_STATUS",
    f"{_CATALOG}.paperwork:CREATE_W4_LINK",
    f"{_CATALOG}.paperwork:CREATE_CUSTOM_PAPERWORK_LINK",
    # links
    f"{_CATALOG}.links:CREATE_ACCOUNT_SETUP_LINK",
    f"{_CATALOG}.links:CREATE_AVAILABLE_PAY_ENROLLMENT_LINK",
    f"{_CATALOG}.links:CREATE_CONTRACTOR_ID_VERIFICATION_LINK",
    f"{_CATALOG}.links:CREATE_EMPLOYEE_ID_UPLOAD_LINK",
    f"{_CATALOG}.links:CREATE_ID_SCAN_LINK",
    f"{_CATALOG}.links:CREATE_INSTANT_PAY_CONTRACTOR_ENROLLMENT_LINK",
    f"{_CATALOG}.links:CREATE_INSTANT_PAY_ENROLLMENT_LINK",
    f"{_CATALOG}.links:CREATE_PAYCARD_ENROLLMENT_LINK",
    f"{_CATALOG}.links:GENERATE_CONTRACTOR_ONBOARDING_LINK",
    f"{_CATALOG}.links:GENERATE_EMPLOYEE_ONBOARDING_LINK",
    f"{_CATALOG}.links:GENERATE_DASHBOARD_LINK",
    f"{_CATALOG}.links:SEND_EMPLOYEE_ONBOARDING_LINK",
    # reports
    f"{_CATALOG}.reports:CREATE_CASH_REQUIREMENTS_REPORT",
    f"{_CATALOG}.reports:CREATE_CUSTOM_PAYROLL_JOURNAL_REPORT",
    f"{_CATALOG}.reports:CREATE_DEDUCTION_SUMMARY_REPORT",
    f"{_CATALOG}.reports:CREATE_KYC_SUMMARY_REPORT",
    f"{_CATALOG}.reports:CREATE_LABOR_ALLOCATION_REPORT",
    f"{_CATALOG}.reports:CREATE_PAYMENT_SUMMARY_REPORT",
    f"{_CATALOG}.reports:CREATE_PAYROLL_JOURNAL_REPORT",
    f"{_CATALOG}.reports:CREATE_QUARTER_TO_DATE_REPORT",
    f"{_CATALOG}.reports:CREATE_WORKER_SUMMARY_REPORT",
    f"{_CATALOG}.reports:CREATE_YTD_REPORT",
    f"{_CATALOG}.reports:GET_JOB_STATUS",
    f"{_CATALOG}.reports:GET_REPORT_DOWNLOAD",
]
