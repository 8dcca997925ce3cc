"""Accrual endpoints: paid time off policies, balances and usage."""

from zeal_tools.adapters.zeal.schemas import Endpoint, param

from .common import COMPANY_ID, EMPLOYEE_ID, OBJECT_LIST, STRING_LIST

POLICY_CODE = param("policy_code", description="The code of the accrual policy.")
POLICY_STATUS = param(
    "policy_status", description="The policy status, e.g. active or inactive."
)

_POLICY_FIELDS = [
    POLICY_CODE,
    param("policy_type", description="The policy type, e.g. pto or sick."),
    param("policy_name", description="Display name of the policy."),
    param("policy_effective_date", description="The date the policy takes effect (YYYY-MM-DD)."),
    param("accrual_rate_hours", "integer", "Hours accrued per accrual period."),
    param("accrual_period_hours", "integer", "Hours worked per accrual period."),
    param("immediate_balance", "integer", "Hours granted when an employee joins the policy."),
    param("include_doubletime", "boolean", "Whether double-time hours accrue."),
    param("include_overtime", "boolean", "Whether overtime hours accrue."),
    param("accrual_waiting_period", "integer", "Days before a new employee starts accruing."),
    param("accrual_cap", "integer", "Maximum balance in hours."),
    param("rollover_cap", "integer", "Maximum hours carried over at rollover."),
    param("rollover_date", description="The yearly rollover date (MM-DD)."),
]

# Applied on create only; an update leaves omitted fields unchanged
_POLICY_DEFAULTS = {
    "policy_type": "pto",
    "accrual_rate_hours": 10,
    "accrual_period_hours": 40,
    "immediate_balance": 0,
    "include_doubletime": True,
    "include_overtime": True,
    "accrual_waiting_period": 0,
    "accrual_cap": 40,
    "rollover_cap": 40,
    "rollover_date": "01-01",
}

GET_ACCRUAL_BALANCE = Endpoint(
    name="get_accrual_balance",
    description="Get an employee's accrual balances.",
    method="GET",
    path="/accrualBalance",
    params=[COMPANY_ID, POLICY_CODE, EMPLOYEE_ID, POLICY_STATUS],
)

GET_ACCRUAL_BALANCE_HISTORY = Endpoint(
    name="get_accrual_balance_history",
    description="Get the accrual balance history of employees up to a date.",
    method="POST",
    path="/accrualBalance/history",
    params=[
        COMPANY_ID,
        param("policyCode", description="The code of the accrual policy."),
        param(
            "employeeIDs", "array", "IDs of the employees.", required=True, items=STRING_LIST
        ),
        param("endDate", description="Last date of the history (YYYY-MM-DD).", required=True),
    ],
)

UPDATE_ACCRUAL_BALANCE = Endpoint(
    name="update_accrual_balance",
    description="Update the accrual balances of employees on a policy.",
    method="PATCH",
    path="/accrualBalance",
    params=[
        COMPANY_ID,
        param(
            "employees",
            "array",
            "Balance updates, each with employeeID and balance.",
            required=True,
            items=OBJECT_LIST,
        ),
        POLICY_CODE.as_required(),
    ],
)

GET_ACCRUAL_POLICY = Endpoint(
    name="get_accrual_policy",
    description="Get the accrual policies of a company.",
    method="GET",
    path="/accrualPolicy",
    params=[COMPANY_ID, POLICY_CODE, POLICY_STATUS],
)

CREATE_ACCRUAL_POLICY = Endpoint(
    name="create_accrual_policy",
    description="Create an accrual policy for a company.",
    method="POST",
    path="/accrualPolicy",
    params=[
        COMPANY_ID,
        *(
            p.defaulting(_POLICY_DEFAULTS[p.name]) if p.name in _POLICY_DEFAULTS else p
            for p in _POLICY_FIELDS
        ),
    ],
)

UPDATE_ACCRUAL_POLICY = Endpoint(
    name="update_accrual_policy",
    description="Update an accrual policy.",
    method="PATCH",
    path="/accrualPolicy",
    params=[COMPANY_ID, *_POLICY_FIELDS, POLICY_STATUS],
)

CREATE_ACCRUAL_POLICY_USAGE = Endpoint(
    name="create_accrual_policy_usage",
    description="Record hours used against an accrual policy.",
    method="POST",
    path="/accrualPolicy/{policyCode}/usage",
    params=[
        param("policyCode", description="The code of the accrual policy.", required=True),
        COMPANY_ID,
        param(
            "employees",
            "array",
            "Usage entries, each with employeeID and hours used.",
            required=True,
            items=OBJECT_LIST,
        ),
    ],
)

ADD_REMOVE_EMPLOYEES_ACCRUAL_POLICY = Endpoint(
    name="add_remove_employees_accrual_policy",
    description="Add employees to or remove employees from an accrual policy.",
    method="POST",
    path="/accrualPolicyEmployees",
    params=[
        COMPANY_ID,
        param(
            "add_employees",
            "array",
            "IDs of employees to add.",
            required=True,
            items=STRING_LIST,
        ),
        POLICY_CODE.as_required(),
        param(
            "remove_employees",
            "array",
            "IDs of employees to remove.",
            items=STRING_LIST,
            default=[],
        ),
    ],
    action="updating accrual policy employees",
)
