"""Deduction endpoints: check deductions, company templates and employee templates."""

from zeal_tools.adapters.zeal.schemas import Endpoint, param

from .common import COMPANY_ID, EMPLOYEE_CHECK_ID, EMPLOYEE_ID, LIMIT, START_AT

DEDUCTION_ID = param("deductionID", description="The ID of the deduction.", required=True)
DEDUCTION_TEMPLATE_ID = param(
    "deductionTemplateID", description="The ID of the deduction template.", required=True
)
CONTRIBUTION_PROPERTIES = {
    "type": {"type": "string", "description": "amount or percentage"},
    "value": {"type": "number"},
}

# Fields of an employee deduction template, shared by create, update and list
_TEMPLATE_FIELDS = [
    param("custom_name", description="Display name of the deduction."),
    param("deduction_type", description="The deduction type, e.g. 401k or garnishment."),
    param("effective_start_date", description="The date the deduction starts (YYYY-MM-DD)."),
    param("effective_end_date", description="The date the deduction ends (YYYY-MM-DD)."),
    param("agency_name", description="Garnishment agency name."),
    param("agency_address", description="Garnishment agency address."),
    param("case_id", description="Garnishment case ID."),
    param("order_number", description="Garnishment order number."),
    param("employee_contribution_amount", "number", "Flat employee contribution per check."),
    param("employee_contribution_percentage", "number", "Employee contribution as a percentage."),
    param("employer_contribution_amount", "number", "Flat employer contribution per check."),
    param("employer_contribution_percentage", "number", "Employer contribution as a percentage."),
    param("external_id", description="The partner's external ID for the template."),
    param("hsa_type", description="HSA coverage type, e.g. self or family."),
]
_REQUIRED_ON_CREATE = {"custom_name", "deduction_type", "effective_start_date"}

CREATE_DEDUCTION = Endpoint(
    name="create_deduction",
    description="Create a deduction on an employee check.",
    method="POST",
    path="/deductions",
    params=[
        COMPANY_ID,
        EMPLOYEE_CHECK_ID,
        param("employeeContribution", "number", "The employee contribution.", required=True),
        param("employerContribution", "number", "The employer contribution.", required=True),
    ],
)

GET_DEDUCTION = Endpoint(
    name="get_deduction",
    description="Get a deduction on an employee check.",
    method="GET",
    path="/deductions",
    params=[DEDUCTION_ID, COMPANY_ID, EMPLOYEE_CHECK_ID],
)

UPDATE_DEDUCTION = Endpoint(
    name="update_deduction",
    description="Update a deduction on a pending employee check.",
    method="PATCH",
    path="/deductions",
    params=[
        COMPANY_ID,
        EMPLOYEE_CHECK_ID,
        DEDUCTION_ID,
        param("deduction", "object", "The updated deduction fields.", required=True),
    ],
)

DELETE_DEDUCTION = Endpoint(
    name="delete_deduction",
    description="Delete a deduction from a pending employee check.",
    method="DELETE",
    path="/deductions",
    params=[COMPANY_ID, EMPLOYEE_CHECK_ID, DEDUCTION_ID],
)

CREATE_DEDUCTION_TEMPLATE = Endpoint(
    name="create_deduction_template",
    description="Create a company-level deduction template.",
    method="POST",
    path="/deductionTemplate",
    params=[
        COMPANY_ID,
        param("deduction_type", description="The deduction type, e.g. 401k."),
        param("custom_name", description="Display name of the deduction."),
        param(
            "employee_contribution",
            "object",
            "Default employee contribution.",
            required=True,
            properties=CONTRIBUTION_PROPERTIES,
        ),
        param(
            "employer_contribution",
            "object",
            "Default employer contribution.",
            required=True,
            properties=CONTRIBUTION_PROPERTIES,
        ),
    ],
)

GET_DEDUCTION_TEMPLATE = Endpoint(
    name="get_deduction_template",
    description="Get the deduction templates of a company.",
    method="GET",
    path="/deductionTemplate",
    params=[
        COMPANY_ID,
        DEDUCTION_TEMPLATE_ID.as_optional().described("Return only this template."),
    ],
)

GET_DEDUCTION_TEMPLATE_DEFINITIONS = Endpoint(
    name="get_deduction_template_definitions",
    description="Get the definition of a deduction type.",
    method="GET",
    path="/deductionTemplateDefinitions",
    params=[param("deduction_type", description="The deduction type.", required=True)],
)

CREATE_EMPLOYEE_DEDUCTION_TEMPLATE = Endpoint(
    name="create_employee_deduction_template",
    description="Create a deduction template for a single employee.",
    method="POST",
    path="/employee-deduction-templates",
    params=[
        COMPANY_ID,
        EMPLOYEE_ID,
        *(p.as_required() if p.name in _REQUIRED_ON_CREATE else p for p in _TEMPLATE_FIELDS),
    ],
)

GET_EMPLOYEE_DEDUCTION_TEMPLATE = Endpoint(
    name="get_employee_deduction_template",
    description="Get an employee deduction template by its ID.",
    method="GET",
    path="/employee-deduction-templates/{deductionTemplateID}",
    params=[DEDUCTION_TEMPLATE_ID],
)

UPDATE_EMPLOYEE_DEDUCTION_TEMPLATE = Endpoint(
    name="update_employee_deduction_template",
    description="Update an employee deduction template.",
    method="PATCH",
    path="/employee-deduction-templates/{deductionTemplateID}",
    params=[
        DEDUCTION_TEMPLATE_ID,
        *(p for p in _TEMPLATE_FIELDS if p.name != "deduction_type"),
    ],
)

DELETE_EMPLOYEE_DEDUCTION_TEMPLATE = Endpoint(
    name="delete_employee_deduction_template",
    description="Delete an employee deduction template.",
    method="DELETE",
    path="/employee-deduction-templates/{deductionTemplateID}",
    params=[DEDUCTION_TEMPLATE_ID],
)

LIST_EMPLOYEE_DEDUCTION_TEMPLATES = Endpoint(
    name="list_employee_deduction_templates",
    description="List the deduction templates of an employee.",
    method="GET",
    path="/employee-deduction-templates",
    params=[COMPANY_ID, EMPLOYEE_ID, LIMIT, START_AT, *_TEMPLATE_FIELDS],
)
