"""Employee endpoints: records, onboarding status, requirements, government ID and attributes."""

from zeal_tools.adapters.zeal.schemas import Endpoint, param

from .common import COMPANY_ID, EMPLOYEE_ID, OBJECT_LIST, WORK_LOCATION_ID

# Filters shared by the two employee listing endpoints
_EMPLOYEE_FILTERS = [
    param("onboarded", "boolean", "Filter by employee onboarded status."),
    param("employment_status", description="Filter by employment status, e.g. live or terminated."),
    param("title", description="Filter by employee title."),
    param("dob", description="Filter by date of birth (YYYY-MM-DD)."),
    param("start_date", description="Filter by start date (YYYY-MM-DD)."),
    param("email", description="Filter by employee email."),
    param("phone_number", description="Filter by employee phone number."),
    param("default_pay_schedule", description="Filter by default pay schedule."),
    param("is_943", "boolean", "Filter by agricultural (Form 943) status."),
    param("is_scheduleH", "boolean", "Filter by household (Schedule H) status."),
    param("external_id", description="Filter by the partner's external ID."),
    WORK_LOCATION_ID.as_optional().described("Filter by work location ID."),
]

CREATE_EMPLOYEE = Endpoint(
    name="create_employee",
    description="Create a new employee in the Zeal system.",
    method="POST",
    path="/employees",
    params=[
        EMPLOYEE_ID.described("The unique identifier for the employee."),
        COMPANY_ID,
        param("onboarded", "boolean", "Indicates if the employee is onboarded.", default=True),
        param(
            "employment_status",
            description="The employment status of the employee.",
            default="live",
        ),
        param("first_name", description="The first name of the employee.", required=True),
        param("last_name", description="The last name of the employee.", required=True),
        param("email", description="The email address of the employee."),
        param("dob", description="The date of birth of the employee."),
        param("start_date", description="The start date of the employee."),
        param("title", description="The job title of the employee."),
        param("working_state", description="The state where the employee works."),
        WORK_LOCATION_ID.as_optional(),
        param("address", description="The street address of the employee."),
        param("city", description="The city of the employee."),
        param("state", description="The state of the employee."),
        param("zip", description="The zip code of the employee."),
        param("phone_number", description="The phone number of the employee."),
        param("default_wage", "number", "The default hourly wage of the employee."),
        param("salary", "number", "The salary of the employee."),
    ],
)

GET_EMPLOYEES = Endpoint(
    name="get_employees",
    description="Get employees under a specific company.",
    method="GET",
    path="/employees",
    params=[COMPANY_ID.described("The company ID of the employer."), *_EMPLOYEE_FILTERS],
)

GET_EMPLOYEE_INFORMATION = Endpoint(
    name="get_employee_information",
    description="Get information for all employees under a company.",
    method="GET",
    path="/employees",
    params=[COMPANY_ID, *_EMPLOYEE_FILTERS],
)

UPDATE_EMPLOYEE_INFO = Endpoint(
    name="update_employee_info",
    description="Update a specific employee record in the Zeal API.",
    method="PATCH",
    path="/employees",
    params=[
        EMPLOYEE_ID,
        COMPANY_ID,
        param("onboarded", "boolean", "Whether the employee is onboarded."),
        param("employment_status", description="The employment status of the employee."),
        param("first_name", description="The first name of the employee."),
        param("last_name", description="The last name of the employee."),
        param("email", description="The email address of the employee."),
        param("dob", description="The date of birth of the employee."),
        param("start_date", description="The start date of the employee."),
        param("title", description="The job title of the employee."),
        param("working_state", description="The state where the employee works."),
        WORK_LOCATION_ID.as_optional(),
        param("address", description="The street address of the employee."),
        param("city", description="The city of the employee."),
        param("state", description="The state of the employee."),
        param("zip", description="The zip code of the employee."),
        param("phone_number", description="The phone number of the employee."),
        param("default_pay_schedule", description="The default pay schedule."),
        param("default_wage", "number", "The default hourly wage."),
        param("default_ot_wage", "number", "The default overtime wage."),
        param("default_dt_wage", "number", "The default double-time wage."),
        param("ssn", description="The social security number of the employee."),
        param("is_943", "boolean", "Whether the employee is an agricultural (Form 943) worker."),
        param("is_scheduleH", "boolean", "Whether the employee is a household (Schedule H) worker."),
        param("is_salary", "boolean", "Whether the employee is salaried."),
        param("salary", "number", "The salary of the employee."),
        param("external_id", description="The partner's external ID for the employee."),
    ],
    action="updating employee information",
)

SET_ONBOARDED_STATUS = Endpoint(
    name="set_onboarded_status",
    description="Set an employee as onboarded.",
    method="POST",
    path="/employees/setOnboardedStatusToTrue",
    params=[EMPLOYEE_ID, COMPANY_ID],
    action="setting the employee onboarded status",
)

GET_EMPLOYEE_REQUIREMENTS = Endpoint(
    name="get_employee_requirements",
    description="Get additional tax requirements for an employee.",
    method="GET",
    path="/employeeRequirements",
    params=[COMPANY_ID, EMPLOYEE_ID],
)

UPLOAD_EMPLOYEE_GOVERNMENT_ID = Endpoint(
    name="upload_employee_government_id",
    description="Upload an employee's government ID to Zeal.",
    method="POST",
    path="/employees/id",
    params=[
        EMPLOYEE_ID,
        COMPANY_ID,
        param("id_type", description="The type of ID being uploaded, e.g. passport.", required=True),
        param("id_base64", description="The base64 encoded image of the ID.", required=True),
    ],
)

GET_ATTRIBUTES = Endpoint(
    name="get_attributes",
    description="Get custom attributes for a company, employee or contractor.",
    method="GET",
    path="/attributes",
    params=[
        COMPANY_ID,
        EMPLOYEE_ID.as_optional(),
        param("contractorID", description="The ID of the contractor."),
    ],
)

SET_ATTRIBUTE_VALUE = Endpoint(
    name="set_attribute_value",
    description="Set custom attribute values for an employee or contractor.",
    method="PATCH",
    path="/attributes",
    params=[
        COMPANY_ID,
        param(
            "attributes",
            "array",
            "Attribute key/value pairs to set.",
            required=True,
            items=OBJECT_LIST,
        ),
        EMPLOYEE_ID,
        param("contractorID", description="The ID of the contractor."),
    ],
    action="setting attribute values",
)
