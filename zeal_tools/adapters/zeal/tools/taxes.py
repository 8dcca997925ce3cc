"""Tax and location endpoints: tax parameters, taxable and work locations, labor rules."""

from zeal_tools.adapters.zeal.schemas import Endpoint, param

from .common import COMPANY_ID, EMPLOYEE_ID, JURISDICTIONS, OBJECT_LIST, WORK_LOCATION_ID

TAXABLE_LOCATION_ID = param(
    "taxableLocationID", description="The ID of the taxable location.", required=True
)
WORK_SITE_ID = param("work_site_id", description="The partner's ID for the work site.")

GENERATE_EMPLOYEE_TAX_PARAMETERS = Endpoint(
    name="generate_employee_tax_parameters",
    description="Get the tax parameter definitions for a set of jurisdictions.",
    method="POST",
    path="/employees/getTaxParameterDefinitions",
    params=[JURISDICTIONS],
    action="generating employee tax parameter definitions",
)

GET_EMPLOYEE_TAX_PARAMETER_SUMMARY = Endpoint(
    name="get_employee_tax_parameter_summary",
    description="Get a summary of an employee's tax parameters.",
    method="POST",
    path="/employees/getTaxParameterSummary",
    params=[
        EMPLOYEE_ID,
        COMPANY_ID,
        JURISDICTIONS.as_optional(),
        param("effectiveDate", description="The date the parameters apply to (YYYY-MM-DD)."),
    ],
)

SET_EMPLOYEE_TAX_PARAMETERS = Endpoint(
    name="set_employee_tax_parameters",
    description="Set an employee's federal and state tax parameters.",
    method="POST",
    path="/employees/setTaxParameters",
    params=[
        EMPLOYEE_ID,
        COMPANY_ID,
        param(
            "federalParameters",
            "array",
            "Federal parameters, each with code and value.",
            required=True,
            items=OBJECT_LIST,
        ),
        param(
            "stateParameters",
            "array",
            "State parameters, each with code and value.",
            required=True,
            items=OBJECT_LIST,
        ),
    ],
)

RESOLVE_TAXABLE_LOCATION = Endpoint(
    name="resolve_taxable_location",
    description="Resolve an address to a taxable location.",
    method="POST",
    path="/taxableLocations",
    params=[
        param("street1", description="First line of the street address.", required=True),
        param("street2", description="Second line of the street address."),
        param("city", description="City.", required=True),
        param("state", description="State (two letter code).", required=True),
        param("zip", description="Zip code.", required=True),
    ],
)

GET_TAXABLE_LOCATION_BY_ID = Endpoint(
    name="get_taxable_location_by_id",
    description="Get a taxable location by its ID.",
    method="GET",
    path="/taxableLocations",
    params=[TAXABLE_LOCATION_ID],
    action="retrieving the taxable location",
)

CREATE_WORK_LOCATION = Endpoint(
    name="create_work_location",
    description="Create a work location for a company.",
    method="POST",
    path="/workLocations",
    params=[
        COMPANY_ID,
        TAXABLE_LOCATION_ID,
        param("name", description="Display name of the work location.", required=True),
        param("zip", description="Zip code of the work location.", required=True),
        WORK_SITE_ID.as_required(),
    ],
)

GET_WORK_LOCATIONS = Endpoint(
    name="get_work_locations",
    description="Get the work locations of a company.",
    method="GET",
    path="/workLocations",
    params=[
        COMPANY_ID,
        WORK_LOCATION_ID.as_optional(),
        TAXABLE_LOCATION_ID.as_optional(),
        param("state", description="Filter by state."),
        WORK_SITE_ID,
    ],
)

UPDATE_WORK_LOCATION = Endpoint(
    name="update_work_location",
    description="Update a work location.",
    method="PATCH",
    path="/workLocations",
    params=[
        COMPANY_ID,
        WORK_LOCATION_ID,
        param("name", description="Display name of the work location.", required=True),
        WORK_SITE_ID.as_required(),
    ],
)

GET_MINIMUM_WAGE_RULES = Endpoint(
    name="get_minimum_wage_rules",
    description="Get the minimum wage rules that apply at a work location.",
    method="GET",
    path="/minimumWageRules",
    params=[
        WORK_LOCATION_ID,
        COMPANY_ID,
        param("effectiveDate", description="The date the rules apply to (YYYY-MM-DD)."),
    ],
)

GET_SICK_TIME_COMPLIANCE_RULES = Endpoint(
    name="get_sick_time_compliance_rules",
    description="Get the sick time compliance rules of a state or city.",
    method="GET",
    path="/sickTimeCompliance",
    params=[
        param("state", description="State (two letter code).", required=True),
        param("city", description="City."),
    ],
)
