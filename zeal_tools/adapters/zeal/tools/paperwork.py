"""Paperwork endpoints: templates, submissions, documents and tax form links."""

from zeal_tools.adapters.zeal.schemas import Endpoint, param

from .common import (
    COMPANY_ID,
    CONTRACTOR_ID,
    EMPLOYEE_ID,
    JURISDICTIONS,
    SEND_TO_WORKER,
    STRING_LIST,
)

TEMPLATE_ID = param("templateID", description="The ID of the paperwork template.", required=True)
WORKER_TYPE = param("worker_type", description="The worker type: employee or contractor.")

GET_PAPERWORK_TEMPLATES = Endpoint(
    name="get_paperwork_templates",
    description="Search the paperwork templates available to a company.",
    method="POST",
    path="/paperwork/templates",
    params=[
        COMPANY_ID,
        WORKER_TYPE.as_required(),
        param("paperwork_type", description="The paperwork type, e.g. tax.", required=True),
        JURISDICTIONS,
        param("jurisdiction_type", description="The jurisdiction type, e.g. state.", required=True),
        param(
            "effective_date",
            description="The date templates must be valid on (YYYY-MM-DD).",
            required=True,
        ),
    ],
)

GET_PAPERWORK_TEMPLATE_BY_ID = Endpoint(
    name="get_paperwork_template_by_id",
    description="Get a paperwork template by its ID.",
    method="GET",
    path="/paperwork/templates/{templateID}",
    params=[TEMPLATE_ID],
    action="retrieving the paperwork template",
)

UPDATE_PAPERWORK_TEMPLATE = Endpoint(
    name="update_paperwork_template",
    description="Update a custom paperwork template.",
    method="PATCH",
    path="/paperwork/templates/{templateID}",
    params=[
        TEMPLATE_ID,
        param("form_name", description="Display name of the form."),
        param("description", description="Description of the form."),
        param("paperwork_type", description="The paperwork type."),
        WORKER_TYPE,
        param("jurisdictions_filter", description="Jurisdictions the template applies to."),
        param("jurisdiction_type", description="The jurisdiction type."),
        param("effective_date", description="The date the template takes effect (YYYY-MM-DD)."),
        param("archive_date", description="The date the template is archived (YYYY-MM-DD)."),
        param("status", description="The template status."),
    ],
    param_location="query",
)

CREATE_PAPERWORK_SUBMISSION = Endpoint(
    name="create_paperwork_submission",
    description="Submit completed paperwork for a worker.",
    method="PUT",
    path="/paperwork/submissions",
    params=[
        TEMPLATE_ID,
        WORKER_TYPE.as_required(),
        COMPANY_ID,
        param("fields", "object", "Form field values keyed by field name.", required=True),
        EMPLOYEE_ID,
        CONTRACTOR_ID.as_optional(),
    ],
)

GET_PAPERWORK_SUBMISSIONS = Endpoint(
    name="get_paperwork_submissions",
    description="Search paperwork submissions of employees.",
    method="POST",
    path="/paperwork/submissions",
    params=[
        COMPANY_ID,
        JURISDICTIONS,
        param(
            "employeeIDs", "array", "IDs of the employees.", required=True, items=STRING_LIST
        ),
    ],
)

GET_SPECIFIC_PAPERWORK_SUBMISSION = Endpoint(
    name="get_specific_paperwork_submission",
    description="Get a paperwork submission by its ID.",
    method="GET",
    path="/paperwork/submissions/{submissionID}",
    params=[param("submissionID", description="The ID of the submission.", required=True)],
    action="retrieving the paperwork submission",
)

GET_DOCUMENTS = Endpoint(
    name="get_documents",
    description="Get the documents of a company or of one of its workers.",
    method="GET",
    path="/documents",
    params=[
        COMPANY_ID,
        param("id", description="The ID of an employee or contractor."),
    ],
)

CREATE_I9_LINK = Endpoint(
    name="create_i9_link",
    description="Create a link for an employee to complete Form I-9.",
    method="POST",
    path="/employees/i9",
    params=[COMPANY_ID, EMPLOYEE_ID],
    action="creating the I-9 link",
)

GET_I9_STATUS = Endpoint(
    name="get_i9_status",
    description="Get the Form I-9 status of an employee.",
    method="GET",
    path="/employees/getI9Status",
    params=[COMPANY_ID, EMPLOYEE_ID],
    action="retrieving the I-9 status",
)

CREATE_W4_LINK = Endpoint(
    name="create_w4_link",
    description="Create a link for an employee to complete Form W-4.",
    method="POST",
    path="/employees/w4",
    params=[
        COMPANY_ID,
        EMPLOYEE_ID,
        param("jurisdiction", description="Jurisdiction of the form, e.g. US or CA."),
        SEND_TO_WORKER,
    ],
    action="creating the W-4 link",
)

CREATE_CUSTOM_PAPERWORK_LINK = Endpoint(
    name="create_custom_paperwork_link",
    description="Create a link for an employee to complete custom paperwork.",
    method="POST",
    path="/employees/custom_paperwork",
    params=[
        COMPANY_ID,
        EMPLOYEE_ID,
        param(
            "formTemplateIDs",
            "array",
            "IDs of the paperwork templates to complete.",
            required=True,
            items=STRING_LIST,
        ),
        SEND_TO_WORKER,
    ],
)
