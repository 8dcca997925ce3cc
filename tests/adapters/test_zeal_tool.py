"""Tests for Zeal endpoint tools and request building."""

import json

import httpx
import pytest

from zeal_tools.adapters.zeal.schemas import Endpoint, param
from zeal_tools.adapters.zeal.tool import ZealEndpointTool
from zeal_tools.adapters.zeal.tools.accruals import CREATE_ACCRUAL_POLICY, UPDATE_ACCRUAL_POLICY
from zeal_tools.adapters.zeal.tools.banking import GET_CUSTOMER_ACCOUNT, GET_RESERVE_BALANCE
from zeal_tools.adapters.zeal.tools.contractors import DELETE_CONTRACTOR_PAYMENT
from zeal_tools.adapters.zeal.tools.employees import (
    CREATE_EMPLOYEE,
    GET_EMPLOYEES,
    UPDATE_EMPLOYEE_INFO,
)

THING = Endpoint(
    name="create_thing",
    description="Create a thing.",
    method="POST",
    path="/things/{thingID}",
    params=[
        param("thingID", required=True),
        param("label", required=True),
        param("count", "integer"),
    ],
)


@pytest.fixture
def mock_ctx():
    """Mock execution context."""
    return {"request_id": "test-request"}


class TestBuildRequest:
    """Tests for Endpoint.build_request."""

    def test_get_puts_arguments_in_query(self):
        request = GET_EMPLOYEES.build_request({"companyID": "co_1", "onboarded": True})

        assert request.method == "GET"
        assert request.path == "/employees"
        assert request.params == {"companyID": "co_1", "onboarded": True}
        assert request.body is None

    def test_none_and_unknown_arguments_are_dropped(self):
        request = GET_EMPLOYEES.build_request({"companyID": "co_1", "title": None, "bogus": 1})

        assert request.params == {"companyID": "co_1"}

    def test_path_parameters_are_substituted_and_excluded(self):
        request = THING.build_request({"thingID": "t/1", "label": "x"})

        assert request.path == "/things/t%2F1"
        assert request.body == {"label": "x"}
        assert request.params == {}

    def test_path_parameter_on_get_with_remaining_query(self):
        request = GET_CUSTOMER_ACCOUNT.build_request({"customerAccountID": "ca_1", "companyID": "co_1"})

        assert request.path == "/customer-accounts/ca_1"
        assert request.params == {"companyID": "co_1"}

    def test_patch_puts_arguments_in_body(self):
        request = UPDATE_EMPLOYEE_INFO.build_request(
            {"companyID": "co_1", "employeeID": "e_1", "first_name": "Ada"}
        )

        assert request.params == {}
        assert request.body == {"companyID": "co_1", "employeeID": "e_1", "first_name": "Ada"}

    def test_delete_with_query_parameters(self):
        request = DELETE_CONTRACTOR_PAYMENT.build_request(
            {"companyID": "co_1", "contractorPaymentID": "cp_1"}
        )

        assert request.method == "DELETE"
        assert request.params == {"companyID": "co_1", "contractorPaymentID": "cp_1"}
        assert request.body is None

    def test_body_endpoint_without_arguments_sends_empty_object(self):
        endpoint = Endpoint(
            name="create_widget",
            description="",
            method="POST",
            path="/widgets",
            params=[param("color")],
        )

        assert endpoint.build_request({}).body == {}

    def test_defaults_fill_absent_arguments(self):
        request = GET_RESERVE_BALANCE.build_request({"companyID": "co_1", "limit": None})

        assert request.params == {"companyID": "co_1", "limit": 25}

    def test_explicit_argument_overrides_default(self):
        request = CREATE_EMPLOYEE.build_request(
            {"employeeID": "e_1", "companyID": "co_1", "onboarded": False}
        )

        assert request.body["onboarded"] is False
        assert request.body["employment_status"] == "live"

    def test_policy_defaults_apply_to_create_only(self):
        created = CREATE_ACCRUAL_POLICY.build_request({"companyID": "co_1"}).body
        updated = UPDATE_ACCRUAL_POLICY.build_request({"companyID": "co_1"}).body

        assert created["include_overtime"] is True
        assert created["include_doubletime"] is True
        assert created["accrual_cap"] == 40
        assert created["rollover_date"] == "01-01"
        assert updated == {"companyID": "co_1"}


class TestEndpointDescription:
    """Tests for Endpoint validation and schema."""

    def test_parameter_schema(self):
        schema = THING.parameter_schema()

        assert schema["type"] == "object"
        assert schema["required"] == ["thingID", "label"]
        assert schema["properties"]["count"] == {"type": "integer", "description": ""}

    def test_default_is_advertised(self):
        properties = CREATE_EMPLOYEE.parameter_schema()["properties"]

        assert properties["onboarded"]["default"] is True
        assert properties["employment_status"]["default"] == "live"
        assert "default" not in properties["first_name"]

    def test_path_placeholder_needs_parameter(self):
        with pytest.raises(ValueError):
            Endpoint(name="bad", description="", method="GET", path="/x/{missing}")

    def test_duplicate_parameters_rejected(self):
        with pytest.raises(ValueError):
            Endpoint(
                name="bad",
                description="",
                method="GET",
                path="/x",
                params=[param("a"), param("a")],
            )

    def test_error_action_from_name(self):
        assert GET_EMPLOYEES.error_action == "retrieving employees"
        assert THING.error_action == "creating thing"


class TestZealEndpointTool:
    """Tests for ZealEndpointTool.execute."""

    def test_descriptor_and_metadata(self, mock_zeal):
        tool = ZealEndpointTool(GET_EMPLOYEES, mock_zeal.client)

        assert tool.descriptor.name == "get_employees"
        assert tool.descriptor.parameters == GET_EMPLOYEES.parameter_schema()
        assert tool.metadata.capabilities == ["zeal.read"]
        assert tool.metadata.idempotent is True

    @pytest.mark.asyncio
    async def test_success_returns_upstream_data(self, mock_zeal, mock_ctx):
        mock_zeal.respond(httpx.Response(200, json=[{"employeeID": "e_1"}]))
        tool = ZealEndpointTool(GET_EMPLOYEES, mock_zeal.client)

        result = await tool.execute({"companyID": "co_1"}, mock_ctx)

        assert result == [{"employeeID": "e_1"}]
        assert mock_zeal.calls[0].url.params["companyID"] == "co_1"

    @pytest.mark.asyncio
    async def test_upstream_error_becomes_error_value(self, mock_zeal, mock_ctx):
        mock_zeal.respond(httpx.Response(422, json={"message": "invalid companyID"}))
        tool = ZealEndpointTool(GET_EMPLOYEES, mock_zeal.client)

        result = await tool.execute({"companyID": "nope"}, mock_ctx)

        assert result == {
            "error": 'An error occurred while retrieving employees: {"message":"invalid companyID"}'
        }

    @pytest.mark.asyncio
    async def test_missing_required_argument(self, mock_zeal, mock_ctx):
        tool = ZealEndpointTool(GET_EMPLOYEES, mock_zeal.client)

        result = await tool.execute({}, mock_ctx)

        assert result["error"].startswith("An error occurred while retrieving employees")
        assert "'companyID' is a required property" in result["error"]
        assert mock_zeal.calls == []

    @pytest.mark.asyncio
    async def test_wrong_argument_type(self, mock_zeal, mock_ctx):
        tool = ZealEndpointTool(THING, mock_zeal.client)

        result = await tool.execute({"thingID": "t_1", "label": "x", "count": "many"}, mock_ctx)

        assert "count" in result["error"]
        assert mock_zeal.calls == []

    @pytest.mark.asyncio
    async def test_non_object_arguments(self, mock_zeal, mock_ctx):
        tool = ZealEndpointTool(GET_EMPLOYEES, mock_zeal.client)

        result = await tool.execute(["co_1"], mock_ctx)

        assert "arguments must be an object" in result["error"]

    @pytest.mark.asyncio
    async def test_dry_run_mode(self, mock_zeal):
        """Test dry-run mode describes the call without making it."""
        tool = ZealEndpointTool(THING, mock_zeal.client)

        result = await tool.execute({"thingID": "t_1", "label": "x"}, {"dry_run": True})

        assert result["status"] == "dry_run"
        assert result["would_execute"] == {
            "method": "POST",
            "url": "https://api.zeal.com/things/t_1",
            "params": {},
            "json": {"label": "x"},
        }
        assert mock_zeal.calls == []

    @pytest.mark.asyncio
    async def test_dry_run_shows_defaults_in_body(self, mock_zeal):
        tool = ZealEndpointTool(CREATE_EMPLOYEE, mock_zeal.client)

        result = await tool.execute(
            {
                "employeeID": "e_1",
                "companyID": "co_1",
                "first_name": "Ada",
                "last_name": "Lovelace",
            },
            {"dry_run": True},
        )

        body = result["would_execute"]["json"]
        assert body["onboarded"] is True
        assert body["employment_status"] == "live"
        assert body["first_name"] == "Ada"
        assert mock_zeal.calls == []

    @pytest.mark.asyncio
    async def test_sends_body_for_write_endpoints(self, mock_zeal, mock_ctx):
        tool = ZealEndpointTool(THING, mock_zeal.client)

        await tool.execute({"thingID": "t_1", "label": "x", "count": 2}, mock_ctx)

        sent = mock_zeal.calls[0]
        assert sent.method == "POST"
        assert sent.url.path == "/things/t_1"
        assert json.loads(sent.content) == {"label": "x", "count": 2}
