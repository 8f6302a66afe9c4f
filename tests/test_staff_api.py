"""
Tests for staff endpoints.
"""

from datetime import datetime, timedelta

import pytest
from fastapi import status
from pydantic import TypeAdapter

parse_datetime = TypeAdapter(datetime).validate_python


async def create_department(async_client, name="Computer Science"):
    response = await async_client.post(
        "/api/departments",
        json={"departmentName": name, "description": f"{name} Department"},
    )
    assert response.status_code == status.HTTP_201_CREATED
    return response.json()


async def create_staff(async_client, name, department_id, salary):
    response = await async_client.post(
        "/api/staff",
        json={"staffName": name, "departmentId": department_id, "salary": salary},
    )
    assert response.status_code == status.HTTP_201_CREATED
    return response.json()


@pytest.mark.asyncio
async def test_create_get_delete_staff(async_client):
    """Create a staff member, delete it, and confirm it is gone."""
    department = await create_department(async_client)
    assert department["departmentId"] == 1

    response = await async_client.post(
        "/api/staff",
        json={"staffName": "Ann", "departmentId": 1, "salary": 45000.00},
    )
    assert response.status_code == status.HTTP_201_CREATED

    data = response.json()
    assert isinstance(data["staffId"], int)
    assert data["staffName"] == "Ann"
    assert data["departmentId"] == 1
    assert data["salary"] == 45000.00
    assert data["department"]["departmentName"] == "Computer Science"
    assert data["createdAt"]
    assert data["updatedAt"]

    response = await async_client.get(f"/api/staff/{data['staffId']}")
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["staffName"] == "Ann"

    response = await async_client.delete(f"/api/staff/{data['staffId']}")
    assert response.status_code == status.HTTP_204_NO_CONTENT

    response = await async_client.get(f"/api/staff/{data['staffId']}")
    assert response.status_code == status.HTTP_404_NOT_FOUND
    body = response.json()
    assert body["status"] == 404
    assert body["error"] == "Resource Not Found"
    assert body["path"] == f"/api/staff/{data['staffId']}"


@pytest.mark.asyncio
async def test_create_staff_unknown_department(async_client):
    response = await async_client.post(
        "/api/staff",
        json={"staffName": "Ann", "departmentId": 7, "salary": 1000},
    )
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["error"] == "Invalid Input"

    response = await async_client.get("/api/staff")
    assert response.json() == []


@pytest.mark.asyncio
async def test_create_staff_validation_errors(async_client):
    response = await async_client.post(
        "/api/staff",
        json={"staffName": "   ", "departmentId": "abc", "salary": -5},
    )
    assert response.status_code == status.HTTP_400_BAD_REQUEST

    body = response.json()
    assert body["error"] == "Validation Failed"
    assert body["path"] == "/api/staff"
    assert set(body["message"]) == {"staffName", "departmentId", "salary"}
    assert body["message"]["staffName"] == "Staff name is required"


@pytest.mark.asyncio
async def test_create_staff_missing_salary(async_client):
    await create_department(async_client)

    response = await async_client.post("/api/staff", json={"staffName": "Ann", "departmentId": 1})
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert "salary" in response.json()["message"]


@pytest.mark.asyncio
async def test_update_staff(async_client):
    await create_department(async_client)
    physics = await create_department(async_client, "Physics")
    created = await create_staff(async_client, "Ann", 1, 1000)

    response = await async_client.put(
        f"/api/staff/{created['staffId']}",
        json={"staffName": "Anne", "departmentId": physics["departmentId"], "salary": "2500.50"},
    )
    assert response.status_code == status.HTTP_200_OK

    data = response.json()
    assert data["staffId"] == created["staffId"]
    assert data["staffName"] == "Anne"
    assert data["departmentId"] == physics["departmentId"]
    assert data["salary"] == 2500.5
    assert data["createdAt"] == created["createdAt"]
    assert parse_datetime(data["updatedAt"]) > parse_datetime(created["updatedAt"])


@pytest.mark.asyncio
async def test_update_missing_staff(async_client):
    await create_department(async_client)

    response = await async_client.put(
        "/api/staff/99",
        json={"staffName": "Anne", "departmentId": 1, "salary": 10},
    )
    assert response.status_code == status.HTTP_404_NOT_FOUND


@pytest.mark.asyncio
async def test_delete_missing_staff(async_client):
    response = await async_client.delete("/api/staff/99")
    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json()["message"] == "Staff not found with id: 99"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "method, path",
    [
        ("GET", "/api/staff/99999999999999999999999"),
        ("DELETE", "/api/staff/99999999999999999999999"),
        ("GET", "/api/staff/0"),
        ("GET", "/api/staff/department/99999999999999999999999"),
        ("GET", "/api/staff/department/2147483648/count"),
        ("GET", "/api/departments/99999999999999999999999"),
        ("DELETE", "/api/departments/2147483648"),
    ],
)
async def test_out_of_range_ids_are_rejected(async_client, method, path):
    response = await async_client.request(method, path)
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["error"] == "Validation Failed"


@pytest.mark.asyncio
async def test_update_with_out_of_range_id_is_rejected(async_client):
    response = await async_client.put(
        "/api/staff/99999999999999999999999",
        json={"staffName": "Ann", "departmentId": 1, "salary": 10},
    )
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert "staff_id" in response.json()["message"]


@pytest.mark.asyncio
@pytest.mark.parametrize("department_id", [99999999999999999999999, 2147483648, True, "1", 1.5])
async def test_department_id_must_be_a_bounded_integer(async_client, department_id):
    await create_department(async_client)

    response = await async_client.post(
        "/api/staff",
        json={"staffName": "Ann", "departmentId": department_id, "salary": 1000},
    )
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert set(response.json()["message"]) == {"departmentId"}


@pytest.mark.asyncio
async def test_malformed_json_body(async_client):
    response = await async_client.post(
        "/api/staff",
        content='{"staffName": "Ann", "departmentId": ',
        headers={"content-type": "application/json"},
    )
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert set(response.json()["message"]) == {"body"}


@pytest.mark.asyncio
async def test_timestamps_are_utc(async_client):
    department = await create_department(async_client)
    staff = await create_staff(async_client, "Ann", department["departmentId"], 1000)

    for value in (department["createdAt"], staff["createdAt"], staff["updatedAt"]):
        parsed = parse_datetime(value)
        assert parsed.tzinfo is not None
        assert parsed.utcoffset() == timedelta(0)


@pytest.mark.asyncio
async def test_search_and_filters(async_client):
    await create_department(async_client)
    physics = await create_department(async_client, "Physics")
    for name, department_id, salary in [
        ("John", 1, 3000),
        ("Joanna", 1, 7000),
        ("ajohn", physics["departmentId"], 5000),
        ("Mark", physics["departmentId"], 1000),
    ]:
        await create_staff(async_client, name, department_id, salary)

    response = await async_client.get("/api/staff/search", params={"name": "jo"})
    assert response.status_code == status.HTTP_200_OK
    assert {s["staffName"] for s in response.json()} == {"John", "Joanna", "ajohn"}

    response = await async_client.get("/api/staff/search", params={"name": "xyz"})
    assert response.json() == []

    response = await async_client.get("/api/staff/department/1")
    assert {s["staffName"] for s in response.json()} == {"John", "Joanna"}

    response = await async_client.get("/api/staff/department/name/Physics")
    assert {s["staffName"] for s in response.json()} == {"ajohn", "Mark"}

    response = await async_client.get("/api/staff/department/1/count")
    assert response.json() == {"departmentId": 1, "count": 2}

    response = await async_client.get("/api/staff/department/404/count")
    assert response.json() == {"departmentId": 404, "count": 0}

    response = await async_client.get("/api/staff/salary/5000")
    assert [s["staffName"] for s in response.json()] == ["Joanna", "ajohn"]

    response = await async_client.get(
        "/api/staff/salary-range", params={"minSalary": 1000, "maxSalary": 5000}
    )
    assert {s["staffName"] for s in response.json()} == {"John", "ajohn", "Mark"}

    response = await async_client.get("/api/staff/highest-paid")
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["staffName"] == "Joanna"


@pytest.mark.asyncio
async def test_empty_department_filter_is_not_an_error(async_client):
    response = await async_client.get("/api/staff/department/5")
    assert response.status_code == status.HTTP_200_OK
    assert response.json() == []


@pytest.mark.asyncio
async def test_salary_range_with_inverted_bounds(async_client):
    response = await async_client.get(
        "/api/staff/salary-range", params={"minSalary": 5000, "maxSalary": 1000}
    )
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["error"] == "Invalid Input"


@pytest.mark.asyncio
async def test_minimum_salary_must_be_numeric(async_client):
    response = await async_client.get("/api/staff/salary/lots")
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["error"] == "Validation Failed"


@pytest.mark.asyncio
async def test_highest_paid_with_no_staff(async_client):
    response = await async_client.get("/api/staff/highest-paid")
    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json()["message"] == "No staff records exist"


@pytest.mark.asyncio
async def test_list_departments_helper(async_client):
    await create_department(async_client, "Physics")
    await create_department(async_client, "Chemistry")

    response = await async_client.get("/api/staff/departments")
    assert response.status_code == status.HTTP_200_OK
    assert [d["departmentName"] for d in response.json()] == ["Chemistry", "Physics"]
