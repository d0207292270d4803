"""Dashboard and training-needs endpoints."""
from traininghub.models.user import UserRole
from tests.conftest import headers_for, survey_payload


def _survey(client, headers, **overrides):
    response = client.post("/surveys", json=survey_payload(**overrides), headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


def _respond(client, survey, headers):
    body = {"answers": [{"question_id": survey["questions"][0]["id"], "answer": "Python"}]}
    response = client.post(f"/surveys/{survey['id']}/responses", json=body, headers=headers)
    assert response.status_code == 201, response.text


class TestDashboard:

    def test_empty_store(self, client, employee_headers):
        response = client.get("/analytics/dashboard", headers=employee_headers)
        assert response.status_code == 200
        data = response.json()
        # only the caller exists
        assert data["stats"] == {
            "totalUsers": 1,
            "totalSurveys": 0,
            "activeSurveys": 0,
            "totalResponses": 0,
        }
        assert data["surveyCompletionRates"] == []
        assert data["recentActivity"] == []

    def test_stats(self, client, make_user, manager_headers, employee, employee_headers):
        other = make_user(UserRole.EMPLOYEE, department="Sales")
        active = _survey(client, manager_headers, title="Active one", status="ACTIVE")
        _survey(client, manager_headers, title="Draft one")
        _respond(client, active, employee_headers)
        _respond(client, active, headers_for(other))

        data = client.get("/analytics/dashboard", headers=employee_headers).json()
        assert data["stats"] == {
            "totalUsers": 3,
            "totalSurveys": 2,
            "activeSurveys": 1,
            "totalResponses": 2,
        }
        assert data["surveyCompletionRates"] == [
            {"id": active["id"], "title": "Active one", "responseCount": 2},
        ]

    def test_users_by_department(self, client, make_user, admin_headers):
        make_user(UserRole.EMPLOYEE, department="Engineering")
        make_user(UserRole.EMPLOYEE, department="Engineering")
        make_user(UserRole.MANAGER, department="Finance")
        make_user(UserRole.EMPLOYEE, department=None)

        data = client.get("/analytics/dashboard", headers=admin_headers).json()
        departments = {row["department"]: row["count"] for row in data["usersByDepartment"]}

        assert departments == {"Engineering": 2, "Finance": 1, "Administration": 1}
        assert None not in departments
        # users without a department are the only ones left out
        assert sum(departments.values()) == data["stats"]["totalUsers"] - 1
        assert data["usersByDepartment"][0] == {"department": "Engineering", "count": 2}

    def test_completion_rates_top_five_active(self, client, make_user, manager_headers):
        respondents = [headers_for(make_user()) for _ in range(3)]
        surveys = [_survey(client, manager_headers, title=f"Survey {i}", status="ACTIVE") for i in range(6)]
        _survey(client, manager_headers, title="Archived", status="ARCHIVED")
        for headers in respondents:
            _respond(client, surveys[5], headers)
        _respond(client, surveys[2], respondents[0])

        data = client.get("/analytics/dashboard", headers=manager_headers).json()
        rates = data["surveyCompletionRates"]

        assert len(rates) == 5
        assert rates[0] == {"id": surveys[5]["id"], "title": "Survey 5", "responseCount": 3}
        assert rates[1]["id"] == surveys[2]["id"]
        assert all(rate["title"] != "Archived" for rate in rates)

    def test_recent_activity(self, client, employee, manager_headers, employee_headers):
        survey = _survey(client, manager_headers, title="Pulse check", status="ACTIVE")
        _respond(client, survey, employee_headers)

        data = client.get("/analytics/dashboard", headers=employee_headers).json()
        assert len(data["recentActivity"]) == 1
        item = data["recentActivity"][0]
        assert item["surveyId"] == survey["id"]
        assert item["userId"] == employee.id
        assert item["status"] == "COMPLETED"
        assert item["createdAt"]
        assert item["user"] == {"firstName": employee.first_name, "lastName": employee.last_name}
        assert item["survey"] == {"title": "Pulse check"}

    def test_recent_activity_capped_at_ten(self, client, make_user, manager_headers):
        survey = _survey(client, manager_headers, status="ACTIVE")
        for _ in range(12):
            _respond(client, survey, headers_for(make_user()))

        data = client.get("/analytics/dashboard", headers=manager_headers).json()
        assert data["stats"]["totalResponses"] == 12
        assert len(data["recentActivity"]) == 10


def test_training_needs_placeholder(client, employee_headers):
    response = client.get("/analytics/training-needs", headers=employee_headers)
    assert response.status_code == 200
    assert response.json() == {
        "byDepartment": {},
        "bySkill": {},
        "priority": {"high": 0, "medium": 0, "low": 0},
    }
