# tests/test_api.py

"""
API Endpoint Tests - Tests for all FastAPI endpoints

Each test starts from the seeded demo store (see conftest.reset_store).
"""

from datetime import date

import pytest
from fastapi import status


def template_evaluation(person_id="emp-1", person_type="employee", scores=None, **extra):
    payload = {
        "personId": person_id,
        "personType": person_type,
        "templateId": "template-1",
        "scores": scores if scores is not None else [{"characteristicId": "char-1-1", "score": 10}],
        "potential": "Alto",
        "userId": "user-1",
        "userName": "Admin",
    }
    payload.update(extra)
    return payload


SAMPLE_CRITERIA = [
    {
        "id": "A",
        "name": "Factor A",
        "characteristics": [
            {"id": "a1", "name": "a1", "weight": 1},
            {"id": "a2", "name": "a2", "weight": 1},
        ],
    },
    {"id": "B", "name": "Factor B", "characteristics": [{"id": "b1", "name": "b1", "weight": 2}]},
]

SAMPLE_SCORES = [
    {"characteristicId": "a1", "score": 8},
    {"characteristicId": "a2", "score": 6},
    {"characteristicId": "b1", "score": 10},
]



# HEALTH & ROOT TESTS


class TestHealthEndpoint:

    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["status"] == "healthy"
        assert data["dependencies"]["storage"] == "healthy (backend: memory)"

    def test_root(self, client):
        response = client.get("/")
        assert response.status_code == status.HTTP_200_OK
        assert response.json()["status"] == "running"



# SCORING ENDPOINT TESTS


class TestScoringEndpoints:
    """Tests for the stateless /api/v1/scoring endpoints."""

    def test_aggregate(self, client):
        response = client.post(
            "/api/v1/scoring/aggregate",
            json={"scores": SAMPLE_SCORES, "criteria": SAMPLE_CRITERIA},
        )
        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["overall"] == pytest.approx(8.5)
        assert [f["factorId"] for f in data["factors"]] == ["A", "B"]
        assert data["factors"][0]["factorName"] == "Factor A"
        assert data["factors"][0]["score"] == pytest.approx(7)
        assert data["factors"][1]["score"] == pytest.approx(10)

    def test_aggregate_empty_criteria(self, client):
        response = client.post("/api/v1/scoring/aggregate", json={"scores": SAMPLE_SCORES})
        assert response.json() == {"overall": 0.0, "factors": []}

    def test_aggregate_missing_scores_count_as_zero(self, client):
        response = client.post(
            "/api/v1/scoring/aggregate",
            json={"scores": [{"characteristicId": "b1", "score": 10}], "criteria": SAMPLE_CRITERIA},
        )
        data = response.json()
        assert data["factors"][0]["score"] == 0
        # (0 + 0 + 2 * 10) / 4
        assert data["overall"] == pytest.approx(5)

    def test_aggregate_rejects_infinite_weight(self, client):
        body = (
            '{"scores": [{"characteristicId": "x", "score": 5}],'
            ' "criteria": [{"id": "F", "name": "F",'
            ' "characteristics": [{"id": "x", "name": "x", "weight": Infinity}]}]}'
        )
        response = client.post(
            "/api/v1/scoring/aggregate",
            content=body,
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
        assert response.json()["error_code"] == "VALIDATION_ERROR"

    @pytest.mark.parametrize(
        "score,expected",
        [(0, "Bajo"), (4, "Bajo"), (4.01, "Medio"), (7, "Medio"), (10, "Alto"), (10.5, "Indeterminado")],
    )
    def test_classify_with_stored_defaults(self, client, score, expected):
        response = client.post("/api/v1/scoring/classify", json={"score": score})
        assert response.status_code == status.HTTP_200_OK
        assert response.json()["level"] == expected

    def test_classify_with_explicit_thresholds(self, client):
        response = client.post(
            "/api/v1/scoring/classify",
            json={
                "score": 5,
                "thresholds": [
                    {"name": "Alto", "threshold": 10},
                    {"name": "Bajo", "threshold": 6},
                ],
            },
        )
        assert response.json() == {"score": 5.0, "level": "Bajo"}

    def test_classify_empty_thresholds(self, client):
        response = client.post("/api/v1/scoring/classify", json={"score": 1, "thresholds": []})
        assert response.json()["level"] == "Indeterminado"

    def test_classify_requires_score(self, client):
        response = client.post("/api/v1/scoring/classify", json={})
        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
        assert response.json()["error_code"] == "VALIDATION_ERROR"

    def test_evaluate(self, client):
        response = client.post(
            "/api/v1/scoring/evaluate",
            json={"scores": SAMPLE_SCORES, "criteria": SAMPLE_CRITERIA},
        )
        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["calculatedScores"]["overall"] == pytest.approx(8.5)
        assert data["level"] == "Alto"

    def test_evaluate_does_not_persist(self, client):
        client.post(
            "/api/v1/scoring/evaluate",
            json={"scores": SAMPLE_SCORES, "criteria": SAMPLE_CRITERIA},
        )
        assert client.get("/api/v1/evaluations").json() == []



# LEVEL THRESHOLD SETTINGS TESTS


class TestLevelThresholdsEndpoint:

    def test_get_defaults(self, client):
        response = client.get("/api/v1/settings/level-thresholds")
        assert response.status_code == status.HTTP_200_OK
        assert [(t["name"], t["threshold"]) for t in response.json()] == [
            ("Bajo", 4),
            ("Medio", 7),
            ("Alto", 10),
        ]

    def test_update_and_classify(self, client):
        thresholds = [
            {"name": "Bajo", "threshold": 3},
            {"name": "Medio", "threshold": 8},
            {"name": "Alto", "threshold": 10},
        ]
        response = client.put(
            "/api/v1/settings/level-thresholds",
            json={"thresholds": thresholds},
            params={"user_id": "user-1", "user_name": "Admin"},
        )
        assert response.status_code == status.HTTP_200_OK
        assert client.get("/api/v1/settings/level-thresholds").json()[1]["threshold"] == 8

        classified = client.post("/api/v1/scoring/classify", json={"score": 7.5})
        assert classified.json()["level"] == "Medio"

        log = client.get("/api/v1/activity-log").json()
        assert log[0]["action"] == "UPDATE_LEVEL_THRESHOLDS"
        assert log[0]["userName"] == "Admin"

    def test_update_rejects_non_increasing(self, client):
        response = client.put(
            "/api/v1/settings/level-thresholds",
            json={"thresholds": [
                {"name": "Bajo", "threshold": 7},
                {"name": "Medio", "threshold": 7},
                {"name": "Alto", "threshold": 10},
            ]},
        )
        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
        detail = response.json()["detail"]
        assert detail["error_code"] == "INVALID_THRESHOLDS"
        assert detail["message"] == 'El umbral para "Bajo" debe ser menor que el de "Medio".'
        # Stored thresholds untouched
        assert client.get("/api/v1/settings/level-thresholds").json()[0]["threshold"] == 4

    def test_update_rejects_short_scale(self, client):
        response = client.put(
            "/api/v1/settings/level-thresholds",
            json={"thresholds": [{"name": "Bajo", "threshold": 5}, {"name": "Alto", "threshold": 9}]},
        )
        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
        assert response.json()["detail"]["error_code"] == "INVALID_THRESHOLDS"

    def test_update_rejects_indeterminate(self, client):
        response = client.put(
            "/api/v1/settings/level-thresholds",
            json={"thresholds": [{"name": "Indeterminado", "threshold": 10}]},
        )
        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY

    def test_update_requires_one_level(self, client):
        response = client.put("/api/v1/settings/level-thresholds", json={"thresholds": []})
        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
        data = response.json()
        assert data["error_code"] == "VALIDATION_ERROR"
        assert data["message"] == "At least one level threshold is required"



# CRITERIA TEMPLATE TESTS


class TestCriteriaTemplateEndpoints:

    def test_list_seeded(self, client):
        response = client.get("/api/v1/criteria-templates")
        assert [t["id"] for t in response.json()] == ["template-1", "template-2"]

    def test_filter_by_organization(self, client):
        response = client.get("/api/v1/criteria-templates", params={"organization_id": "org-999"})
        assert response.json() == []

    def test_crud(self, client):
        created = client.post(
            "/api/v1/criteria-templates",
            json={"name": "Liderazgo", "organizationId": "org-1", "criteria": SAMPLE_CRITERIA},
        )
        assert created.status_code == status.HTTP_201_CREATED
        template_id = created.json()["id"]
        assert template_id.startswith("template-")

        fetched = client.get(f"/api/v1/criteria-templates/{template_id}").json()
        assert fetched["criteria"][1]["characteristics"][0]["weight"] == 2

        replaced = client.put(
            f"/api/v1/criteria-templates/{template_id}",
            json={"name": "Liderazgo v2", "organizationId": "org-1", "criteria": []},
        )
        assert replaced.status_code == status.HTTP_200_OK
        assert replaced.json()["name"] == "Liderazgo v2"
        assert replaced.json()["id"] == template_id

        deleted = client.delete(f"/api/v1/criteria-templates/{template_id}")
        assert deleted.status_code == status.HTTP_204_NO_CONTENT

        missing = client.get(f"/api/v1/criteria-templates/{template_id}")
        assert missing.status_code == status.HTTP_404_NOT_FOUND
        assert missing.json()["detail"]["error_code"] == "CRITERIA_TEMPLATE_NOT_FOUND"

    def test_create_requires_name(self, client):
        response = client.post(
            "/api/v1/criteria-templates", json={"name": "", "organizationId": "org-1"}
        )
        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
        assert response.json()["message"] == "Name cannot be empty"



# PEOPLE TESTS


class TestPeopleEndpoints:

    def test_list_employees(self, client):
        response = client.get("/api/v1/employees")
        assert response.status_code == status.HTTP_200_OK
        assert len(response.json()) == 12

    def test_filter_by_department(self, client):
        response = client.get("/api/v1/employees", params={"department": "Tecnología"})
        assert [e["id"] for e in response.json()] == ["emp-1", "emp-2", "emp-3", "emp-4"]

    def test_get_employee(self, client):
        data = client.get("/api/v1/employees/emp-1").json()
        assert data["name"] == "Ana Torres"
        assert data["hireDate"] == "2021-03-15"

    def test_employee_not_found(self, client):
        response = client.get("/api/v1/employees/emp-404")
        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["detail"]["error_code"] == "EMPLOYEE_NOT_FOUND"

    def test_create_employee_logs_activity(self, client):
        response = client.post(
            "/api/v1/employees",
            json={"name": "Nora Paz", "role": "Analista", "department": "Marketing",
                  "organizationId": "org-1"},
        )
        assert response.status_code == status.HTTP_201_CREATED
        new_id = response.json()["id"]
        assert new_id.startswith("emp-")

        entry = client.get("/api/v1/activity-log").json()[0]
        assert entry["action"] == "CREATE_EMPLOYEE"
        assert entry["targetId"] == new_id

    def test_applicants(self, client):
        assert len(client.get("/api/v1/applicants").json()) == 3
        data = client.get("/api/v1/applicants/appl-1").json()
        assert data["status"] == "En Proceso"

        created = client.post(
            "/api/v1/applicants",
            json={"name": "Iván Rey", "positionApplied": "QA", "organizationId": "org-1"},
        )
        assert created.status_code == status.HTTP_201_CREATED
        assert created.json()["status"] == "Nuevo"

    def test_applicant_not_found(self, client):
        response = client.get("/api/v1/applicants/appl-404")
        assert response.json()["detail"]["error_code"] == "APPLICANT_NOT_FOUND"

    def test_filter_people_by_organization(self, client):
        assert len(client.get("/api/v1/employees", params={"organization_id": "org-1"}).json()) == 12
        assert client.get("/api/v1/employees", params={"organization_id": "org-2"}).json() == []
        assert len(client.get("/api/v1/applicants", params={"organization_id": "org-1"}).json()) == 3
        assert client.get("/api/v1/applicants", params={"organization_id": "org-2"}).json() == []

    def test_organization_and_department_filters_combine(self, client):
        response = client.get(
            "/api/v1/employees", params={"organization_id": "org-1", "department": "Ventas"}
        )
        assert [e["id"] for e in response.json()] == ["emp-5", "emp-6", "emp-7", "emp-8"]



# RECRUITMENT AND EMPLOYEE EDIT TESTS


class TestRecruitmentWorkflow:

    def test_update_employee(self, client):
        response = client.put(
            "/api/v1/employees/emp-1",
            params={"user_name": "Admin"},
            json={"name": "Ana Torres", "role": "Tech Lead", "department": "Tecnología",
                  "organizationId": "org-1"},
        )
        assert response.status_code == status.HTTP_200_OK
        assert response.json()["id"] == "emp-1"
        assert client.get("/api/v1/employees/emp-1").json()["role"] == "Tech Lead"

        entry = client.get("/api/v1/activity-log").json()[0]
        assert entry["action"] == "UPDATE_EMPLOYEE"
        assert entry["details"] == "Se actualizaron los datos del empleado: Ana Torres"
        assert entry["userName"] == "Admin"
        assert entry["targetId"] == "emp-1"

    def test_update_employee_keeps_position(self, client):
        client.put(
            "/api/v1/employees/emp-2",
            json={"name": "Renombrado", "role": "Dev", "organizationId": "org-1"},
        )
        assert client.get("/api/v1/employees").json()[1]["name"] == "Renombrado"

    def test_update_unknown_employee(self, client):
        response = client.put(
            "/api/v1/employees/emp-404",
            json={"name": "X", "role": "Dev", "organizationId": "org-1"},
        )
        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["detail"]["error_code"] == "EMPLOYEE_NOT_FOUND"

    def test_delete_employee(self, client):
        response = client.delete("/api/v1/employees/emp-1")
        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert client.get("/api/v1/employees/emp-1").status_code == status.HTTP_404_NOT_FOUND
        assert len(client.get("/api/v1/employees").json()) == 11

        entry = client.get("/api/v1/activity-log").json()[0]
        assert entry["action"] == "DELETE_EMPLOYEE"
        assert entry["details"] == "Se eliminó al empleado: Ana Torres"
        assert entry["targetId"] == "emp-1"

    def test_delete_unknown_employee_logs_nothing(self, client):
        before = client.get("/api/v1/activity-log").json()
        response = client.delete("/api/v1/employees/emp-404")
        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert client.get("/api/v1/activity-log").json() == before

    def test_update_applicant_status(self, client):
        response = client.patch("/api/v1/applicants/appl-2/status", json={"status": "En Proceso"})
        assert response.status_code == status.HTTP_200_OK
        assert response.json()["status"] == "En Proceso"
        assert client.get("/api/v1/applicants/appl-2").json()["status"] == "En Proceso"

        entry = client.get("/api/v1/activity-log").json()[0]
        assert entry["action"] == "UPDATE_APPLICANT_STATUS"
        assert entry["details"] == "Se cambió el estado de Verónica Saenz a En Proceso."
        assert entry["targetId"] == "appl-2"

    def test_update_status_rejects_unknown_value(self, client):
        response = client.patch("/api/v1/applicants/appl-2/status", json={"status": "Archivado"})
        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
        assert response.json()["error_code"] == "VALIDATION_ERROR"

    def test_update_status_unknown_applicant(self, client):
        response = client.patch("/api/v1/applicants/appl-404/status", json={"status": "Oferta"})
        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["detail"]["error_code"] == "APPLICANT_NOT_FOUND"

    def test_hire_applicant(self, client):
        applicant = client.get("/api/v1/applicants/appl-3").json()
        response = client.post(
            "/api/v1/applicants/appl-3/hire",
            json={"role": "Diseñadora Gráfica", "department": "Diseño", "employeeCode": "E-013"},
        )
        assert response.status_code == status.HTTP_201_CREATED
        employee = response.json()
        assert employee["id"].startswith("emp-")
        assert employee["name"] == applicant["name"]
        assert employee["organizationId"] == applicant["organizationId"]
        assert employee["role"] == "Diseñadora Gráfica"
        assert employee["employeeCode"] == "E-013"
        assert employee["hireDate"] == date.today().isoformat()

        assert client.get(f"/api/v1/employees/{employee['id']}").status_code == status.HTTP_200_OK
        assert client.get("/api/v1/applicants/appl-3").json()["status"] == "Contratado"

        entry = client.get("/api/v1/activity-log").json()[0]
        assert entry["action"] == "HIRE_APPLICANT"
        assert entry["details"] == "Se contrató a Daniela Soto como Diseñadora Gráfica."
        assert entry["targetId"] == employee["id"]

    def test_hire_twice_conflicts(self, client):
        client.post("/api/v1/applicants/appl-3/hire", json={"role": "Diseñadora"})
        response = client.post("/api/v1/applicants/appl-3/hire", json={"role": "Diseñadora"})
        assert response.status_code == status.HTTP_409_CONFLICT
        assert response.json()["detail"]["error_code"] == "APPLICANT_ALREADY_HIRED"
        assert len(client.get("/api/v1/employees").json()) == 13

    def test_hire_requires_role(self, client):
        response = client.post("/api/v1/applicants/appl-3/hire", json={"department": "Diseño"})
        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
        assert client.get("/api/v1/applicants/appl-3").json()["status"] == "Oferta"

    def test_hire_unknown_applicant(self, client):
        response = client.post("/api/v1/applicants/appl-404/hire", json={"role": "Dev"})
        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["detail"]["error_code"] == "APPLICANT_NOT_FOUND"



# EVALUATION TESTS


class TestEvaluationEndpoints:

    def test_complete_with_template(self, client):
        response = client.post("/api/v1/evaluations", json=template_evaluation())
        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()

        assert data["personId"] == "emp-1"
        assert data["organizationId"] == "org-1"
        assert len(data["scores"]) == 5
        assert len(data["criteria"]) == 2
        # (10*1 + 5*0.9 + 5*0.8 + 5*0.7 + 5*0.8) / 4.2
        assert data["calculatedScores"]["overall"] == pytest.approx(26 / 4.2)
        assert data["level"] == "Medio"
        assert data["potential"] == "Alto"
        assert "### Resumen General" in data["feedback"]

    def test_complete_with_explicit_criteria(self, client):
        payload = {
            "personId": "appl-1",
            "personType": "applicant",
            "criteria": SAMPLE_CRITERIA,
            "scores": SAMPLE_SCORES,
            "mode": "Riguroso",
            "userId": "user-1",
            "userName": "Admin",
        }
        response = client.post("/api/v1/evaluations", json=payload)
        assert response.status_code == status.HTTP_201_CREATED
        assert response.json()["calculatedScores"]["overall"] == pytest.approx(8.5)
        assert response.json()["level"] == "Alto"

    def test_complete_logs_activity(self, client):
        evaluation_id = client.post("/api/v1/evaluations", json=template_evaluation()).json()["id"]
        entry = client.get("/api/v1/activity-log", params={"limit": 1}).json()[0]
        assert entry["action"] == "COMPLETE_EVALUATION"
        assert entry["targetId"] == evaluation_id

    def test_unknown_person(self, client):
        response = client.post("/api/v1/evaluations", json=template_evaluation(person_id="emp-404"))
        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["detail"]["error_code"] == "EMPLOYEE_NOT_FOUND"

    def test_unknown_template(self, client):
        response = client.post(
            "/api/v1/evaluations", json=template_evaluation(templateId="template-404")
        )
        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["detail"]["error_code"] == "CRITERIA_TEMPLATE_NOT_FOUND"

    def test_rating_out_of_range(self, client):
        response = client.post(
            "/api/v1/evaluations",
            json=template_evaluation(scores=[{"characteristicId": "char-1-1", "score": 11}]),
        )
        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
        assert response.json()["detail"]["error_code"] == "VALIDATION_ERROR"

    def test_requires_criteria_source(self, client):
        payload = template_evaluation()
        del payload["templateId"]
        response = client.post("/api/v1/evaluations", json=payload)
        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
        data = response.json()
        assert data["error_code"] == "VALIDATION_ERROR"
        assert "criteria or template_id" in data["message"]

    def test_missing_person_id(self, client):
        payload = template_evaluation()
        del payload["personId"]
        response = client.post("/api/v1/evaluations", json=payload)
        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
        assert response.json()["message"] == "Person ID is required"

    def test_malformed_json(self, client):
        response = client.post(
            "/api/v1/evaluations",
            content="{not json",
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["error_code"] == "INVALID_REQUEST"

    def test_list_and_filter(self, client):
        client.post("/api/v1/evaluations", json=template_evaluation("emp-1"))
        client.post("/api/v1/evaluations", json=template_evaluation("emp-2"))
        client.post("/api/v1/evaluations", json=template_evaluation("appl-1", "applicant"))

        assert len(client.get("/api/v1/evaluations").json()) == 3
        by_person = client.get("/api/v1/evaluations", params={"person_id": "emp-2"}).json()
        assert [e["personId"] for e in by_person] == ["emp-2"]
        by_type = client.get("/api/v1/evaluations", params={"person_type": "applicant"}).json()
        assert [e["personId"] for e in by_type] == ["appl-1"]

    def test_get_and_delete(self, client):
        evaluation_id = client.post("/api/v1/evaluations", json=template_evaluation()).json()["id"]

        fetched = client.get(f"/api/v1/evaluations/{evaluation_id}")
        assert fetched.status_code == status.HTTP_200_OK
        assert fetched.json()["id"] == evaluation_id

        assert client.delete(f"/api/v1/evaluations/{evaluation_id}").status_code == (
            status.HTTP_204_NO_CONTENT
        )
        missing = client.get(f"/api/v1/evaluations/{evaluation_id}")
        assert missing.status_code == status.HTTP_404_NOT_FOUND
        assert missing.json()["detail"]["error_code"] == "EVALUATION_NOT_FOUND"

    def test_template_edit_keeps_stored_snapshot(self, client):
        evaluation_id = client.post("/api/v1/evaluations", json=template_evaluation()).json()["id"]
        client.put(
            "/api/v1/criteria-templates/template-1",
            json={"name": "Vacía", "organizationId": "org-1", "criteria": []},
        )
        stored = client.get(f"/api/v1/evaluations/{evaluation_id}").json()
        assert [f["id"] for f in stored["criteria"]] == ["factor-1", "factor-2"]



# ANALYTICS TESTS


class TestAnalyticsEndpoints:

    @pytest.fixture
    def evaluated(self, client):
        high = [{"characteristicId": c, "score": 9}
                for c in ("char-1-1", "char-1-2", "char-1-3", "char-2-1", "char-2-2")]
        client.post("/api/v1/evaluations", json=template_evaluation("emp-1", scores=high))
        client.post("/api/v1/evaluations", json=template_evaluation("emp-1"))
        client.post(
            "/api/v1/evaluations",
            json=template_evaluation("emp-5", scores=[], potential="Bajo"),
        )
        client.post("/api/v1/evaluations", json=template_evaluation("appl-1", "applicant"))

    def test_talent_matrix(self, client, evaluated):
        response = client.get("/api/v1/analytics/talent-matrix")
        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["total_evaluated"] == 2
        # emp-5: every rating 5 -> Medio performance, Bajo potential
        assert [c["employee_id"] for c in data["grid"][0][1]["candidates"]] == ["emp-5"]

    def test_talent_matrix_department(self, client, evaluated):
        data = client.get(
            "/api/v1/analytics/talent-matrix", params={"department": "Ventas"}
        ).json()
        assert data["department"] == "Ventas"
        assert data["total_evaluated"] == 1

    def test_promotions(self, client, evaluated):
        data = client.get("/api/v1/analytics/promotions").json()
        assert list(data["departments"])[0] == "Tecnología"
        tech = data["departments"]["Tecnología"]
        assert [p["employee_id"] for p in tech] == ["emp-1"]
        assert tech[0]["evaluation_count"] == 2
        assert data["departments"]["Marketing"] == []

    def test_dashboard(self, client, evaluated):
        data = client.get("/api/v1/analytics/dashboard").json()
        assert data["evaluated_count"] == 2
        assert sum(data["level_distribution"].values()) == 2

    def test_dashboard_level_filter(self, client, evaluated):
        data = client.get("/api/v1/analytics/dashboard", params={"level": "Alto"}).json()
        assert data["evaluated_count"] == 0

    def test_comparison(self, client, evaluated):
        response = client.get(
            "/api/v1/analytics/comparison",
            params=[("person_ids", "emp-1"), ("person_ids", "appl-1"), ("person_ids", "emp-9")],
        )
        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert [p["person_id"] for p in data["people"]] == ["emp-1", "appl-1"]
        assert [row["factor_id"] for row in data["factors"]] == ["factor-1", "factor-2"]

    def test_comparison_requires_ids(self, client):
        response = client.get("/api/v1/analytics/comparison")
        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY

    def test_flight_risk_factors(self, client, evaluated):
        data = client.get("/api/v1/analytics/flight-risk/factors").json()
        assert list(data) == ["emp-1"]
        assert len(data["emp-1"]["recent_scores"]) == 2
        assert data["emp-1"]["absences_last_window"] == 0



# ACTIVITY LOG TESTS


class TestActivityLogEndpoint:

    def test_empty_after_seed(self, client):
        assert client.get("/api/v1/activity-log").json() == []

    def test_limit_bounds(self, client):
        response = client.get("/api/v1/activity-log", params={"limit": 0})
        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
