"""
End-to-end flows across companies and jobs.
"""
API = "/api/v1"


def test_created_company_fetched_with_empty_jobs(client, admin_headers):
    company = {"handle": "c1", "name": "C1", "numEmployees": 5}
    client.post(f"{API}/companies/", json=company, headers=admin_headers)

    resp = client.get(f"{API}/companies/c1")

    assert resp.status_code == 200
    assert resp.json() == {
        **company,
        "description": None,
        "logoUrl": None,
        "jobs": [],
    }


def test_min_salary_bounds_new_job(client, admin_headers):
    client.post(f"{API}/companies/", json={"handle": "c1", "name": "C1"}, headers=admin_headers)
    job = client.post(
        f"{API}/jobs/",
        json={"title": "j1", "salary": 1, "equity": "0.1", "companyHandle": "c1"},
        headers=admin_headers,
    ).json()

    included = client.get(f"{API}/jobs/", params={"minSalary": 1}).json()
    excluded = client.get(f"{API}/jobs/", params={"minSalary": 2}).json()

    assert job["id"] in [j["id"] for j in included]
    assert job["id"] not in [j["id"] for j in excluded]


def test_has_equity_skips_null_and_zero(client, seeded):
    jobs = client.get(f"{API}/jobs/", params={"hasEquity": "true"}).json()

    assert jobs
    assert all(j["equity"] is not None and float(j["equity"]) > 0 for j in jobs)
    assert seeded["J3"] not in [j["id"] for j in jobs]
    assert seeded["J4"] not in [j["id"] for j in jobs]


def test_unknown_update_field_leaves_row(client, admin_headers, seeded):
    job_id = seeded["J1"]
    before = client.get(f"{API}/jobs/{job_id}").json()

    resp = client.patch(
        f"{API}/jobs/{job_id}",
        json={"title": "changed", "bogus": 1},
        headers=admin_headers,
    )

    assert resp.status_code == 400
    assert client.get(f"{API}/jobs/{job_id}").json() == before


def test_non_admin_cannot_delete(client, u1_headers, seeded):
    job_id = seeded["J1"]

    assert client.delete(f"{API}/companies/c1", headers=u1_headers).status_code == 401
    assert client.delete(f"{API}/jobs/{job_id}", headers=u1_headers).status_code == 401

    assert client.get(f"{API}/companies/c1").status_code == 200
    assert client.get(f"{API}/jobs/{job_id}").status_code == 200


def test_create_update_fetch(client, admin_headers, seeded):
    job_id = seeded["J2"]
    client.patch(f"{API}/jobs/{job_id}", json={"salary": 250}, headers=admin_headers)

    job = client.get(f"{API}/jobs/{job_id}").json()

    assert job["salary"] == 250
    assert job["title"] == "J2"
    assert float(job["equity"]) == 0.2
    assert job["companyHandle"] == "c1"
