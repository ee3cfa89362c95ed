import re

import pytest

STAFF = {
    "name": "Asha Menon",
    "role": "Nurse",
    "department": "Emergency",
    "qualification": "BSc Nursing",
    "contact": "9000022222",
    "email": "asha@citygeneral.in",
    "dateOfJoining": "2024-01-15",
    "shiftTiming": "Night",
    "experience": "5",
    "salary": "40000",
    "emergencyContact": "9000033333",
}


@pytest.mark.parametrize(
    "role, pattern",
    [
        ("Nurse", r"^[A-Z]+\d{3}$"),
        ("Head nurse", r"^[A-Z]+\d{3}$"),
        ("Doctor", r"^[A-Z]+@\d{3}$"),
        ("Pharmacist", r"^[A-Z]+_\d{3}$"),
    ],
)
async def test_staff_code_format_by_role(client, register_hospital, role, pattern):
    headers = await register_hospital()
    resp = await client.post("/api/hospital/staff", json={**STAFF, "role": role}, headers=headers)
    assert resp.status_code == 201
    staff_id = resp.json()["staffId"]
    assert re.fullmatch(pattern, staff_id)
    assert staff_id.startswith("CG")


async def test_staff_record_is_owned_by_caller(client, register_hospital):
    headers = await register_hospital()
    me = (await client.get("/api/auth/me", headers=headers)).json()
    staff = (await client.post("/api/hospital/staff", json=STAFF, headers=headers)).json()
    assert staff["hospitalId"] == me["id"]
    assert staff["dateOfJoining"] == "2024-01-15"
    assert staff["emergencyContact"] == "9000033333"


async def test_staff_requires_hospital_role(client, register_worker_account):
    headers = await register_worker_account()
    assert (await client.get("/api/hospital/staff", headers=headers)).status_code == 401
    assert (await client.post("/api/hospital/staff", json=STAFF, headers=headers)).status_code == 401


async def test_staff_requires_role(client, register_hospital):
    headers = await register_hospital()
    body = {k: v for k, v in STAFF.items() if k != "role"}
    resp = await client.post("/api/hospital/staff", json=body, headers=headers)
    assert resp.status_code == 400


async def test_staff_list_is_scoped(client, register_hospital):
    city = await register_hospital()
    rural = await register_hospital(name="Rural Health Clinic", reg="RC2", email="r@b.com")
    await client.post("/api/hospital/staff", json=STAFF, headers=city)
    await client.post("/api/hospital/staff", json={**STAFF, "name": "Dr. Iyer", "role": "Doctor"}, headers=city)
    await client.post("/api/hospital/staff", json={**STAFF, "name": "Rural Nurse"}, headers=rural)

    city_staff = (await client.get("/api/hospital/staff", headers=city)).json()
    assert [s["name"] for s in city_staff] == ["Dr. Iyer", "Asha Menon"]
    rural_staff = (await client.get("/api/hospital/staff", headers=rural)).json()
    assert [s["name"] for s in rural_staff] == ["Rural Nurse"]
    assert rural_staff[0]["staffId"].startswith("RHC")


async def test_role_change_keeps_staff_code(client, register_hospital):
    headers = await register_hospital()
    created = (await client.post("/api/hospital/staff", json=STAFF, headers=headers)).json()

    resp = await client.put(
        f"/api/hospital/staff/{created['id']}", json={"role": "Doctor", "shiftTiming": "Day"}, headers=headers
    )
    assert resp.status_code == 200
    updated = resp.json()
    assert updated["role"] == "Doctor"
    assert updated["shiftTiming"] == "Day"
    assert updated["staffId"] == created["staffId"]


async def test_other_hospital_cannot_touch_staff(client, register_hospital):
    owner = await register_hospital()
    intruder = await register_hospital(name="Rural Health Clinic", reg="RC2", email="r@b.com")
    created = (await client.post("/api/hospital/staff", json=STAFF, headers=owner)).json()
    url = f"/api/hospital/staff/{created['id']}"

    assert (await client.put(url, json={"salary": "1"}, headers=intruder)).status_code == 404
    assert (await client.delete(url, headers=intruder)).status_code == 404
    assert len((await client.get("/api/hospital/staff", headers=owner)).json()) == 1


async def test_delete_staff(client, register_hospital):
    headers = await register_hospital()
    created = (await client.post("/api/hospital/staff", json=STAFF, headers=headers)).json()
    resp = await client.delete(f"/api/hospital/staff/{created['id']}", headers=headers)
    assert resp.status_code == 200
    assert resp.json() == {"message": "Staff deleted"}
    assert (await client.get("/api/hospital/staff", headers=headers)).json() == []


async def test_out_of_range_staff_id_is_a_validation_error(client, register_hospital):
    headers = await register_hospital()
    url = "/api/hospital/staff/99999999999999999999"
    resp = await client.put(url, json={"salary": "1"}, headers=headers)
    assert resp.status_code == 400
    assert "message" in resp.json()
    assert (await client.delete(url, headers=headers)).status_code == 400
