import httpx
import pytest
from werkzeug.security import generate_password_hash

from ai_stub import create_stub_app
from ayora import create_app
from ayora.extensions import db
from ayora.models.role import Role
from ayora.models.user import User
from ayora.scripts.seed_roles import seed_roles
from ayora.services.ai_client import init_nutrition_client

PASSWORD = "secret123"

SEED_USERS = [
    ("patient", "Patient One", "patient@example.com"),
    ("other_patient", "Patient Two", "patient2@example.com"),
    ("doctor", "Doctor Who", "doctor@example.com"),
    ("other_doctor", "Doctor Strange", "doctor2@example.com"),
    ("admin", "Admin", "admin@example.com"),
]


@pytest.fixture()
def app(tmp_path):
    app = create_app({
        "TESTING": True,
        "SQLALCHEMY_DATABASE_URI": "sqlite:///:memory:",
        "SQLALCHEMY_TRACK_MODIFICATIONS": False,
        "SECRET_KEY": "test-secret",
        "UPLOAD_FOLDER": str(tmp_path / "uploads"),
    })
    # AI calls go to the in-process stub service
    init_nutrition_client(app, transport=httpx.WSGITransport(app=create_stub_app()))

    with app.app_context():
        db.create_all()
        seed_roles(verbose=False)

        for key, name, email in SEED_USERS:
            role_name = key.replace("other_", "")
            role = Role.query.filter_by(name=role_name).first()
            db.session.add(User(name=name, email=email, password=generate_password_hash(PASSWORD), role=role))
        db.session.commit()

        # patient is assigned to doctor, other_patient has no doctor
        patient = User.query.filter_by(email="patient@example.com").first()
        doctor = User.query.filter_by(email="doctor@example.com").first()
        patient.doctor_id = doctor.id
        db.session.commit()

    yield app

    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def user_ids(app):
    with app.app_context():
        return {key: User.query.filter_by(email=email).first().id for key, _, email in SEED_USERS}


def login(client, email, password=PASSWORD):
    r = client.post("/api/users/login", json={"email": email, "password": password})
    assert r.status_code == 200, r.data
    return {"Authorization": f"Bearer {r.get_json()['token']}"}


@pytest.fixture()
def patient_headers(client):
    return login(client, "patient@example.com")


@pytest.fixture()
def other_patient_headers(client):
    return login(client, "patient2@example.com")


@pytest.fixture()
def doctor_headers(client):
    return login(client, "doctor@example.com")


@pytest.fixture()
def other_doctor_headers(client):
    return login(client, "doctor2@example.com")


@pytest.fixture()
def admin_headers(client):
    return login(client, "admin@example.com")
