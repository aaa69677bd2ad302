from ayora.extensions import db
from ayora.models.role import Role
from ayora.utils.enums import UserRole

# Define the required roles for the application
REQUIRED_ROLES = [
    {"name": UserRole.PATIENT.value, "description": "Patient keeping a meal journal"},
    {"name": UserRole.DOCTOR.value, "description": "Doctor reviewing assigned patients"},
    {"name": UserRole.ADMIN.value, "description": "Administrator with full access"},
]

def seed_roles(verbose: bool = True):
    """Create missing roles in the database.

    This function can be executed manually (e.g., ``python -m ayora.scripts.seed_roles``)
    after migrations have been applied. It checks for each role in ``REQUIRED_ROLES``
    and inserts it if it does not already exist.
    """
    for role_data in REQUIRED_ROLES:
        role = Role.query.filter_by(name=role_data["name"]).first()
        if not role:
            role = Role(name=role_data["name"], description=role_data.get("description"))
            db.session.add(role)
            if verbose:
                print(f"Added role: {role.name}")
    db.session.commit()
    if verbose:
        print("Role seeding complete.")

if __name__ == "__main__":
    # When run as a script, ensure the Flask app context is available.
    from ayora import create_app
    app = create_app()
    with app.app_context():
        seed_roles()
