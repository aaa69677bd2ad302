import os
from ayora import create_app
from ayora.extensions import db
from ayora.models.role import Role
from ayora.models.user import User
from ayora.utils.auth import hash_password
from ayora.utils.enums import UserRole

app = create_app()

with app.app_context():
    # Ensure admin role exists
    admin_role = Role.query.filter_by(name=UserRole.ADMIN.value).first()
    if not admin_role:
        admin_role = Role(name=UserRole.ADMIN.value, description='Administrator')
        db.session.add(admin_role)
        db.session.commit()
        print('Created admin role')
    else:
        print('admin role already exists')

    # Ensure admin user exists
    admin_email = os.getenv('ADMIN_EMAIL', 'admin@ayora.com')
    admin_user = User.query.filter_by(email=admin_email).first()
    if not admin_user:
        admin_user = User(
            name='Admin User',
            email=admin_email,
            password=hash_password(os.getenv('ADMIN_PASSWORD', 'adminpass')),
            role=admin_role
        )
        db.session.add(admin_user)
        db.session.commit()
        print('Created admin user')
    else:
        print('Admin user already exists')
