from datetime import datetime
from ayora.extensions import db

class User(db.Model):
    __tablename__ = "users"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(50), nullable=False)
    email = db.Column(db.String(120), nullable=False, unique=True, index=True)
    password = db.Column(db.String(255), nullable=False)
    role_id = db.Column(db.Integer, db.ForeignKey("roles.id"), index=True)
    is_active = db.Column(db.Boolean, nullable=False, default=True)
    last_login = db.Column(db.DateTime)
    doctor_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=True)

    # Profile
    age = db.Column(db.Integer)
    gender = db.Column(db.String(20))
    height_cm = db.Column(db.Numeric(6, 2))
    weight_kg = db.Column(db.Numeric(6, 2))
    medical_conditions = db.Column(db.JSON)
    allergies = db.Column(db.JSON)
    ayurvedic_body_type = db.Column(db.String(20))
    dietary_preferences = db.Column(db.JSON)
    emergency_contact = db.Column(db.JSON)

    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    role = db.relationship("Role", back_populates="users")
    doctor = db.relationship("User", remote_side=[id], backref="patients")
    meals = db.relationship(
        "Meal",
        back_populates="user",
        foreign_keys="Meal.user_id",
        cascade="all, delete-orphan",
    )

    @property
    def role_name(self):
        return self.role.name if self.role else ""
