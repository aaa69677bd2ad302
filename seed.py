from datetime import datetime, timedelta
from ayora import create_app
from ayora.extensions import db
from ayora.models.user import User
from ayora.models.meal import Meal
from ayora.models.role import Role
from ayora.scripts.seed_roles import seed_roles
from ayora.services.nutrition_lookup import analyze
from werkzeug.security import generate_password_hash

DEMO_PASSWORD = "password123"

app = create_app()

with app.app_context():
    # ensure tables exist (non-destructive: won't alter existing columns)
    db.create_all()
    seed_roles(verbose=False)

    def add_user(name, email, role_name, **profile):
        user = User.query.filter_by(email=email).first()
        if not user:
            role = Role.query.filter_by(name=role_name).first()
            user = User(name=name, email=email,
                        password=generate_password_hash(DEMO_PASSWORD), role=role, **profile)
            db.session.add(user)
            db.session.flush()
        return user

    doctor = add_user("Dr. Smith", "doctor@ayora.com", "doctor")
    patient = add_user("John Doe", "patient@ayora.com", "patient",
                       age=32, gender="male", height_cm=178, weight_kg=74,
                       ayurvedic_body_type="Vata", allergies=["peanuts"])
    patient.doctor_id = doctor.id

    def add_meal(food_name, meal_type, quantity, unit, days_ago, **extra):
        meal_date = datetime.utcnow() - timedelta(days=days_ago)
        if Meal.query.filter_by(user_id=patient.id, food_name=food_name).first():
            return
        nutrition = analyze(food_name, quantity, unit)
        db.session.add(Meal(user_id=patient.id, food_name=food_name, meal_type=meal_type,
                            quantity=quantity, unit=unit, meal_date=meal_date, **nutrition, **extra))

    add_meal("Oatmeal", "breakfast", 150, "grams", 0, mood="energetic", energy_level=7)
    add_meal("Dal", "lunch", 1, "bowl", 0, notes="With a little ghee")
    add_meal("Chicken", "dinner", 200, "grams", 1, digestion="normal")
    add_meal("Apple", "snack", 2, "piece", 2, servings_planned=2, servings_consumed=1)

    db.session.commit()

    print("Seed completed.")
    print(f"Demo accounts: {doctor.email} / {patient.email} (password: {DEMO_PASSWORD})")
