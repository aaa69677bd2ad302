from datetime import datetime
from sqlalchemy import event
from ayora.extensions import db
from ayora.utils.enums import MealType, Unit, ReviewStatus

class Meal(db.Model):
    __tablename__ = "meals"
    __table_args__ = (
        db.Index("ix_meals_user_meal_date", "user_id", "meal_date"),
        db.Index("ix_meals_user_meal_type", "user_id", "meal_type"),
        db.Index("ix_meals_review_status", "review_status"),
    )

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False)
    meal_type = db.Column(db.String(20), nullable=False, default=MealType.OTHER.value)
    food_name = db.Column(db.String(200), nullable=False)
    description = db.Column(db.String(500))
    quantity = db.Column(db.Numeric(10, 2), nullable=False)
    unit = db.Column(db.String(20), nullable=False, default=Unit.SERVING.value)

    # Nutrition
    calories = db.Column(db.Numeric(10, 2), nullable=False, default=0)
    protein = db.Column(db.Numeric(10, 2), nullable=False, default=0)
    carbohydrates = db.Column(db.Numeric(10, 2), nullable=False, default=0)
    fat = db.Column(db.Numeric(10, 2), nullable=False, default=0)
    fiber = db.Column(db.Numeric(10, 2), nullable=False, default=0)
    sugar = db.Column(db.Numeric(10, 2), nullable=False, default=0)
    sodium = db.Column(db.Numeric(10, 2), nullable=False, default=0)
    ayurvedic_tag = db.Column(db.String(50))

    ayurvedic_properties = db.Column(db.JSON)
    image_data = db.Column(db.JSON)
    voice_data = db.Column(db.JSON)

    # Journal
    mood = db.Column(db.String(20))
    energy_level = db.Column(db.Integer, default=5)
    digestion = db.Column(db.String(20))
    notes = db.Column(db.String(1000))

    servings_planned = db.Column(db.Numeric(8, 2), nullable=False, default=1)
    servings_consumed = db.Column(db.Numeric(8, 2), nullable=False, default=1)
    servings_remaining = db.Column(db.Numeric(8, 2), nullable=False, default=0)

    # Doctor review
    reviewed_by = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=True)
    review_date = db.Column(db.DateTime)
    review_feedback = db.Column(db.Text)
    review_recommendations = db.Column(db.JSON)
    review_rating = db.Column(db.Integer)
    review_status = db.Column(db.String(30), nullable=False, default=ReviewStatus.PENDING.value)

    tags = db.Column(db.JSON)
    is_favorite = db.Column(db.Boolean, nullable=False, default=False)
    meal_date = db.Column(db.DateTime, default=datetime.utcnow, nullable=False, index=True)
    location = db.Column(db.String(100))

    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    user = db.relationship("User", back_populates="meals", foreign_keys=[user_id])
    reviewer = db.relationship("User", foreign_keys=[reviewed_by])

    @property
    def nutrition_score(self) -> float:
        return (
            float(self.protein or 0) * 4
            + float(self.carbohydrates or 0) * 4
            + float(self.fat or 0) * 9
            + float(self.fiber or 0) * 2
        )

    def refresh_remaining(self):
        planned = float(self.servings_planned if self.servings_planned is not None else 1)
        consumed = float(self.servings_consumed if self.servings_consumed is not None else 1)
        if planned > 0:
            self.servings_remaining = max(0.0, planned - consumed)


@event.listens_for(Meal, "before_insert")
@event.listens_for(Meal, "before_update")
def _keep_servings_remaining(mapper, connection, target):
    target.refresh_remaining()
