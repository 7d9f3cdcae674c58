"""
Meal Plan Models

Contains the MealPlan model and the Meals scheduled inside it.
"""

from .base import db, new_id, utcnow


class MealPlan(db.Model):
    """Date-ranged meal plan. Deleting it removes its meals and grocery lists."""
    id = db.Column(db.String(36), primary_key=True, default=new_id)
    owner_id = db.Column(db.String(128), nullable=True, index=True)
    start_date = db.Column(db.Date, nullable=False)
    end_date = db.Column(db.Date, nullable=False)
    created_at = db.Column(db.DateTime(timezone=True), default=utcnow)
    updated_at = db.Column(db.DateTime(timezone=True), default=utcnow, onupdate=utcnow)
    meals = db.relationship('Meal', backref='meal_plan', lazy=True,
                            cascade='all, delete-orphan', order_by='Meal.date')
    grocery_lists = db.relationship('GroceryList', backref='meal_plan', lazy=True,
                                    cascade='all, delete-orphan')

    def to_dict(self):
        return {
            'id': self.id,
            'owner_id': self.owner_id,
            'start_date': self.start_date.isoformat(),
            'end_date': self.end_date.isoformat(),
            'created_at': self.created_at.isoformat() if self.created_at else None,
            'updated_at': self.updated_at.isoformat() if self.updated_at else None,
        }


class Meal(db.Model):
    """A meal on one date and meal-time slot, optionally backed by a recipe."""
    id = db.Column(db.String(36), primary_key=True, default=new_id)
    meal_plan_id = db.Column(db.String(36), db.ForeignKey('meal_plan.id', ondelete='CASCADE'),
                             nullable=False, index=True)
    date = db.Column(db.Date, nullable=False)
    meal_time = db.Column(db.String(20), nullable=False)  # breakfast, lunch, dinner, snack, custom
    title = db.Column(db.String(200), nullable=False)
    recipe_id = db.Column(db.String(36), db.ForeignKey('recipe.id', ondelete='SET NULL'),
                          nullable=True, index=True)
    description = db.Column(db.Text, nullable=True)
    servings = db.Column(db.Integer, nullable=False, default=1)
    created_at = db.Column(db.DateTime(timezone=True), default=utcnow)
    recipe = db.relationship('Recipe')

    def to_dict(self):
        return {
            'id': self.id,
            'meal_plan_id': self.meal_plan_id,
            'date': self.date.isoformat(),
            'meal_time': self.meal_time,
            'title': self.title,
            'recipe_id': self.recipe_id,
            'description': self.description,
            'servings': self.servings,
        }
