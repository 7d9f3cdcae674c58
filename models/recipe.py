"""
Recipe Model

Contains the Recipe model. Ingredients are stored as an ordered JSON list
of {name, amount, unit, preparation, optional} objects.
"""

from .base import db, new_id, utcnow


class Recipe(db.Model):
    """Recipe with an ordered ingredient list."""
    id = db.Column(db.String(36), primary_key=True, default=new_id)
    owner_id = db.Column(db.String(128), nullable=True, index=True)
    title = db.Column(db.String(200), nullable=False, index=True)
    ingredients = db.Column(db.JSON, nullable=False, default=list)
    # Ingredient amounts are declared for this many servings
    base_servings = db.Column(db.Integer, nullable=False, default=1)
    instructions = db.Column(db.Text, default='')
    url = db.Column(db.String(500), nullable=True)
    image_url = db.Column(db.String(500), nullable=True)
    created_at = db.Column(db.DateTime(timezone=True), default=utcnow)
    updated_at = db.Column(db.DateTime(timezone=True), default=utcnow, onupdate=utcnow)

    def to_dict(self):
        return {
            'id': self.id,
            'title': self.title,
            'ingredients': list(self.ingredients or []),
            'base_servings': self.base_servings or 1,
            'instructions': self.instructions or '',
            'url': self.url,
            'image_url': self.image_url,
            'created_at': self.created_at.isoformat() if self.created_at else None,
            'updated_at': self.updated_at.isoformat() if self.updated_at else None,
        }
