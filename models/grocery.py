"""
Grocery List Model

Contains the GroceryList model. Each generation request stores a new row;
items, meta and summary are kept as JSON documents.
"""

from .base import db, new_id, utcnow


class GroceryList(db.Model):
    """Generated grocery list owned by a meal plan."""
    id = db.Column(db.String(36), primary_key=True, default=new_id)
    meal_plan_id = db.Column(db.String(36), db.ForeignKey('meal_plan.id', ondelete='CASCADE'),
                             nullable=False, index=True)
    meta = db.Column(db.JSON, nullable=False, default=dict)
    items = db.Column(db.JSON, nullable=False, default=list)
    summary = db.Column(db.JSON, nullable=False, default=dict)
    created_at = db.Column(db.DateTime(timezone=True), default=utcnow, index=True)

    @classmethod
    def from_dict(cls, data):
        grocery_list = cls(
            meal_plan_id=data['meal_plan_id'],
            meta=data['meta'],
            items=data['items'],
            summary=data['summary'],
        )
        if data.get('id'):
            grocery_list.id = data['id']
        return grocery_list

    def to_dict(self):
        return {
            'id': self.id,
            'meal_plan_id': self.meal_plan_id,
            'meta': self.meta,
            'items': self.items,
            'summary': self.summary,
            'created_at': self.created_at.isoformat() if self.created_at else None,
        }
