"""
Pantry Model

Contains the PantryItem model for what a user already has on hand.
"""

from .base import db, new_id, utcnow


class PantryItem(db.Model):
    """On-hand stock, consulted (never changed) when lists are generated."""
    id = db.Column(db.String(36), primary_key=True, default=new_id)
    owner_id = db.Column(db.String(128), nullable=True, index=True)
    item = db.Column(db.String(200), nullable=False)
    quantity = db.Column(db.Float, nullable=False, default=0.0)
    unit = db.Column(db.String(30), nullable=False, default='')
    created_at = db.Column(db.DateTime(timezone=True), default=utcnow)
    updated_at = db.Column(db.DateTime(timezone=True), default=utcnow, onupdate=utcnow)

    def to_dict(self):
        return {
            'id': self.id,
            'owner_id': self.owner_id,
            'item': self.item,
            'quantity': self.quantity,
            'unit': self.unit,
        }
